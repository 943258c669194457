"""Data models for the interactive session."""

from dataclasses import dataclass
from enum import Enum

from rich.text import Text

from dictionary_tui.exceptions import LookupFailedError

WELCOME_TEXT = "Welcome! Search for a word to see its definition here."


class AppMode(Enum):
    """Which panel owns the keyboard."""

    SEARCH = "search"
    HISTORY = "history"


@dataclass
class SessionState:
    """Everything the interactive session displays.

    Owned by the event loop; never touched from worker threads.
    """

    mode: AppMode = AppMode.SEARCH
    input_value: str = ""
    input_focused: bool = True
    word: str = ""  # Last searched word
    definition: str | Text = WELCOME_TEXT  # Rendered content or a status placeholder
    error: LookupFailedError | None = None
    ready: bool = False  # Set once the terminal size is known
    width: int = 80
    height: int = 20
    input_width: int = 30
    latest_request_id: int = 0
    pending_requests: int = 0

    @property
    def is_loading(self) -> bool:
        return self.pending_requests > 0


@dataclass(frozen=True)
class LookupRequest:
    """A lookup dispatched from the event loop to a worker."""

    request_id: int
    word: str


@dataclass(frozen=True)
class LookupOutcome:
    """Result of a lookup, posted back to the event loop.

    Exactly one of ``content`` and ``error`` is set.
    """

    request_id: int
    word: str
    content: Text | None = None
    error: LookupFailedError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
