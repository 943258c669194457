"""State machine behind the interactive session.

The controller holds no widgets and does no I/O. The TUI feeds it user
events and lookup outcomes, then renders whatever state it ends up in.
Lookups are handed out as LookupRequest objects; running them is the
caller's job (see perform_lookup).
"""

import logging

from rich.text import Text

from dictionary_tui.config import DictionaryConfig
from dictionary_tui.exceptions import LookupFailedError
from dictionary_tui.interfaces import DictionaryClientProtocol
from dictionary_tui.models import AppMode, LookupOutcome, LookupRequest, SessionState
from dictionary_tui.services.definition_formatter import DefinitionFormatter
from dictionary_tui.services.history_buffer import HistoryBuffer
from dictionary_tui.styles import Theme

logger = logging.getLogger(__name__)

SEARCHING_TEXT = "Searching..."
LOADING_HINT = "Loading..."
DEFAULT_STATUS = "Dictionary TUI"
HEADER_HEIGHT = 1
FOOTER_HEIGHT = 1


class SessionController:
    """Search/History state machine for the interactive session."""

    def __init__(
        self,
        config: DictionaryConfig,
        theme: Theme,
        history: HistoryBuffer | None = None,
    ):
        """Initialize in Search mode with the input focused.

        Args:
            config: Session configuration
            theme: Styles for placeholders that include the word
            history: Optional pre-filled history buffer
        """
        self.config = config
        self.theme = theme
        self.history = history or HistoryBuffer(config.max_history)
        self.state = SessionState(
            width=config.default_width,
            height=config.default_height,
            input_width=config.default_width // 3,
        )
        self._next_request_id = 0

    @property
    def mode(self) -> AppMode:
        return self.state.mode

    # ------------------------------------------------------------------
    # Mode transitions
    # ------------------------------------------------------------------

    def toggle_mode(self) -> AppMode:
        """Switch between Search and History.

        Returns:
            The new mode
        """
        if self.state.mode is AppMode.SEARCH:
            self.state.mode = AppMode.HISTORY
            self.state.input_focused = False
        else:
            self.state.mode = AppMode.SEARCH
            self.state.input_focused = True
        return self.state.mode

    def cancel(self) -> bool:
        """Leave History mode.

        Returns:
            True if the mode changed, False if already in Search mode
        """
        if self.state.mode is not AppMode.HISTORY:
            return False
        self.state.mode = AppMode.SEARCH
        self.state.input_focused = True
        return True

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

    def submit_search(self, text: str) -> LookupRequest | None:
        """Confirm the search input.

        Args:
            text: Current contents of the search input

        Returns:
            A request to run, or None if the input is blank
        """
        word = text.strip()
        if not word:
            return None

        self.state.word = word
        self.state.input_value = ""
        self.state.input_focused = False
        self.history.add(word)
        self.state.definition = SEARCHING_TEXT
        return self._new_request(word)

    def submit_history(self, word: str | None) -> LookupRequest | None:
        """Confirm the selected history item.

        Args:
            word: Selected word, or None if the list is empty

        Returns:
            A request to run, or None if nothing is selected
        """
        if not word:
            return None

        self.state.mode = AppMode.SEARCH
        self.state.word = word
        self.state.input_focused = True
        self.state.definition = Text.assemble(
            "Reviewing definition for: ", (word, self.theme.keyword), "..."
        )
        return self._new_request(word)

    def _new_request(self, word: str) -> LookupRequest:
        self._next_request_id += 1
        self.state.latest_request_id = self._next_request_id
        self.state.pending_requests += 1
        logger.debug(f"Dispatching lookup #{self._next_request_id} for '{word}'")
        return LookupRequest(request_id=self._next_request_id, word=word)

    # ------------------------------------------------------------------
    # Lookup completion
    # ------------------------------------------------------------------

    def complete(self, outcome: LookupOutcome) -> bool:
        """Apply a finished lookup.

        Args:
            outcome: Result posted back by the worker

        Returns:
            True if the outcome was applied, False if it was stale and dropped
        """
        self.state.pending_requests = max(0, self.state.pending_requests - 1)

        if (
            self.config.discard_stale_results
            and outcome.request_id != self.state.latest_request_id
        ):
            logger.debug(
                f"Dropping stale lookup #{outcome.request_id} for '{outcome.word}' "
                f"(latest is #{self.state.latest_request_id})"
            )
            return False

        if not outcome.succeeded:
            self.state.error = outcome.error
            self.state.definition = error_text(outcome.error)
        else:
            self.state.error = None
            self.state.definition = outcome.content if outcome.content is not None else ""

        # The history list keeps focus if the user switched over meanwhile
        if self.state.mode is AppMode.SEARCH:
            self.state.input_focused = True
        return True

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """Recompute the content area for a new terminal size.

        Args:
            width: Terminal width in cells
            height: Terminal height in cells
        """
        h_pad = self.config.horizontal_padding * 2 * 2
        v_pad = self.config.vertical_padding * 2 * 2
        border = self.config.border_allowance

        self.state.width = max(1, width - h_pad - border)
        self.state.height = max(1, height - HEADER_HEIGHT - FOOTER_HEIGHT - v_pad - border)
        self.state.input_width = max(1, self.state.width // 3)
        self.state.ready = True

    # ------------------------------------------------------------------
    # Display text
    # ------------------------------------------------------------------

    def status_text(self) -> Text:
        """Right-hand side of the header."""
        if self.state.word:
            return Text.assemble("Last Search: ", (self.state.word, self.theme.keyword))
        return Text(DEFAULT_STATUS)

    def footer_text(self) -> str:
        """Key hints for the current mode, plus a marker while lookups run.

        The scroll percentage is rendered next to this by the TUI.
        """
        if self.state.mode is AppMode.SEARCH:
            mode_help = "(F2 for History)"
        else:
            mode_help = "(Esc to Search)"
        text = f"Press Ctrl+C to quit {mode_help}"
        if self.state.is_loading:
            text += f" \u2022 {LOADING_HINT}"
        return text


def error_text(error: LookupFailedError) -> str:
    """Status text shown in place of a definition after a failed lookup."""
    return f"Error fetching definition: {error}\nPress Enter to try again."


def perform_lookup(
    client: DictionaryClientProtocol,
    formatter: DefinitionFormatter,
    request: LookupRequest,
) -> LookupOutcome:
    """Run a lookup to completion. Blocking; meant for a worker thread.

    Args:
        client: Client used to fetch entries
        formatter: Formatter for the first entry
        request: The request handed out by SessionController

    Returns:
        Outcome carrying either the formatted text or the error
    """
    try:
        entries = client.lookup(request.word)
        content = formatter.format_first(entries)
    except LookupFailedError as e:
        logger.info(f"Lookup for '{request.word}' failed: {e}")
        return LookupOutcome(request_id=request.request_id, word=request.word, error=e)
    except Exception as e:
        logger.exception(f"Unexpected error looking up '{request.word}'")
        return LookupOutcome(
            request_id=request.request_id,
            word=request.word,
            error=LookupFailedError(f"unexpected error: {e}"),
        )

    return LookupOutcome(request_id=request.request_id, word=request.word, content=content)
