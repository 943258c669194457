"""Protocol for dictionary lookup clients."""

from typing import Protocol

from dictionary_tui.models import WordEntry


class DictionaryClientProtocol(Protocol):
    """Interface for anything that can resolve a word to dictionary entries.

    The session and CLI depend on this protocol rather than on the HTTP
    client, so tests can hand in a fake.
    """

    def lookup(self, word: str) -> list[WordEntry]:
        """Look up a word.

        Args:
            word: Word as typed by the user.

        Returns:
            Non-empty list of entries.

        Raises:
            LookupFailedError: If the lookup fails for any reason.
        """
        ...
