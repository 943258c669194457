"""CLI command for a one-shot word lookup."""

import logging

from dictionary_tui.exceptions import LookupFailedError
from dictionary_tui.interfaces import DictionaryClientProtocol, PresenterProtocol

logger = logging.getLogger(__name__)


def lookup_command(
    word: str,
    client: DictionaryClientProtocol,
    presenter: PresenterProtocol,
) -> int:
    """Look up a single word and print its first entry.

    Args:
        word: Word given on the command line
        client: Client used for the lookup
        presenter: Where to show the definition or the error

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    try:
        entries = client.lookup(word)
    except LookupFailedError as e:
        logger.info(f"Lookup for '{word}' failed: {e}")
        presenter.show_error(str(e))
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error looking up '{word}'")
        presenter.show_error(f"unexpected error: {e}")
        return 1

    presenter.show_definition(word, entries[0])
    return 0
