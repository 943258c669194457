"""CLI command for the interactive full-screen session."""

import logging

from dictionary_tui.config import DictionaryConfig
from dictionary_tui.interfaces import DictionaryClientProtocol, PresenterProtocol
from dictionary_tui.styles import Theme
from dictionary_tui.tui import DictionaryApp

logger = logging.getLogger(__name__)


def interactive_command(
    config: DictionaryConfig,
    client: DictionaryClientProtocol,
    theme: Theme,
    presenter: PresenterProtocol,
) -> int:
    """Run the interactive session until the user quits.

    Args:
        config: Session configuration
        client: Client used by lookup workers
        theme: Styles for definitions and status text
        presenter: Where to report a crash of the session itself

    Returns:
        Exit code (0 = normal quit, 1 = the app crashed)
    """
    app = DictionaryApp(config, client, theme)
    try:
        app.run()
    except Exception as e:
        logger.exception("Error running program")
        presenter.show_error(f"error running program: {e}")
        return 1
    return app.return_code or 0
