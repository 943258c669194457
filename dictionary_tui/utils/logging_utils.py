"""Logging setup for the CLI and the TUI."""

import logging
import sys

from textual.logging import TextualHandler

PACKAGE_LOGGER = "dictionary_tui"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, tui: bool = False) -> logging.Logger:
    """Attach a single handler to the package logger.

    Records go to stderr in one-shot mode. Inside the TUI stderr belongs to
    the screen, so records go to the Textual devtools console instead.

    Args:
        verbose: Log at DEBUG instead of WARNING
        tui: Route records through Textual

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler: logging.Handler = TextualHandler() if tui else logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
