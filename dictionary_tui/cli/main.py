"""Main CLI entry point for dictionary_tui."""

import argparse
import sys

from dictionary_tui import __build_date__, __commit__, __version__
from dictionary_tui.cli.commands.interactive import interactive_command
from dictionary_tui.cli.commands.lookup import lookup_command
from dictionary_tui.cli.help import format_help
from dictionary_tui.config import create_default_config
from dictionary_tui.exceptions import DictionaryException
from dictionary_tui.interfaces import PresenterProtocol
from dictionary_tui.presenters import ConsolePresenter
from dictionary_tui.services import DictionaryClient
from dictionary_tui.styles import create_default_theme
from dictionary_tui.utils import configure_logging


class UsageError(DictionaryException):
    """Raised by the parser instead of exiting on bad arguments."""

    pass


class DictionaryArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports errors instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> DictionaryArgumentParser:
    """Create the command-line parser.

    Help output is rendered separately (see format_help), so argparse's
    own -h handling is disabled.
    """
    parser = DictionaryArgumentParser(
        prog="dt",
        description="Look up English word definitions",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    parser.add_argument("--version", action="store_true", help="Show version information")
    parser.add_argument("-w", "--word", default="", help="Word to look up")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    parser.add_argument("words", nargs="*", help="Word to look up")
    return parser


def main(argv: list[str] | None = None, presenter: PresenterProtocol | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        presenter: Output target (a rich console presenter by default)

    Returns:
        Exit code
    """
    config = create_default_config()
    theme = create_default_theme()
    presenter = presenter or ConsolePresenter(theme, width=config.default_width)
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError:
        presenter.show_help(format_help(theme, __version__, config.default_width))
        return 0

    if args.help:
        presenter.show_help(format_help(theme, __version__, config.default_width))
        return 0

    if args.version:
        presenter.show_version(__version__, __commit__, __build_date__)
        return 0

    word = args.word or (args.words[0] if args.words else "")

    with DictionaryClient(config) as client:
        if word:
            configure_logging(verbose=args.verbose)
            return lookup_command(word, client, presenter)

        configure_logging(verbose=args.verbose, tui=True)
        return interactive_command(config, client, theme, presenter)


if __name__ == "__main__":
    sys.exit(main())
