"""Null presenter for testing (no output)."""

from rich.console import RenderableType

from dictionary_tui.models import WordEntry


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_definition(self, word: str, entry: WordEntry) -> None:
        """Display a looked-up definition (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_help(self, help_panel: RenderableType) -> None:
        """Display the usage panel (no-op)."""
        pass

    def show_version(self, version: str, commit: str, build_date: str) -> None:
        """Display version information (no-op)."""
        pass
