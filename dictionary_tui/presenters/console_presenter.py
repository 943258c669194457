"""Console presenter for CLI output."""

import sys

from rich import box
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text

from dictionary_tui.models import WordEntry
from dictionary_tui.services.definition_formatter import DefinitionFormatter
from dictionary_tui.styles import Theme


class ConsolePresenter:
    """Present output to the terminal using rich (CLI implementation)."""

    def __init__(
        self,
        theme: Theme,
        console: Console | None = None,
        error_console: Console | None = None,
        width: int = 80,
    ):
        """Initialize the presenter.

        Args:
            theme: Styles for banners, panels and definitions
            console: Console for normal output (stdout by default)
            error_console: Console for errors (stderr by default)
            width: Width of the definition panel
        """
        self.theme = theme
        self.console = console or Console()
        self.error_console = error_console or Console(file=sys.stderr)
        self.width = width
        self._formatter = DefinitionFormatter(theme)

    def show_definition(self, word: str, entry: WordEntry) -> None:
        """Display the title banner and the definition panel."""
        title = Text(f"Dictionary-TUI: {word}", style=self.theme.title)
        self.console.print()
        self.console.print(title)
        self.console.print()
        self.console.print(self.panel(self._formatter.format(entry)))

    def show_error(self, message: str) -> None:
        """Display an error message on stderr."""
        self.error_console.print(f"Error: {message}", markup=False, highlight=False)

    def show_help(self, help_panel: RenderableType) -> None:
        """Display the usage panel."""
        self.console.print(help_panel)

    def show_version(self, version: str, commit: str, build_date: str) -> None:
        """Display version information."""
        self.console.print(f"dictionary-tui version {version}", markup=False, highlight=False)
        self.console.print(f"commit: {commit}", markup=False, highlight=False)
        self.console.print(f"built at: {build_date}", markup=False, highlight=False)

    def panel(self, content: RenderableType) -> Panel:
        """Wrap content in the rounded CLI panel."""
        return Panel(
            content,
            box=box.ROUNDED,
            border_style=self.theme.panel_border,
            padding=(1, 2),
            width=self.width,
        )
