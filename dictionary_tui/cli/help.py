"""Usage panel shown for --help and on argument errors."""

from rich import box
from rich.panel import Panel
from rich.text import Text

from dictionary_tui.styles import Theme


def format_help(theme: Theme, version: str, width: int = 80) -> Panel:
    """Build the usage panel.

    Args:
        theme: Styles for headers, commands and examples
        version: Version shown in the header
        width: Panel width

    Returns:
        A rounded panel ready to print
    """
    text = Text()

    def section(label: str) -> None:
        text.append("\n")
        text.append(label, style=theme.help_section)

    def line(content: str, style=None) -> None:
        text.append(content, style=style or theme.help_text)
        text.append("\n")

    def flag(name: str, description: str, indent: str = "") -> None:
        text.append(indent)
        text.append(name, style=theme.help_command)
        text.append("  ")
        line(description)

    text.append(f"Dictionary-TUI {version}", style=theme.help_header)
    text.append("\n\n")
    line("A dictionary application with interactive TUI and CLI interfaces.")

    section("USAGE: ")
    line("dt [FLAGS] [WORD]")
    line("       dt [WORD]")

    section("FLAGS: ")
    flag("-w, --word", "Specify a word to look up")
    flag("-h, --help", "Show this help message", indent="       ")
    flag("--version", "Show version information", indent="       ")
    flag("-v, --verbose", "Log debug output", indent="       ")

    section("MODES: ")
    line("1. Interactive Mode (TUI):")
    line("       Launch without arguments to enter the interactive interface.")
    line("       • Use F2 to access search history")
    line("       • Use Esc to go back to search")
    line("       • Use Ctrl+C to quit")
    line("       2. Command-Line Mode:")
    line("       Provide a word as an argument for quick definition lookup.")

    section("EXAMPLES: ")
    line("dt", style=theme.help_command)
    line("          # Launch interactive mode", style=theme.help_example)
    line("          dt serendipity", style=theme.help_command)
    line("          # Look up 'serendipity' directly", style=theme.help_example)
    line("          dt -w ephemeral", style=theme.help_command)
    text.append("          # Look up 'ephemeral' using flag syntax", style=theme.help_example)

    return Panel(
        text,
        box=box.ROUNDED,
        border_style=theme.panel_border,
        padding=(1, 2),
        width=width,
    )
