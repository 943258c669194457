"""Theme definition shared by the formatter, console output and the TUI.

Styles are plain ``rich`` styles collected in a frozen dataclass so a single
instance can be built at startup and passed to whatever renders text:

    theme = create_default_theme()
    formatter = DefinitionFormatter(theme)
    presenter = ConsolePresenter(theme)

Colors are xterm 256-color indexes.
"""

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class Theme:
    """Named styles for every piece of styled output."""

    # Definition output
    keyword: Style = Style(color="color(205)", bold=True)
    definition: Style = Style(color="color(240)")
    phonetic: Style = Style(color="color(246)", italic=True)
    part_of_speech: Style = Style(color="color(213)", bold=True, underline=True)
    example: Style = Style(color="color(246)", italic=True)

    # Panels and banners
    panel_border: Style = Style(color="color(51)")
    title: Style = Style(color="color(205)", bold=True)

    # Help output
    help_header: Style = Style(color="color(205)", bold=True)
    help_section: Style = Style(color="color(213)", bold=True)
    help_text: Style = Style(color="color(252)")
    help_command: Style = Style(color="color(39)", bold=True)
    help_example: Style = Style(color="color(246)", italic=True)

    def css_color(self, name: str) -> str:
        """Return the foreground of a style as a Textual CSS color.

        Args:
            name: Attribute name of the style (e.g. "panel_border")

        Returns:
            Color in ``#rrggbb`` form, or "ansi_default" if the style has none
        """
        style: Style = getattr(self, name)
        if style.color is None:
            return "ansi_default"
        return style.color.get_truecolor().hex


def create_default_theme(**overrides) -> Theme:
    """Create the default theme with optional style overrides.

    Args:
        **overrides: Theme field names mapped to replacement styles

    Returns:
        Theme instance
    """
    return Theme(**overrides)
