"""Turn dictionary entries into styled text."""

from collections.abc import Sequence

from rich.text import Text

from dictionary_tui.models import WordEntry
from dictionary_tui.styles import Theme

DEFINITION_INDENT = "   "
EXAMPLE_INDENT = "      "


class DefinitionFormatter:
    """Render a WordEntry as numbered, styled text (stateless service)."""

    def __init__(self, theme: Theme):
        """Initialize the formatter.

        Args:
            theme: Styles applied to each part of the output
        """
        self.theme = theme

    def format(self, entry: WordEntry) -> Text:
        """Format one entry.

        Output layout:

            word /phonetic/

            1. noun
               1. first definition
                  • example sentence

        Args:
            entry: Parsed dictionary entry

        Returns:
            Styled text; ``.plain`` gives the unstyled version
        """
        text = Text()
        text.append(entry.word, style=self.theme.keyword)
        if entry.phonetic:
            text.append(" ")
            text.append(entry.phonetic, style=self.theme.phonetic)
        text.append("\n\n")

        for i, meaning in enumerate(entry.meanings, 1):
            text.append(f"{i}. {meaning.part_of_speech}", style=self.theme.part_of_speech)
            text.append("\n")

            for j, definition in enumerate(meaning.definitions, 1):
                text.append(DEFINITION_INDENT)
                text.append(f"{j}.", style=self.theme.definition)
                text.append(f" {definition.definition}\n")
                if definition.example:
                    text.append(EXAMPLE_INDENT)
                    text.append(f"• {definition.example}", style=self.theme.example)
                    text.append("\n")
            text.append("\n")

        return text

    def format_first(self, entries: Sequence[WordEntry]) -> Text:
        """Format only the first entry of a lookup result.

        Later entries (alternate senses from other sources) are dropped.

        Args:
            entries: Non-empty lookup result

        Returns:
            Styled text for ``entries[0]``
        """
        return self.format(entries[0])
