"""Data model for search history items."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryItem:
    """A previously searched word, as shown in the history list."""

    word: str

    def title(self) -> str:
        return self.word

    def description(self) -> str:
        return ""

    def filter_value(self) -> str:
        return self.word

    def __str__(self) -> str:
        return self.word
