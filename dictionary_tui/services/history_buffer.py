"""In-memory history of searched words."""

from collections.abc import Iterator

from dictionary_tui.models import HistoryItem


class HistoryBuffer:
    """Fixed-capacity list of searched words, newest first.

    Duplicates are kept. Adding beyond capacity drops the oldest word.
    """

    def __init__(self, capacity: int = 10):
        """Initialize an empty buffer.

        Args:
            capacity: Maximum number of words kept (must be at least 1)
        """
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: list[HistoryItem] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def items(self) -> tuple[HistoryItem, ...]:
        """History items, most recent first."""
        return tuple(self._items)

    @property
    def words(self) -> list[str]:
        return [item.word for item in self._items]

    def add(self, word: str) -> None:
        """Put a word at the front, evicting the oldest beyond capacity.

        Args:
            word: The searched word
        """
        self._items.insert(0, HistoryItem(word))
        del self._items[self._capacity :]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[HistoryItem]:
        return iter(self.items)
