"""Data models for Dictionary TUI."""

from .entry import Definition, Meaning, Phonetic, WordEntry
from .history import HistoryItem
from .session import AppMode, LookupOutcome, LookupRequest, SessionState

__all__ = [
    "Phonetic",
    "Definition",
    "Meaning",
    "WordEntry",
    "HistoryItem",
    "AppMode",
    "SessionState",
    "LookupRequest",
    "LookupOutcome",
]
