"""Services for Dictionary TUI."""

from .definition_formatter import DefinitionFormatter
from .dictionary_client import DictionaryClient
from .history_buffer import HistoryBuffer

__all__ = [
    "DefinitionFormatter",
    "DictionaryClient",
    "HistoryBuffer",
]
