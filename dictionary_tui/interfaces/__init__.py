"""Interface protocols for Dictionary TUI."""

from .dictionary_client import DictionaryClientProtocol
from .presenter import PresenterProtocol

__all__ = ["DictionaryClientProtocol", "PresenterProtocol"]
