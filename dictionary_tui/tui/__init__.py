"""Interactive terminal interface."""

from .app import DictionaryApp

__all__ = ["DictionaryApp"]
