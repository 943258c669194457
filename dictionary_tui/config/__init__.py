"""Configuration management for Dictionary TUI."""

from .config import DictionaryConfig
from .defaults import create_default_config

__all__ = ["DictionaryConfig", "create_default_config"]
