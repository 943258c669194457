"""Visual styles for terminal output."""

from .theme import Theme, create_default_theme

__all__ = ["Theme", "create_default_theme"]
