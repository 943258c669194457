"""Default configuration values for Dictionary TUI."""

from .config import DictionaryConfig


def create_default_config(**overrides) -> DictionaryConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        DictionaryConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            request_timeout=5.0,
            max_history=20
        )
    """
    return DictionaryConfig(**overrides)
