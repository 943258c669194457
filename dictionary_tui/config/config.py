"""Configuration classes for Dictionary TUI."""

from dataclasses import dataclass

from dictionary_tui.exceptions import ConfigurationError


@dataclass(frozen=True)
class DictionaryConfig:
    """Immutable configuration for lookups and the interactive session.

    The config is built once at startup and handed to every service,
    so nothing downstream can change it mid-session.
    """

    # API settings
    api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
    request_timeout: float = 10.0  # Seconds per request, no retries

    # History settings
    max_history: int = 10

    # Layout settings
    default_width: int = 80  # CLI panel width and viewport width before first resize
    default_height: int = 20
    horizontal_padding: int = 2  # App padding, left and right
    vertical_padding: int = 1  # App padding, top and bottom
    border_allowance: int = 2  # Rounded panel border

    # Search input settings
    input_char_limit: int = 50
    input_placeholder: str = "Enter word..."

    # Drop completions from lookups that were superseded by a newer one
    discard_stale_results: bool = True

    def __post_init__(self):
        """Validate values that would break the session."""
        if self.max_history < 1:
            raise ConfigurationError(f"max_history must be at least 1, got {self.max_history}")
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be positive, got {self.request_timeout}"
            )
        if "{word}" not in self.api_url:
            raise ConfigurationError(f"api_url must contain a '{{word}}' placeholder: {self.api_url}")
