"""Base exception classes for Dictionary TUI."""


class DictionaryException(Exception):
    """Base exception for all Dictionary TUI errors.

    All custom exceptions in the dictionary_tui package should inherit
    from this base class for consistent error handling.
    """

    pass


class ConfigurationError(DictionaryException):
    """Raised when a configuration value is invalid."""

    pass
