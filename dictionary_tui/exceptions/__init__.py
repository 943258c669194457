"""Custom exceptions for Dictionary TUI."""

from .base import ConfigurationError, DictionaryException
from .lookup import (
    ApiStatusError,
    EmptyInputError,
    LookupFailedError,
    NetworkError,
    NoDataError,
    NotFoundError,
    ParseError,
    ReadError,
)

__all__ = [
    "DictionaryException",
    "ConfigurationError",
    "LookupFailedError",
    "EmptyInputError",
    "NetworkError",
    "ApiStatusError",
    "NotFoundError",
    "ReadError",
    "ParseError",
    "NoDataError",
]
