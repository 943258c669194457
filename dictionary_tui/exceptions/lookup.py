"""Dictionary lookup exceptions."""

from .base import DictionaryException


class LookupFailedError(DictionaryException):
    """Base class for every way a word lookup can fail.

    The string form of each subclass is the message shown to the user.
    """

    pass


class EmptyInputError(LookupFailedError):
    """Raised when the word is empty after trimming."""

    def __init__(self):
        super().__init__("please enter a word to search")


class NetworkError(LookupFailedError):
    """Raised when the request could not reach the API."""

    def __init__(self, cause: Exception):
        super().__init__(f"network error: {cause}")
        self.cause = cause


class ApiStatusError(LookupFailedError):
    """Raised when the API answers with an unexpected status code."""

    def __init__(self, status_code: int):
        super().__init__(f"API returned status code {status_code}")
        self.status_code = status_code


class NotFoundError(LookupFailedError):
    """Raised when the API has no entry for the word (HTTP 404)."""

    def __init__(self, word: str):
        super().__init__(f"definition for '{word}' not found")
        self.word = word


class ReadError(LookupFailedError):
    """Raised when the response body cannot be read."""

    def __init__(self, cause: Exception):
        super().__init__(f"failed to read response body: {cause}")
        self.cause = cause


class ParseError(LookupFailedError):
    """Raised when the response body is not the expected JSON."""

    def __init__(self, cause: Exception | str):
        super().__init__(f"failed to parse API response: {cause}")
        self.cause = cause


class NoDataError(LookupFailedError):
    """Raised when the API returns an empty list of entries."""

    def __init__(self, word: str):
        super().__init__(f"no data found for '{word}'")
        self.word = word
