"""Client for the Free Dictionary API."""

import json
import logging
from urllib.parse import quote

import requests

from dictionary_tui.config import DictionaryConfig
from dictionary_tui.exceptions import (
    ApiStatusError,
    EmptyInputError,
    NetworkError,
    NoDataError,
    NotFoundError,
    ParseError,
    ReadError,
)
from dictionary_tui.models import WordEntry

logger = logging.getLogger(__name__)


class DictionaryClient:
    """Look up English words on dictionaryapi.dev.

    Every call is a fresh round trip: no caching and no retries. The
    underlying ``requests.Session`` only pools connections, so one client
    can serve lookups from several worker threads.

    Implements DictionaryClientProtocol.
    """

    def __init__(self, config: DictionaryConfig, session: requests.Session | None = None):
        """Initialize the client.

        Args:
            config: Configuration providing the API URL and request timeout
            session: Optional session to reuse (a new one is created otherwise)
        """
        self.config = config
        self._session = session or requests.Session()

    def lookup(self, word: str) -> list[WordEntry]:
        """Fetch all dictionary entries for a word.

        Args:
            word: Word to look up; surrounding whitespace and case are ignored

        Returns:
            Entries in the order the API returned them (never empty)

        Raises:
            EmptyInputError: If the word is blank (no request is made)
            NetworkError: If the API could not be reached
            NotFoundError: If the API has no entry for the word
            ApiStatusError: If the API answered with any other non-200 status
            ReadError: If the response body could not be read
            ParseError: If the body is not a JSON array of entry objects
            NoDataError: If the API returned an empty array
        """
        clean_word = word.strip().lower()
        if not clean_word:
            raise EmptyInputError()

        url = self.config.api_url.format(word=quote(clean_word, safe=""))
        logger.debug(f"GET {url}")

        try:
            response = self._session.get(url, timeout=self.config.request_timeout, stream=True)
        except requests.RequestException as e:
            logger.info(f"Lookup for '{clean_word}' failed: {e}")
            raise NetworkError(e) from e

        try:
            if response.status_code == 404:
                raise NotFoundError(clean_word)
            if response.status_code != 200:
                logger.warning(f"Unexpected status {response.status_code} for '{clean_word}'")
                raise ApiStatusError(response.status_code)

            try:
                body = response.content
            except (requests.RequestException, OSError) as e:
                raise ReadError(e) from e
        finally:
            response.close()

        return self._parse_entries(body, clean_word)

    @staticmethod
    def _parse_entries(body: bytes, word: str) -> list[WordEntry]:
        """Decode the API's JSON array into entries.

        Args:
            body: Raw response body
            word: Cleaned word, used in the empty-result error

        Returns:
            Parsed entries

        Raises:
            ParseError: If the body is malformed
            NoDataError: If the array is empty
        """
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ParseError(e) from e

        if not isinstance(data, list):
            raise ParseError(f"expected a JSON array, got {type(data).__name__}")
        if not data:
            raise NoDataError(word)

        entries = [WordEntry.from_dict(item) for item in data]
        logger.debug(f"Parsed {len(entries)} entries for '{word}'")
        return entries

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def __enter__(self) -> "DictionaryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
