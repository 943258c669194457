"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import MagicMock

import pytest

from dictionary_tui.config import DictionaryConfig
from dictionary_tui.models import WordEntry
from dictionary_tui.presenters import NullPresenter
from dictionary_tui.services import DefinitionFormatter
from dictionary_tui.styles import create_default_theme

SERENDIPITY_PAYLOAD = [
    {
        "word": "serendipity",
        "phonetic": "/ˌsɛɹənˈdɪpɪti/",
        "phonetics": [
            {
                "text": "/ˌsɛɹənˈdɪpɪti/",
                "audio": "https://api.dictionaryapi.dev/media/pronunciations/en/serendipity-us.mp3",
            }
        ],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "A combination of events which have come together by chance "
                        "to make a surprisingly good or wonderful outcome.",
                        "example": "Meeting her there was pure serendipity.",
                    },
                    {"definition": "An unsought, unintended, and/or unexpected discovery."},
                ],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [
                    {"definition": "To find something by serendipity.", "example": ""},
                ],
            },
        ],
        "sourceUrls": ["https://en.wiktionary.org/wiki/serendipity"],
    },
    {
        "word": "serendipity",
        "phonetic": "",
        "phonetics": [],
        "meanings": [
            {
                "partOfSpeech": "adjective",
                "definitions": [{"definition": "Second source sense."}],
            }
        ],
        "sourceUrls": [],
    },
]


@pytest.fixture
def test_config():
    """Provide a test configuration."""
    return DictionaryConfig(request_timeout=10.0, max_history=10)


@pytest.fixture
def theme():
    """Provide the default theme."""
    return create_default_theme()


@pytest.fixture
def formatter(theme):
    """Provide a definition formatter."""
    return DefinitionFormatter(theme)


@pytest.fixture
def serendipity_payload():
    """Provide a realistic two-entry API response for 'serendipity'."""
    return json.loads(json.dumps(SERENDIPITY_PAYLOAD))


@pytest.fixture
def serendipity_entries(serendipity_payload):
    """Provide the parsed entries for 'serendipity'."""
    return [WordEntry.from_dict(item) for item in serendipity_payload]


@pytest.fixture
def make_response():
    """Factory fixture for fake requests.Response objects."""

    def _make(status_code=200, body=b"", payload=None):
        response = MagicMock()
        response.status_code = status_code
        if payload is not None:
            body = json.dumps(payload).encode("utf-8")
        response.content = body
        return response

    return _make


@pytest.fixture
def mock_session(make_response):
    """Provide a fake requests.Session whose get() returns a 200 with an empty body."""
    session = MagicMock()
    session.get.return_value = make_response()
    return session


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real presenter implementation that records all calls for assertion."""

    def __init__(self):
        self.definitions = []
        self.errors = []
        self.helps = []
        self.versions = []

    def show_definition(self, word, entry) -> None:
        self.definitions.append((word, entry))

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_help(self, help_panel) -> None:
        self.helps.append(help_panel)

    def show_version(self, version: str, commit: str, build_date: str) -> None:
        self.versions.append((version, commit, build_date))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


class FakeClient:
    """Dictionary client returning canned entries or raising a canned error."""

    def __init__(self, entries=None, error=None, release=None):
        self.entries = entries
        self.error = error
        self.release = release  # threading.Event the lookup waits on, if given
        self.calls = []

    def lookup(self, word: str):
        self.calls.append(word)
        if self.release is not None:
            self.release.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return self.entries


@pytest.fixture
def make_fake_client():
    """Factory fixture for FakeClient instances."""

    def _make(entries=None, error=None, release=None):
        return FakeClient(entries=entries, error=error, release=release)

    return _make
