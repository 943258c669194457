"""Data models for dictionary entries returned by the API."""

from dataclasses import dataclass
from typing import Any

from dictionary_tui.exceptions import ParseError


def _require_object(data: Any, kind: str) -> dict:
    if not isinstance(data, dict):
        raise ParseError(f"expected {kind} object, got {type(data).__name__}")
    return data


def _require_list(value: Any, kind: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ParseError(f"expected {kind} array, got {type(value).__name__}")
    return value


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class Phonetic:
    """A phonetic transcription with an optional pronunciation recording."""

    text: str = ""
    audio: str = ""  # URL of an audio file, may be empty

    @classmethod
    def from_dict(cls, data: Any) -> "Phonetic":
        data = _require_object(data, "phonetic")
        return cls(text=_as_text(data.get("text")), audio=_as_text(data.get("audio")))


@dataclass(frozen=True)
class Definition:
    """A single definition with an optional usage example."""

    definition: str
    example: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Definition":
        data = _require_object(data, "definition")
        return cls(
            definition=_as_text(data.get("definition")),
            example=_as_text(data.get("example")),
        )


@dataclass(frozen=True)
class Meaning:
    """Definitions grouped under one part of speech."""

    part_of_speech: str
    definitions: tuple[Definition, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Meaning":
        data = _require_object(data, "meaning")
        return cls(
            part_of_speech=_as_text(data.get("partOfSpeech")),
            definitions=tuple(
                Definition.from_dict(d)
                for d in _require_list(data.get("definitions"), "definitions")
            ),
        )


@dataclass(frozen=True)
class WordEntry:
    """One dictionary record for a word.

    Created fresh from each successful API response and never modified.
    """

    word: str
    phonetic: str = ""
    phonetics: tuple[Phonetic, ...] = ()
    meanings: tuple[Meaning, ...] = ()
    source_urls: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "WordEntry":
        """Build an entry from one element of the API's JSON array.

        Args:
            data: Decoded JSON object using the API's camelCase keys

        Returns:
            WordEntry with missing optional fields left empty

        Raises:
            ParseError: If the payload or a nested item has the wrong JSON type
        """
        data = _require_object(data, "entry")
        return cls(
            word=_as_text(data.get("word")),
            phonetic=_as_text(data.get("phonetic")),
            phonetics=tuple(
                Phonetic.from_dict(p) for p in _require_list(data.get("phonetics"), "phonetics")
            ),
            meanings=tuple(
                Meaning.from_dict(m) for m in _require_list(data.get("meanings"), "meanings")
            ),
            source_urls=tuple(
                u for u in _require_list(data.get("sourceUrls"), "sourceUrls") if isinstance(u, str)
            ),
        )

    def __str__(self) -> str:
        return f"{self.word} ({len(self.meanings)} meanings)"
