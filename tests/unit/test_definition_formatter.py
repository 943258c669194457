"""Tests for DefinitionFormatter."""

import re

from rich.text import Text

from dictionary_tui.models import Definition, Meaning, WordEntry

POS_HEADER = re.compile(r"^(\d+)\. (\S+)$")
DEFINITION_ITEM = re.compile(r"^   (\d+)\. (.+)$")
EXAMPLE_ITEM = re.compile(r"^      • (.+)$")


def _headers(plain: str) -> list[tuple[int, str]]:
    return [
        (int(m.group(1)), m.group(2))
        for m in (POS_HEADER.match(line) for line in plain.splitlines())
        if m
    ]


def _items_per_meaning(plain: str) -> list[list[int]]:
    groups: list[list[int]] = []
    for line in plain.splitlines():
        if POS_HEADER.match(line):
            groups.append([])
        elif (m := DEFINITION_ITEM.match(line)) and groups:
            groups[-1].append(int(m.group(1)))
    return groups


class TestFormat:
    """Tests for DefinitionFormatter.format."""

    def test_returns_rich_text(self, formatter, serendipity_entries):
        assert isinstance(formatter.format(serendipity_entries[0]), Text)

    def test_first_line_has_word_and_phonetic(self, formatter, serendipity_entries):
        """Word and phonetic share the first line."""
        plain = formatter.format(serendipity_entries[0]).plain
        assert plain.splitlines()[0] == "serendipity /ˌsɛɹənˈdɪpɪti/"

    def test_phonetic_omitted_when_empty(self, formatter):
        entry = WordEntry(word="word", meanings=(Meaning("noun", (Definition("A unit."),)),))
        plain = formatter.format(entry).plain
        assert plain.splitlines()[0] == "word"

    def test_one_header_per_meaning_in_order(self, formatter, serendipity_entries):
        """Part-of-speech headers are numbered from 1 in original order."""
        plain = formatter.format(serendipity_entries[0]).plain
        assert _headers(plain) == [(1, "noun"), (2, "verb")]

    def test_one_item_per_definition_in_order(self, formatter, serendipity_entries):
        """Each meaning lists its definitions numbered from 1."""
        plain = formatter.format(serendipity_entries[0]).plain
        assert _items_per_meaning(plain) == [[1, 2], [1]]

    def test_counts_match_for_larger_entry(self, formatter):
        """Header and item counts track the entry's shape exactly."""
        meanings = tuple(
            Meaning(f"pos{i}", tuple(Definition(f"def {i}.{j}") for j in range(i + 1)))
            for i in range(4)
        )
        plain = formatter.format(WordEntry(word="many", meanings=meanings)).plain

        assert [pos for _, pos in _headers(plain)] == ["pos0", "pos1", "pos2", "pos3"]
        assert _items_per_meaning(plain) == [[1], [1, 2], [1, 2, 3], [1, 2, 3, 4]]

    def test_example_shown_only_when_present(self, formatter, serendipity_entries):
        """Only non-empty examples get a bullet line."""
        plain = formatter.format(serendipity_entries[0]).plain
        examples = [m.group(1) for m in map(EXAMPLE_ITEM.match, plain.splitlines()) if m]
        assert examples == ["Meeting her there was pure serendipity."]

    def test_definition_text_follows_number(self, formatter, serendipity_entries):
        plain = formatter.format(serendipity_entries[0]).plain
        assert "   2. An unsought, unintended, and/or unexpected discovery." in plain.splitlines()

    def test_entry_without_meanings(self, formatter):
        plain = formatter.format(WordEntry(word="bare")).plain
        assert plain == "bare\n\n"

    def test_word_styled_with_keyword_style(self, formatter, theme, serendipity_entries):
        text = formatter.format(serendipity_entries[0])
        word_spans = [s for s in text.spans if s.start == 0]
        assert word_spans and word_spans[0].style == theme.keyword

    def test_does_not_modify_entry(self, formatter, serendipity_entries):
        entry = serendipity_entries[0]
        before = entry
        formatter.format(entry)
        assert entry == before


class TestFormatFirst:
    """Tests for DefinitionFormatter.format_first."""

    def test_only_first_entry_rendered(self, formatter, serendipity_entries):
        """Later entries are dropped."""
        plain = formatter.format_first(serendipity_entries).plain
        assert "Second source sense." not in plain
        assert "adjective" not in plain
        assert plain == formatter.format(serendipity_entries[0]).plain
