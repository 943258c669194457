"""Tests for ConsolePresenter."""

import io

import pytest
from rich.console import Console

from dictionary_tui.cli.help import format_help
from dictionary_tui.presenters import ConsolePresenter


def _console() -> Console:
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)


@pytest.fixture
def presenter(theme):
    """Create a presenter writing to in-memory consoles."""
    return ConsolePresenter(theme, console=_console(), error_console=_console())


def _stdout(presenter) -> str:
    return presenter.console.file.getvalue()


def _stderr(presenter) -> str:
    return presenter.error_console.file.getvalue()


class TestConsolePresenter:
    """Tests for each presenter method."""

    def test_definition_has_banner_and_panel(self, presenter, serendipity_entries):
        presenter.show_definition("serendipity", serendipity_entries[0])
        out = _stdout(presenter)

        assert "Dictionary-TUI: serendipity" in out
        assert "╭" in out and "╰" in out
        assert "1. noun" in out
        assert "• Meeting her there was pure serendipity." in out

    def test_panel_width(self, presenter, serendipity_entries):
        presenter.show_definition("serendipity", serendipity_entries[0])
        panel_lines = [line for line in _stdout(presenter).splitlines() if line.startswith("╭")]
        assert len(panel_lines[0]) == 80

    def test_error_goes_to_stderr(self, presenter):
        presenter.show_error("definition for 'xyzzy' not found")

        assert _stderr(presenter).strip() == "Error: definition for 'xyzzy' not found"
        assert _stdout(presenter) == ""

    def test_error_with_brackets_not_treated_as_markup(self, presenter):
        presenter.show_error("bad [bold]input[/bold]")
        assert "[bold]" in _stderr(presenter)

    def test_version(self, presenter):
        presenter.show_version("1.2.3", "abc123", "2026-01-01")
        assert _stdout(presenter).splitlines() == [
            "dictionary-tui version 1.2.3",
            "commit: abc123",
            "built at: 2026-01-01",
        ]

    def test_help(self, presenter, theme):
        presenter.show_help(format_help(theme, "1.0.0"))
        out = _stdout(presenter)
        assert "Dictionary-TUI 1.0.0" in out
        assert "USAGE:" in out
        assert "-w, --word" in out
        assert "dt serendipity" in out
