"""Presenter protocol for one-shot output."""

from typing import Protocol

from rich.console import RenderableType

from dictionary_tui.models import WordEntry


class PresenterProtocol(Protocol):
    """Interface for presenting one-shot CLI output to the user."""

    def show_definition(self, word: str, entry: WordEntry) -> None:
        """Display a looked-up definition.

        Args:
            word: The word as requested on the command line
            entry: The entry to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_help(self, help_panel: RenderableType) -> None:
        """Display the usage panel.

        Args:
            help_panel: Pre-rendered help content
        """
        ...

    def show_version(self, version: str, commit: str, build_date: str) -> None:
        """Display version information.

        Args:
            version: Release version
            commit: Source commit the build came from
            build_date: When the build was made
        """
        ...
