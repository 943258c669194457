"""Textual application for interactive lookups."""

import logging
from functools import partial

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import ContentSwitcher, Input, Label, ListView, Static

from dictionary_tui.config import DictionaryConfig
from dictionary_tui.interfaces import DictionaryClientProtocol
from dictionary_tui.models import AppMode, LookupOutcome, LookupRequest
from dictionary_tui.services.definition_formatter import DefinitionFormatter
from dictionary_tui.session import SessionController, perform_lookup
from dictionary_tui.styles import Theme
from dictionary_tui.tui.widgets import HistoryListItem

logger = logging.getLogger(__name__)

DEFINITION_PANEL = "definition-panel"
HISTORY_PANEL = "history-panel"
HISTORY_TITLE = "Search History (F2 to switch)"


class DictionaryApp(App):
    """Full-screen dictionary with a search box and a history list.

    All state lives in a SessionController. Lookups run in thread workers
    that post a LookupCompleted message back, so the controller is only
    ever touched from the event loop.
    """

    TITLE = "Dictionary TUI"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        padding: 1 2;
    }

    #header {
        height: 1;
    }

    #search-input {
        border: none;
        height: 1;
        padding: 0;
    }

    #status {
        width: 1fr;
        text-align: right;
    }

    #content {
        border: round $accent;
        height: 1fr;
    }

    #history-title {
        text-style: bold;
        padding: 0 0 1 0;
    }

    #footer {
        height: 1;
    }

    #footer-help {
        width: 1fr;
    }

    #scroll-info {
        width: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        # Most terminals send Ctrl+H as Backspace; it only fires where the key is distinct
        Binding("f2,ctrl+h", "toggle_mode", "History", priority=True),
        Binding("escape", "cancel", "Search", show=False, priority=True),
    ]

    class LookupCompleted(Message):
        """Posted from a worker thread when a lookup finishes."""

        def __init__(self, outcome: LookupOutcome):
            super().__init__()
            self.outcome = outcome

    def __init__(
        self,
        config: DictionaryConfig,
        client: DictionaryClientProtocol,
        style_theme: Theme,
    ):
        """Initialize the app.

        Args:
            config: Session configuration
            client: Client used by lookup workers
            style_theme: Styles for definitions and status text
        """
        super().__init__()
        self.config = config
        self.client = client
        self.style_theme = style_theme
        self.formatter = DefinitionFormatter(style_theme)
        self.session = SessionController(config, style_theme)
        self._layout_ready = False

    def compose(self) -> ComposeResult:
        with Horizontal(id="header"):
            yield Input(
                placeholder=self.config.input_placeholder,
                max_length=self.config.input_char_limit,
                id="search-input",
            )
            yield Static(self.session.status_text(), id="status")
        with ContentSwitcher(initial=DEFINITION_PANEL, id="content"):
            with VerticalScroll(id=DEFINITION_PANEL):
                yield Static(id="definition")
            with Vertical(id=HISTORY_PANEL):
                yield Label(HISTORY_TITLE, id="history-title")
                yield ListView(id="history-list")
        with Horizontal(id="footer"):
            yield Static(id="footer-help")
            yield Static(id="scroll-info")

    def on_mount(self) -> None:
        content = self.query_one("#content", ContentSwitcher)
        content.styles.border = ("round", self.style_theme.css_color("panel_border"))
        self.query_one("#history-title", Label).styles.color = self.style_theme.css_color(
            "help_section"
        )
        self.watch(
            self.query_one(f"#{DEFINITION_PANEL}", VerticalScroll),
            "scroll_y",
            self._update_scroll_info,
        )
        self._layout_ready = True
        self._apply_size(self.size.width, self.size.height)

    # ------------------------------------------------------------------
    # Actions (key bindings)
    # ------------------------------------------------------------------

    def action_toggle_mode(self) -> None:
        self.session.toggle_mode()
        self._render_state()

    def action_cancel(self) -> None:
        if self.session.cancel():
            self._render_state()

    # ------------------------------------------------------------------
    # Widget events
    # ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        self.session.state.input_value = event.value

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.session.mode is not AppMode.SEARCH:
            return
        request = self.session.submit_search(event.value)
        if request is None:
            return
        event.input.value = ""
        self._dispatch(request)
        await self._refresh_history()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if self.session.mode is not AppMode.HISTORY:
            return
        word = event.item.item.word if isinstance(event.item, HistoryListItem) else None
        request = self.session.submit_history(word)
        if request is not None:
            self._dispatch(request)

    def on_resize(self, event: events.Resize) -> None:
        if self._layout_ready:
            self._apply_size(event.size.width, event.size.height)

    def _apply_size(self, width: int, height: int) -> None:
        """Propagate a terminal size to the session and the active widgets."""
        self.session.resize(width, height)
        state = self.session.state
        self.query_one("#search-input", Input).styles.width = state.input_width
        self.query_one("#content", ContentSwitcher).styles.max_width = (
            state.width + self.config.border_allowance
        )
        self._render_state()

    def on_dictionary_app_lookup_completed(self, message: LookupCompleted) -> None:
        if self.session.complete(message.outcome):
            self._render_state()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _dispatch(self, request: LookupRequest) -> None:
        """Show the loading placeholder and start a background lookup."""
        self._render_state()
        self.query_one(f"#{DEFINITION_PANEL}", VerticalScroll).scroll_home(animate=False)
        self.run_worker(
            partial(self._run_lookup, request),
            name=f"lookup-{request.request_id}",
            group="lookup",
            thread=True,
            exit_on_error=False,
        )

    def _run_lookup(self, request: LookupRequest) -> None:
        """Worker thread body."""
        outcome = perform_lookup(self.client, self.formatter, request)
        self.post_message(self.LookupCompleted(outcome))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_state(self) -> None:
        """Sync widgets with the session state."""
        state = self.session.state

        definition = state.definition
        if isinstance(definition, str):
            definition = Text(definition)
        self.query_one("#definition", Static).update(definition)
        self.query_one("#status", Static).update(self.session.status_text())
        self.query_one("#footer-help", Static).update(self.session.footer_text())

        switcher = self.query_one("#content", ContentSwitcher)
        search_input = self.query_one("#search-input", Input)
        if state.mode is AppMode.SEARCH:
            switcher.current = DEFINITION_PANEL
            if state.input_focused:
                search_input.focus()
            else:
                self.set_focus(None)
        else:
            switcher.current = HISTORY_PANEL
            self.query_one("#history-list", ListView).focus()

        self._update_scroll_info()

    async def _refresh_history(self) -> None:
        history_list = self.query_one("#history-list", ListView)
        await history_list.clear()
        await history_list.extend(HistoryListItem(item) for item in self.session.history)
        history_list.index = 0

    def _update_scroll_info(self, _value: float | None = None) -> None:
        panel = self.query_one(f"#{DEFINITION_PANEL}", VerticalScroll)
        if panel.max_scroll_y > 0:
            percent = int(panel.scroll_y / panel.max_scroll_y * 100)
        else:
            percent = 100
        self.query_one("#scroll-info", Static).update(f"{percent}%")
