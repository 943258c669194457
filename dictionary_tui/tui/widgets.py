"""Small widgets used by the dictionary app."""

from textual.widgets import Label, ListItem

from dictionary_tui.models import HistoryItem


class HistoryListItem(ListItem):
    """List row for one history entry."""

    def __init__(self, item: HistoryItem):
        super().__init__(Label(item.title()))
        self.item = item
