"""Entry list widget for displaying the contents of a directory."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static

from ..entries import DirectoryEntry, format_size

PARENT_ICON = "⮌"
DIRECTORY_ICON = "📁"
FILE_ICON = "📄"
LOCK_ICON = "🔒"


def entry_icon(entry: DirectoryEntry) -> str:
    """Pick the icon for an entry: parent, directory or file."""
    if entry.is_parent_marker:
        return PARENT_ICON
    return DIRECTORY_ICON if entry.is_directory else FILE_ICON


def entry_label(entry: DirectoryEntry) -> Text:
    """Build the row text for an entry."""
    text = Text()
    text.append(f"{entry_icon(entry)} ")
    text.append(entry.name, style="bold" if entry.is_parent_marker else "")
    if entry.full_size is not None and not entry.is_parent_marker:
        text.append(f"  {format_size(entry.full_size)}", style="dim")
    if not entry.has_permission:
        text.append(f"  {LOCK_ICON}")
    return text


class EntryItem(ListItem):
    """A list item representing a directory entry."""

    def __init__(self, entry: DirectoryEntry) -> None:
        classes = []
        if entry.is_parent_marker:
            classes.append("parent")
        if not entry.has_permission:
            classes.append("locked")
        super().__init__(classes=" ".join(classes))
        self.entry = entry

    def compose(self) -> ComposeResult:
        yield Label(entry_label(self.entry))


class EntryList(Vertical):
    """Widget displaying the entries of the current directory."""

    DEFAULT_CSS = """
    EntryList {
        width: 1fr;
        height: 1fr;
    }

    EntryList > #entry-header {
        background: $primary-background;
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    EntryList > #entry-list-view {
        height: 1fr;
    }

    EntryList ListItem {
        padding: 0 1;
    }

    EntryList ListItem:hover {
        background: $boost;
    }

    EntryList ListItem.--highlight {
        background: $accent;
    }

    EntryList ListItem.locked {
        color: $text-muted;
    }
    """

    class EntrySelected(Message):
        """Message emitted when a navigable entry is selected."""

        def __init__(self, entry: DirectoryEntry) -> None:
            super().__init__()
            self.entry = entry

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.entries: list[DirectoryEntry] = []

    def compose(self) -> ComposeResult:
        yield Static("ENTRIES", id="entry-header")
        yield ListView(id="entry-list-view")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#entry-list-view", ListView)

    def update_entries(self, entries: list[DirectoryEntry]) -> None:
        """Replace the displayed entries.

        Args:
            entries: Entries in display order
        """
        self.entries = list(entries)
        list_view = self.list_view
        list_view.clear()

        header = self.query_one("#entry-header", Static)
        count = sum(1 for e in entries if not e.is_parent_marker)
        header.update(f"ENTRIES ({count})")

        for entry in entries:
            list_view.append(EntryItem(entry))

        if entries:
            list_view.index = 0

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle entry selection (click or Enter)."""
        if event.item is not None and isinstance(event.item, EntryItem):
            # Files and locked directories are inert
            if event.item.entry.is_navigable:
                self.post_message(self.EntrySelected(event.item.entry))

    def get_selected_entry(self) -> DirectoryEntry | None:
        """Get the currently highlighted entry."""
        item = self.list_view.highlighted_child
        if isinstance(item, EntryItem):
            return item.entry
        return None
