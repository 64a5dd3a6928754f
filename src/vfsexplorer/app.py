"""Main Textual application for vfsexplorer."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, LoadingIndicator

from .actions import NavigationActionsMixin
from .client import ListingClient
from .config import Config
from .entries import DirectoryEntry
from .navigation import NavigationController
from .widgets import Banner, EntryList, PathBar


class VfsExplorerApp(NavigationActionsMixin, App):
    """vfsexplorer - remote directory browser TUI.

    The app is the controller's renderer: it owns the widgets and turns
    navigation outcomes into widget updates.
    """

    TITLE = "vfsexplorer"
    SUB_TITLE = "Remote Directory Browser"

    CSS = """
    #loading {
        height: 1;
    }

    #entry-list {
        height: 1fr;
        border: solid $accent;
    }

    #entry-list:focus-within {
        border: solid cyan;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("o", "open_selected", "Open"),
        Binding("backspace", "go_up", "Up"),
        Binding("r", "refresh", "Refresh"),
        Binding("?", "help", "Help"),
    ]

    def __init__(self, config: Config, client: ListingClient | None = None) -> None:
        super().__init__()
        self.config = config
        if client is None:
            client = ListingClient(config.server_url, timeout=config.request_timeout)
        self.client = client
        self.controller = NavigationController(client, self)

    def compose(self) -> ComposeResult:
        yield Banner(self.config.server_url)
        yield PathBar(id="path-bar")
        yield LoadingIndicator(id="loading")
        yield EntryList(id="entry-list")
        yield Footer()

    def on_mount(self) -> None:
        """Request the starting directory once the widgets exist."""
        self.hide_loading()
        self.query_one("#entry-list", EntryList).list_view.focus()
        self.controller.initialize(self.config.get_default_path())

    async def on_unmount(self) -> None:
        """Drop outstanding requests and close the HTTP client."""
        await self.controller.cancel_all()
        await self.client.aclose()

    def show_loading(self) -> None:
        self.query_one("#loading", LoadingIndicator).display = True

    def hide_loading(self) -> None:
        self.query_one("#loading", LoadingIndicator).display = False

    def render_success(self, entries: list[DirectoryEntry], path: str) -> None:
        """Show a freshly loaded directory."""
        self.query_one("#entry-list", EntryList).update_entries(entries)
        self.query_one("#path-bar", PathBar).update_path(
            path, entries, self.controller.state.elapsed_us
        )

    def render_error(self, message: str) -> None:
        """Surface a failed navigation; the previous listing stays on screen."""
        self.notify(message, title="Request failed", severity="error", timeout=8)


def run_app(config: Config, start_path: str | None = None) -> None:
    """Run the vfsexplorer application."""
    if start_path:
        config.default_path = start_path
    app = VfsExplorerApp(config)
    app.run()
