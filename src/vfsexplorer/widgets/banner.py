"""Title banner replacing the default Textual Header."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static


def _build_banner(server_url: str) -> Text:
    """Build the banner as a Rich Text object: title and backend address."""
    text = Text()
    text.append("VFS", style="bold bright_cyan")
    text.append(" EXPLORER", style="bold bright_green")
    text.append(" │ ", style="dim")
    text.append(server_url, style="italic cyan")
    return text


class Banner(Vertical):
    """Application banner with title and server address."""

    DEFAULT_CSS = """
    Banner {
        width: 100%;
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }

    Banner > #banner-text {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, server_url: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.server_url = server_url

    def compose(self) -> ComposeResult:
        yield Static(_build_banner(self.server_url), id="banner-text")
