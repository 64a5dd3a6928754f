"""Current path label shown above the entry list."""

from rich.text import Text

from textual.widgets import Static

from ..entries import DirectoryEntry, format_size


class PathBar(Static):
    """Shows the directory being displayed and a short summary of it."""

    DEFAULT_CSS = """
    PathBar {
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $primary-background;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.path: str | None = None

    def update_path(
        self,
        path: str,
        entries: list[DirectoryEntry],
        elapsed_us: int | None = None,
    ) -> None:
        """Show a new current path.

        Args:
            path: Directory now displayed
            entries: Entries of that directory in display order
            elapsed_us: Backend scan time in microseconds, if reported
        """
        self.path = path
        files = [e for e in entries if not e.is_parent_marker]
        total = sum(e.full_size for e in files if e.full_size is not None)

        text = Text()
        text.append(path, style="bold")
        text.append(f"  {len(files)} entries, {format_size(total)}", style="dim")
        if elapsed_us is not None:
            text.append(f", scanned in {elapsed_us / 1000:.1f} ms", style="dim")
        self.update(text)
