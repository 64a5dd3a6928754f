"""Navigation action handlers for VfsExplorerApp."""

from __future__ import annotations

from ..widgets import EntryList


class NavigationActionsMixin:
    """Mixin providing navigation actions (open, go up, refresh, help)."""

    def action_go_up(self) -> None:
        """Open the parent of the current directory."""
        if self.controller.go_up() is not None:
            return
        if self.controller.state.current_path is None:
            self.notify("No directory loaded yet", severity="warning")
        else:
            self.notify("Already at the root", severity="warning")

    def action_open_selected(self) -> None:
        """Open the highlighted entry if it is an accessible directory."""
        entry = self.query_one("#entry-list", EntryList).get_selected_entry()
        if entry is None:
            return
        if entry.is_navigable:
            self.controller.activate(entry)
        elif not entry.has_permission:
            self.notify(f"No permission to open {entry.name}", severity="warning")
        else:
            self.notify(f"{entry.name} is not a directory", severity="warning")

    def action_refresh(self) -> None:
        """Reload the current directory."""
        self.controller.refresh()

    def on_entry_list_entry_selected(self, event: EntryList.EntrySelected) -> None:
        """Handle a click or Enter on a navigable entry."""
        self.controller.activate(event.entry)

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "Enter/o=Open, Backspace=Up, r=Refresh, q=Quit",
            timeout=5,
        )
