"""Tests for the Textual application wiring."""

import httpx
from textual.widgets import LoadingIndicator

from vfsexplorer.app import VfsExplorerApp
from vfsexplorer.client import ListingClient
from vfsexplorer.config import Config
from vfsexplorer.widgets import EntryList, PathBar

LISTINGS = {
    "/home": {
        "path": "/home",
        "elapsed": 250,
        "files": [
            {"name": "b", "isDir": False, "path": "/home/b", "havePermission": True, "fullSize": 10},
            {"name": "a", "isDir": True, "path": "/home/a", "havePermission": True, "fullSize": 2048},
            {"name": "c", "isDir": True, "path": "/home/c", "havePermission": False, "fullSize": 0},
        ],
    },
    "/home/a": {"path": "/home/a", "files": []},
}


def handler(request: httpx.Request) -> httpx.Response:
    root = request.url.params.get("root", "/home")
    if root in LISTINGS:
        return httpx.Response(200, json=LISTINGS[root])
    return httpx.Response(403, json={"message": "access denied"})


def make_app(default_path: str = "") -> VfsExplorerApp:
    config = Config(server_url="http://vfs.test", default_path=default_path)
    client = ListingClient(config.server_url, transport=httpx.MockTransport(handler))
    return VfsExplorerApp(config, client=client)


async def settle(app, pilot) -> None:
    await app.controller.wait_idle()
    await pilot.pause()


class TestVfsExplorerApp:
    async def test_initial_listing(self):
        app = make_app()
        async with app.run_test() as pilot:
            await settle(app, pilot)

            entry_list = app.query_one("#entry-list", EntryList)
            assert [e.name for e in entry_list.entries] == ["../", "a", "b", "c"]
            assert app.query_one("#path-bar", PathBar).path == "/home"
            assert app.query_one("#loading", LoadingIndicator).display is False
            assert app.controller.state.current_path == "/home"

    async def test_select_directory(self):
        app = make_app(default_path="/home")
        async with app.run_test() as pilot:
            await settle(app, pilot)

            await pilot.press("down", "enter")
            await settle(app, pilot)

            assert app.query_one("#path-bar", PathBar).path == "/home/a"
            entry_list = app.query_one("#entry-list", EntryList)
            assert [e.name for e in entry_list.entries] == ["../"]

    async def test_locked_directory_is_inert(self):
        app = make_app(default_path="/home")
        async with app.run_test() as pilot:
            await settle(app, pilot)

            await pilot.press("down", "down", "down", "enter")
            await settle(app, pilot)

            assert app.controller.state.current_path == "/home"

    async def test_error_keeps_previous_listing(self):
        app = make_app(default_path="/home")
        async with app.run_test() as pilot:
            await settle(app, pilot)

            app.controller.navigate_to("/root")
            await settle(app, pilot)

            assert app.query_one("#path-bar", PathBar).path == "/home"
            assert app.controller.state.current_path == "/home"
            assert app.query_one("#loading", LoadingIndicator).display is False

    async def test_go_up_binding(self):
        app = make_app(default_path="/home/a")
        async with app.run_test() as pilot:
            await settle(app, pilot)
            assert app.controller.state.current_path == "/home/a"

            await pilot.press("backspace")
            await settle(app, pilot)

            assert app.controller.state.current_path == "/home"

    async def test_open_highlighted_entry(self):
        app = make_app(default_path="/home")
        async with app.run_test() as pilot:
            await settle(app, pilot)

            await pilot.press("down")
            entry = app.query_one("#entry-list", EntryList).get_selected_entry()
            assert entry.name == "a"

            await pilot.press("o")
            await settle(app, pilot)

            assert app.controller.state.current_path == "/home/a"

    async def test_open_locked_entry_is_inert(self):
        app = make_app(default_path="/home")
        async with app.run_test() as pilot:
            await settle(app, pilot)

            await pilot.press("down", "down", "down", "o")
            await settle(app, pilot)

            assert app.controller.state.current_path == "/home"
            assert app.query_one("#path-bar", PathBar).path == "/home"
