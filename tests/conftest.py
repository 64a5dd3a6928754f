"""Shared fixtures for vfsexplorer tests."""

import asyncio

import pytest

from vfsexplorer.entries import DirectoryEntry, Listing
from vfsexplorer.errors import ListingError


class RecordingRenderer:
    """Renderer that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.loading = False
        self.shown: list[DirectoryEntry] = []
        self.path: str | None = None
        self.errors: list[str] = []

    def show_loading(self) -> None:
        self.calls.append(("show_loading",))
        self.loading = True

    def hide_loading(self) -> None:
        self.calls.append(("hide_loading",))
        self.loading = False

    def render_success(self, entries, path) -> None:
        self.calls.append(("render_success", path))
        self.shown = entries
        self.path = path

    def render_error(self, message) -> None:
        self.calls.append(("render_error", message))
        self.errors.append(message)

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


class FakeClient:
    """Listing fetcher whose responses are released by the test.

    ``respond`` resolves the oldest unanswered request for a root, so tests
    control the order in which responses arrive.
    """

    def __init__(self) -> None:
        self.requests: list[str | None] = []
        self._waiting: dict[str | None, list[asyncio.Future]] = {}

    async def fetch_listing(self, root: str | None) -> Listing:
        self.requests.append(root)
        future = asyncio.get_running_loop().create_future()
        self._waiting.setdefault(root, []).append(future)
        result = await future
        if isinstance(result, ListingError):
            raise result
        return result

    def respond(self, root: str | None, result: Listing | ListingError) -> None:
        self._waiting[root].pop(0).set_result(result)


def make_entry(name, path=None, is_directory=False, has_permission=True, full_size=None):
    return DirectoryEntry(
        name=name,
        path=path,
        is_directory=is_directory,
        has_permission=has_permission,
        full_size=full_size,
    )


async def settle() -> None:
    """Let scheduled tasks run until they block on the fake client."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def home_listing():
    """The /home listing from the end-to-end example."""
    return Listing(
        path="/home",
        entries=(
            make_entry("b", path="/home/b"),
            make_entry("a", path="/home/a", is_directory=True),
        ),
    )
