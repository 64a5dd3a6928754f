"""Navigation state management for the directory browser."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .entries import DirectoryEntry, Listing, build_display_list
from .errors import ListingError
from .paths import is_root, parent_of

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderer(Protocol):
    """Presentation layer driven by the controller."""

    def show_loading(self) -> None: ...
    def hide_loading(self) -> None: ...
    def render_success(self, entries: list[DirectoryEntry], path: str) -> None: ...
    def render_error(self, message: str) -> None: ...


class ListingFetcher(Protocol):
    """Anything that can fetch a listing, e.g. ListingClient."""

    async def fetch_listing(self, root: str | None) -> Listing: ...


@dataclass
class NavigationState:
    """The directory currently shown and whether a request is outstanding."""

    current_path: str | None = None
    pending: bool = False
    elapsed_us: int | None = None  # backend scan time of the shown listing


class NavigationController:
    """Issue listing requests and feed their outcome to a renderer.

    Every navigation gets a sequence number. A response older than the
    last one applied is dropped, so the most recent navigation wins even
    when responses arrive out of order.
    """

    def __init__(
        self,
        client: ListingFetcher,
        renderer: Renderer,
        state: NavigationState | None = None,
    ) -> None:
        self.client = client
        self.renderer = renderer
        self.state = state if state is not None else NavigationState()
        self._dispatched_seq = 0
        self._applied_seq = 0
        self._in_flight = 0
        self._tasks: set[asyncio.Task[None]] = set()

    def initialize(self, default_path: str | None) -> asyncio.Task[None]:
        """Set the starting directory and request its listing."""
        self.state.current_path = default_path
        return self.navigate_to(default_path)

    def navigate_to(self, path: str | None) -> asyncio.Task[None]:
        """Request the listing of ``path`` without waiting for it.

        Args:
            path: Absolute directory path, or None for the server default

        Returns:
            The task completing this navigation
        """
        if path is not None and not path:
            raise ValueError("Navigation path must not be empty")

        self._dispatched_seq += 1
        seq = self._dispatched_seq
        self._in_flight += 1
        self.state.pending = True
        logger.debug("Navigation #%d dispatched: %r", seq, path)
        self.renderer.show_loading()

        task = asyncio.create_task(self._navigate(seq, path))
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def activate(self, entry: DirectoryEntry) -> asyncio.Task[None] | None:
        """Open an entry if it is a directory the user may enter."""
        if not entry.is_navigable:
            return None
        return self.navigate_to(entry.path)

    def go_up(self) -> asyncio.Task[None] | None:
        """Navigate to the parent of the current directory."""
        current = self.state.current_path
        if current is None or is_root(current):
            return None
        return self.navigate_to(parent_of(current))

    def refresh(self) -> asyncio.Task[None]:
        """Request the current directory again."""
        return self.navigate_to(self.state.current_path)

    async def wait_idle(self) -> None:
        """Wait until every dispatched navigation has completed."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def cancel_all(self) -> None:
        """Cancel outstanding navigations without touching the renderer."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _navigate(self, seq: int, path: str | None) -> None:
        cancelled = False
        try:
            try:
                listing = await self.client.fetch_listing(path)
            except ListingError as e:
                logger.warning("Navigation #%d to %r failed: %s", seq, path, e.message)
                self._apply_error(seq, e.message)
            else:
                self._apply_listing(seq, listing)
        except asyncio.CancelledError:
            cancelled = True
            raise
        finally:
            if not cancelled:
                self.renderer.hide_loading()

    def _on_done(self, task: asyncio.Task[None]) -> None:
        # Runs for every outcome, including tasks cancelled before they started
        self._tasks.discard(task)
        self._in_flight -= 1
        self.state.pending = self._in_flight > 0
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Navigation task failed", exc_info=error)

    def _is_stale(self, seq: int) -> bool:
        if seq < self._applied_seq:
            logger.debug(
                "Discarding navigation #%d, #%d already applied", seq, self._applied_seq
            )
            return True
        self._applied_seq = seq
        return False

    def _apply_listing(self, seq: int, listing: Listing) -> None:
        if self._is_stale(seq):
            return
        display = build_display_list(listing.entries, listing.path)
        self.state.current_path = listing.path
        self.state.elapsed_us = listing.elapsed_us
        logger.debug("Navigation #%d loaded %s (%d entries)", seq, listing.path, len(listing.entries))
        self.renderer.render_success(display, listing.path)

    def _apply_error(self, seq: int, message: str) -> None:
        if self._is_stale(seq):
            return
        self.renderer.render_error(message)
