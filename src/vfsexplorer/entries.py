"""Directory entries, listing payload parsing and display ordering."""

from dataclasses import dataclass
from typing import Any

from .errors import MalformedResponseError
from .paths import is_root, parent_of

PARENT_ENTRY_NAME = "../"

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]

# Wire names first, then the long-form aliases
_DIRECTORY_KEYS = ("isDir", "isDirectory")
_PERMISSION_KEYS = ("havePermission", "hasPermission")


@dataclass(frozen=True)
class DirectoryEntry:
    """One file or directory in a listing."""

    name: str
    path: str | None
    is_directory: bool
    has_permission: bool
    is_parent_marker: bool = False
    full_size: int | None = None

    @property
    def is_navigable(self) -> bool:
        """Whether selecting this entry should open it."""
        return self.is_directory and self.has_permission and bool(self.path)


@dataclass(frozen=True)
class Listing:
    """A successful listing response."""

    path: str
    entries: tuple[DirectoryEntry, ...]
    elapsed_us: int | None = None


def parent_entry(path: str) -> DirectoryEntry:
    """Build the synthetic "go up" entry for a directory."""
    return DirectoryEntry(
        name=PARENT_ENTRY_NAME,
        path=parent_of(path),
        is_directory=True,
        has_permission=True,
        is_parent_marker=True,
    )


def build_display_list(
    entries: list[DirectoryEntry] | tuple[DirectoryEntry, ...], path: str
) -> list[DirectoryEntry]:
    """Order entries for display.

    Entries are sorted by name using code point comparison. ``sorted`` is
    stable, so equal names keep their order from the response. Outside the
    root a synthetic parent entry is put in front of the sorted entries.

    Args:
        entries: Entries as returned by the backend (left untouched)
        path: Directory the entries belong to

    Returns:
        A new list, ready to be rendered
    """
    display = sorted(entries, key=lambda entry: entry.name)
    if not is_root(path):
        display.insert(0, parent_entry(path))
    return display


def format_size(size: int) -> str:
    """Format a byte count with the largest unit keeping it under 1024."""
    current = float(size)
    unit = SIZE_UNITS[0]
    for unit in SIZE_UNITS:
        if current < 1024:
            break
        if unit != SIZE_UNITS[-1]:
            current /= 1024
    if unit == SIZE_UNITS[0]:
        return f"{int(current)} {unit}"
    return f"{current:.1f} {unit}"


def _get_flag(data: dict[str, Any], keys: tuple[str, ...], index: int) -> bool:
    for key in keys:
        if key in data:
            value = data[key]
            if not isinstance(value, bool):
                raise MalformedResponseError(
                    f"Malformed listing response: entry {index} field '{key}' is not a boolean"
                )
            return value
    # Missing flags fail closed: not a directory, no permission
    return False


def parse_entry(data: Any, index: int = 0) -> DirectoryEntry:
    """Validate one raw entry from a listing payload."""
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Malformed listing response: entry {index} is not an object"
        )

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedResponseError(
            f"Malformed listing response: entry {index} has no name"
        )

    path = data.get("path")
    if path is not None and not isinstance(path, str):
        raise MalformedResponseError(
            f"Malformed listing response: entry '{name}' has a non-string path"
        )

    full_size = data.get("fullSize")
    if full_size is not None and (
        isinstance(full_size, bool) or not isinstance(full_size, int)
    ):
        raise MalformedResponseError(
            f"Malformed listing response: entry '{name}' has a non-integer size"
        )

    return DirectoryEntry(
        name=name,
        path=path or None,
        is_directory=_get_flag(data, _DIRECTORY_KEYS, index),
        has_permission=_get_flag(data, _PERMISSION_KEYS, index),
        full_size=full_size,
    )


def parse_listing(payload: Any) -> Listing:
    """Validate a decoded 2xx payload and turn it into a Listing.

    Raises:
        MalformedResponseError: If any expected field is missing or mistyped
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Malformed listing response: expected a JSON object")

    path = payload.get("path")
    if not isinstance(path, str) or not path:
        raise MalformedResponseError("Malformed listing response: missing 'path'")

    if "files" not in payload:
        raise MalformedResponseError("Malformed listing response: missing 'files'")
    files = payload["files"]
    # Go encodes a nil slice as null
    if files is None:
        files = []
    if not isinstance(files, list):
        raise MalformedResponseError("Malformed listing response: 'files' is not a list")

    elapsed = payload.get("elapsed")
    if isinstance(elapsed, bool) or not isinstance(elapsed, int):
        elapsed = None

    entries = tuple(parse_entry(item, index) for index, item in enumerate(files))
    return Listing(path=path, entries=entries, elapsed_us=elapsed)
