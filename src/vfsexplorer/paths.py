"""Path arithmetic for the virtual file tree."""

ROOT = "/"
SEPARATOR = "/"


def parent_of(path: str) -> str:
    """Return the parent of an absolute path.

    The root is a fixed point: ``parent_of("/") == "/"``. Any path with
    fewer than two segments left after dropping the last one resolves to
    the root as well (``parent_of("/home") == "/"``).
    """
    segments = path.split(SEPARATOR)
    segments.pop()
    if len(segments) < 2:
        return ROOT
    return SEPARATOR.join(segments)


def is_root(path: str | None) -> bool:
    """Check whether a path is the filesystem root."""
    return path == ROOT
