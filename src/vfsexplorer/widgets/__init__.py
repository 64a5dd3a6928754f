"""vfsexplorer widgets."""

from .banner import Banner
from .entry_list import EntryList
from .path_bar import PathBar

__all__ = [
    "Banner",
    "EntryList",
    "PathBar",
]
