"""Action handler mixins for VfsExplorerApp."""

from .navigation_actions import NavigationActionsMixin

__all__ = [
    "NavigationActionsMixin",
]
