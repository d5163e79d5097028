"""Protocol definitions."""

from .tree import MutableSearchTree, SearchTree

__all__ = ["MutableSearchTree", "SearchTree"]
