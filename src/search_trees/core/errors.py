"""Exception hierarchy for search trees.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class TreeError(Exception):
    """Base exception for all search tree errors."""
    pass


class EmptyTreeError(TreeError):
    """Raised when a query needs at least one node but the tree is empty."""
    pass


class InvalidInputError(TreeError):
    """Raised when a builder receives input it cannot construct a tree from."""
    pass


class InvariantViolationError(TreeError):
    """Raised when a balanced tree is found with a broken balance invariant."""
    pass
