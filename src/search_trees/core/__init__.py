"""Search trees core package."""

from .tree import BinaryTree

__all__ = ["BinaryTree"]
