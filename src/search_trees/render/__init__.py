"""Diagram rendering for search trees."""

from .diagram import TreeLayout, draw_tree, layout_tree

__all__ = ["TreeLayout", "draw_tree", "layout_tree"]
