"""Configuration for search trees.

Defines the tunable parameters for tree behaviour and diagram rendering.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeConfig:
    """Configuration parameters shared by every tree variant.

    Attributes:
        indent_step: Columns added per depth level by the text display
        check_invariants: Validate the AVL balance invariant after every mutation
    """

    indent_step: int = 10
    check_invariants: bool = False


@dataclass
class DiagramConfig:
    """Configuration parameters for the tree diagram renderer.

    Attributes:
        include_null_leaves: Draw placeholder nodes for absent children
        null_label: Text shown inside placeholder nodes
        node_color: Fill color of real nodes
        null_color: Fill color of placeholder nodes
        edge_color: Stroke color of parent-to-child arrows
        node_size: Width and height of a real node, in layout units
        null_width: Width of a placeholder node, in layout units
        figure_size: Matplotlib figure size in inches
        dpi: Resolution used for raster output formats
    """

    include_null_leaves: bool = True
    null_label: str = "NULL"
    node_color: str = "#FFFF00"
    null_color: str = "#FF0000"
    edge_color: str = "#0000FF"
    node_size: float = 0.8
    null_width: float = 1.1
    figure_size: tuple[float, float] | None = None
    dpi: int = 100
