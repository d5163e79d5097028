"""Tree diagram rendering.

Turns the per-node export of a tree into a drawing: x position is the
in-order rank, y position is minus the depth. Absent children can be shown as
explicit placeholder nodes; those exist only in the layout, never in the tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib

# Set backend before importing pyplot
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Ellipse  # noqa: E402

from ..core.config import DiagramConfig  # noqa: E402
from ..core.errors import EmptyTreeError  # noqa: E402

if TYPE_CHECKING:
    from ..interfaces.tree import SearchTree

logger = logging.getLogger(__name__)


@dataclass
class TreeLayout:
    """Positioned nodes and edges ready for drawing.

    Placeholder ids are allocated after the largest real order_id.
    """

    root_id: int | None = None
    positions: dict[int, tuple[float, float]] = field(default_factory=dict)
    labels: dict[int, str] = field(default_factory=dict)
    edges: list[tuple[int, int]] = field(default_factory=list)
    null_ids: set[int] = field(default_factory=set)


def layout_tree(tree: SearchTree, config: DiagramConfig | None = None) -> TreeLayout:
    """Compute a layered layout for tree without modifying it."""
    config = config or DiagramConfig()
    if tree.root is None:
        return TreeLayout()

    records = {record["order_id"]: record for record in tree.export()}
    layout = TreeLayout(root_id=tree.root.order_id)
    next_null_id = max(records) + 1
    column = 0

    # In-order walk; entries are (expand?, order_id or None, depth, parent id)
    stack: list[tuple[bool, int | None, int, int | None]] = [
        (True, layout.root_id, 0, None)
    ]
    while stack:
        expand, node_id, depth, parent = stack.pop()

        if node_id is None:
            if config.include_null_leaves:
                layout.null_ids.add(next_null_id)
                layout.labels[next_null_id] = config.null_label
                layout.positions[next_null_id] = (float(column), float(-depth))
                layout.edges.append((parent, next_null_id))
                next_null_id += 1
                column += 1
            continue

        if expand:
            record = records[node_id]
            stack.append((True, record["right"], depth + 1, node_id))
            stack.append((False, node_id, depth, parent))
            stack.append((True, record["left"], depth + 1, node_id))
            continue

        layout.labels[node_id] = records[node_id]["label"]
        layout.positions[node_id] = (float(column), float(-depth))
        column += 1
        if parent is not None:
            layout.edges.append((parent, node_id))

    return layout


def draw_tree(
    tree: SearchTree, output_path: str | Path, config: DiagramConfig | None = None
) -> Path:
    """Draw tree and save it; the file format follows the suffix of output_path.

    Raises:
        EmptyTreeError: If the tree has no nodes
    """
    config = config or DiagramConfig()
    layout = layout_tree(tree, config)
    if layout.root_id is None:
        raise EmptyTreeError("Cannot draw an empty tree")

    xs = [x for x, _ in layout.positions.values()]
    ys = [y for _, y in layout.positions.values()]
    columns = max(xs) - min(xs) + 1
    levels = max(ys) - min(ys) + 1
    figure_size = config.figure_size or (max(4.0, columns * 0.6), max(3.0, levels * 0.9))

    path = Path(output_path)
    fig, ax = plt.subplots(figsize=figure_size)
    try:
        for parent, child in layout.edges:
            ax.annotate(
                "",
                xy=layout.positions[child],
                xytext=layout.positions[parent],
                arrowprops=dict(arrowstyle="->", color=config.edge_color, shrinkA=10, shrinkB=10),
                zorder=1,
            )

        for node_id, (x, y) in layout.positions.items():
            is_null = node_id in layout.null_ids
            ax.add_patch(
                Ellipse(
                    (x, y),
                    width=config.null_width if is_null else config.node_size,
                    height=config.node_size,
                    facecolor=config.null_color if is_null else config.node_color,
                    edgecolor="black",
                    zorder=2,
                )
            )
            ax.text(x, y, layout.labels[node_id], ha="center", va="center", fontsize=7, zorder=3)

        ax.set_xlim(min(xs) - 1, max(xs) + 1)
        ax.set_ylim(min(ys) - 1, max(ys) + 1)
        ax.set_aspect("equal")
        ax.axis("off")

        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=config.dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info(f"Saved tree diagram with {len(layout.positions)} nodes to {path}")
    return path
