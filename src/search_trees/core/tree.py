"""Binary tree base class shared by every search tree variant.

Owns the root reference, hands out construction-order ids and answers
shape-agnostic queries. Nothing here is cached: size, height and checksum are
recomputed by traversal on every call so they always match the current shape.
All traversals use an explicit stack, so degenerate trees of any depth are safe.
"""

from __future__ import annotations

from collections.abc import Iterator
from numbers import Number
from typing import Generic

from sortedcontainers import SortedDict

from .config import TreeConfig
from .errors import EmptyTreeError
from .node import Node
from .types import K, NodeRecord


class BinaryTree(Generic[K]):
    """Binary tree wrapper class.

    Args:
        config: Tree configuration, defaults when None

    Invariants:
        - Every node is reachable from exactly one parent link (or is the root)
        - order_id values are unique and increase in creation order
        - The order_id registry holds exactly the nodes reachable from root
    """

    __slots__ = ("_root", "_next_order_id", "_nodes", "config")

    def __init__(self, config: TreeConfig | None = None) -> None:
        self.config = config or TreeConfig()
        self._root: Node[K] | None = None
        self._next_order_id = 0
        self._nodes: SortedDict = SortedDict()

    @property
    def root(self) -> Node[K] | None:
        return self._root

    @property
    def next_order_id(self) -> int:
        return self._next_order_id

    def is_empty(self) -> bool:
        return self._root is None

    # -------------------------------
    # Node lifecycle
    # -------------------------------
    def _new_node(self, value: K) -> Node[K]:
        """Create a node with the next order_id and register it."""
        node = Node(value, self._next_order_id)
        self._next_order_id += 1
        self._nodes[node.order_id] = node
        return node

    def _release(self, node: Node[K]) -> None:
        """Forget a node that has been unlinked from the tree."""
        self._nodes.pop(node.order_id, None)
        node.left = None
        node.right = None

    def node(self, order_id: int) -> Node[K] | None:
        """Return the node created with order_id, or None if it is gone."""
        return self._nodes.get(order_id)

    # -------------------------------
    # Traversals
    # -------------------------------
    def _walk(self) -> Iterator[tuple[Node[K], int]]:
        """Yield (node, depth) in preorder; the root has depth 1."""
        if self._root is None:
            return
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))

    def in_order(self) -> Iterator[K]:
        """Yield the payloads in ascending (in-order) sequence."""
        stack: list[Node[K]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def to_list(self) -> list[K]:
        """Return all values of the tree in order as a list."""
        return list(self.in_order())

    def contains(self, value: K) -> bool:
        """Return True when a node with this payload exists."""
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    # -------------------------------
    # Queries
    # -------------------------------
    def size(self) -> int:
        """Count of nodes; 0 for an empty tree."""
        return sum(1 for _ in self._walk())

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
        return max((depth for _, depth in self._walk()), default=0)

    def average_depth(self) -> float:
        """Mean node depth with the root at depth 1.

        Raises:
            EmptyTreeError: If the tree has no nodes
        """
        count = 0
        total = 0
        for _, depth in self._walk():
            count += 1
            total += depth
        if count == 0:
            raise EmptyTreeError("average depth of an empty tree is undefined")
        return total / count

    def checksum(self) -> K | int:
        """Sum of all payloads for numeric trees, 0 for non-numeric payloads."""
        if self._root is None or not isinstance(self._root.value, Number):
            return 0
        total = 0
        for node, _ in self._walk():
            total += node.value
        return total

    # -------------------------------
    # Export
    # -------------------------------
    def export(self) -> list[NodeRecord]:
        """Describe every node and its children by order_id, in creation order."""
        records: list[NodeRecord] = []
        for order_id, node in self._nodes.items():
            records.append(
                NodeRecord(
                    order_id=order_id,
                    label=str(node.value),
                    left=node.left.order_id if node.left is not None else None,
                    right=node.right.order_id if node.right is not None else None,
                )
            )
        return records

    def pretty_print(self, indent_step: int | None = None) -> str:
        """Render the tree sideways: right subtree on top, left subtree below.

        Each payload is right-justified into a field that widens by indent_step
        columns per level, so the root sits leftmost.
        """
        if self._root is None:
            return "<empty>"
        step = self.config.indent_step if indent_step is None else indent_step

        lines: list[str] = []
        stack: list[tuple[Node[K], int]] = []
        node, depth = self._root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node, depth = node.right, depth + 1
            node, depth = stack.pop()
            lines.append(str(node.value).rjust(step * (depth + 1)))
            node, depth = node.left, depth + 1
        return "\n".join(lines)

    def print(self) -> None:
        print(self.pretty_print())

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[K]:
        return self.in_order()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()})"
