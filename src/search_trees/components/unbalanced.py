"""Unbalanced binary search tree.

Classic insert/delete with no rebalancing: the shape is whatever the
insertion order produced, O(n) height in the worst case. Both operations walk
the tree iteratively, so a degenerate chain cannot exhaust the call stack.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.config import TreeConfig
from ..core.node import Node
from ..core.tree import BinaryTree
from ..core.types import K

logger = logging.getLogger(__name__)


class UnbalancedTree(BinaryTree[K]):
    """Binary search tree derived from BinaryTree.

    Args:
        values: Optional values inserted one by one in the given order
        config: Tree configuration

    Invariants:
        - In-order traversal yields strictly increasing values
        - No two nodes hold equal values
    """

    __slots__ = ()

    def __init__(self, values: Iterable[K] = (), config: TreeConfig | None = None) -> None:
        super().__init__(config)
        for value in values:
            self.insert(value)

    def _link(self, parent: Node[K] | None, went_left: bool, child: Node[K] | None) -> None:
        """Store child in the slot parent.left/parent.right, or at the root."""
        if parent is None:
            self._root = child
        elif went_left:
            parent.left = child
        else:
            parent.right = child

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, value: K) -> bool:
        """Insert value as a new leaf.

        Returns:
            True if a node was created, False if the value was already present
        """
        parent: Node[K] | None = None
        went_left = False
        node = self._root
        while node is not None:
            if value < node.value:
                parent, went_left, node = node, True, node.left
            elif value > node.value:
                parent, went_left, node = node, False, node.right
            else:
                return False

        self._link(parent, went_left, self._new_node(value))
        return True

    # -------------------------------
    # Delete
    # -------------------------------
    def delete(self, value: K) -> bool:
        """Remove the node holding value.

        A node with two children is replaced by its in-order predecessor
        (rightmost node of the left subtree), which is unlinked from its old
        position and spliced into the deleted node's slot.

        Returns:
            True if a node was removed, False if value was not found
        """
        parent: Node[K] | None = None
        went_left = False
        node = self._root
        while node is not None:
            if value < node.value:
                parent, went_left, node = node, True, node.left
            elif value > node.value:
                parent, went_left, node = node, False, node.right
            else:
                break

        if node is None:
            logger.warning(f"No key found: {value!r}")
            return False

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            pred_parent = node
            replacement = node.left
            while replacement.right is not None:
                pred_parent, replacement = replacement, replacement.right
            if pred_parent is not node:
                pred_parent.right = replacement.left
                replacement.left = node.left
            replacement.right = node.right

        self._link(parent, went_left, replacement)
        self._release(node)
        return True
