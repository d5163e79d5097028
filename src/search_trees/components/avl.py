"""Height-balanced (AVL) binary search tree.

Insert and delete recurse down to the target and rebalance on the way back
up. Each recursive call returns the (possibly rotated) subtree root together
with a flag saying whether the subtree height changed: ``grew`` for insertion,
``shrunk`` for deletion. A node whose balance would reach +/-2 is fixed by
exactly one rotation:

    LL / RR   single rotation, over-tall child leans outward (or is level,
              during deletion: the LL1 / RR1 forms)
    LR / RL   double rotation, over-tall child leans inward

Balance is height(right) - height(left) and stays in {-1, 0, +1} between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.config import TreeConfig
from ..core.errors import InvariantViolationError
from ..core.node import Node
from ..core.tree import BinaryTree
from ..core.types import K

logger = logging.getLogger(__name__)


class AVLTree(BinaryTree[K]):
    """Self-balancing binary search tree.

    Args:
        values: Optional values inserted one by one in the given order
        config: Tree configuration; check_invariants validates after every mutation

    Invariants:
        - In-order traversal yields strictly increasing values
        - For every node, balance == height(right) - height(left) and |balance| <= 1
        - height <= 1.4405 * log2(n + 2) - 0.3277
    """

    __slots__ = ()

    def __init__(self, values: Iterable[K] = (), config: TreeConfig | None = None) -> None:
        super().__init__(config)
        for value in values:
            self.insert(value)

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, value: K) -> bool:
        """Insert value and rebalance.

        Returns:
            True if a node was created, False if the value was already present
        """
        self._root, _grew, created = self._insert(self._root, value)
        if self.config.check_invariants:
            self.check_invariants()
        return created

    def _insert(self, node: Node[K] | None, value: K) -> tuple[Node[K], bool, bool]:
        """Return (subtree root, grew, created)."""
        if node is None:
            return self._new_node(value), True, True

        if value < node.value:
            node.left, grew, created = self._insert(node.left, value)
            if grew:
                if node.balance == 1:
                    node.balance = 0
                    grew = False
                elif node.balance == 0:
                    node.balance = -1
                else:
                    if node.left.balance <= 0:
                        node = self._rotate_ll(node)
                    else:
                        node = self._rotate_lr(node)
                    grew = False
            return node, grew, created

        if value > node.value:
            node.right, grew, created = self._insert(node.right, value)
            if grew:
                if node.balance == -1:
                    node.balance = 0
                    grew = False
                elif node.balance == 0:
                    node.balance = 1
                else:
                    if node.right.balance >= 0:
                        node = self._rotate_rr(node)
                    else:
                        node = self._rotate_rl(node)
                    grew = False
            return node, grew, created

        return node, False, False

    # -------------------------------
    # Rotations
    # -------------------------------
    def _rotate_ll(self, p: Node[K]) -> Node[K]:
        logger.debug(f"LL rotation at {p.value!r}")
        q = p.left
        p.left = q.right
        q.right = p
        p.balance = 0
        q.balance = 0
        return q

    def _rotate_rr(self, p: Node[K]) -> Node[K]:
        logger.debug(f"RR rotation at {p.value!r}")
        q = p.right
        p.right = q.left
        q.left = p
        p.balance = 0
        q.balance = 0
        return q

    def _rotate_lr(self, p: Node[K]) -> Node[K]:
        logger.debug(f"LR rotation at {p.value!r}")
        q = p.left
        r = q.right
        q.right = r.left
        p.left = r.right
        r.left = q
        r.right = p
        p.balance = 1 if r.balance == -1 else 0
        q.balance = -1 if r.balance == 1 else 0
        r.balance = 0
        return r

    def _rotate_rl(self, p: Node[K]) -> Node[K]:
        logger.debug(f"RL rotation at {p.value!r}")
        q = p.right
        r = q.left
        q.left = r.right
        p.right = r.left
        r.right = q
        r.left = p
        p.balance = -1 if r.balance == 1 else 0
        q.balance = 1 if r.balance == -1 else 0
        r.balance = 0
        return r

    def _rotate_ll_delete(self, p: Node[K]) -> tuple[Node[K], bool]:
        """LL1: single right rotation after the right subtree of p shrank.

        A level left child keeps the subtree height, so shrinking stops there.
        """
        logger.debug(f"LL1 rotation at {p.value!r}")
        q = p.left
        p.left = q.right
        q.right = p
        if q.balance == 0:
            p.balance = -1
            q.balance = 1
            return q, False
        p.balance = 0
        q.balance = 0
        return q, True

    def _rotate_rr_delete(self, p: Node[K]) -> tuple[Node[K], bool]:
        """RR1: mirror of LL1 after the left subtree of p shrank."""
        logger.debug(f"RR1 rotation at {p.value!r}")
        q = p.right
        p.right = q.left
        q.left = p
        if q.balance == 0:
            p.balance = 1
            q.balance = -1
            return q, False
        p.balance = 0
        q.balance = 0
        return q, True

    def _balance_left_shrunk(self, p: Node[K]) -> tuple[Node[K], bool]:
        """BL: rebalance p after its left subtree lost one level."""
        logger.debug(f"BL step at {p.value!r}")
        if p.balance == -1:
            p.balance = 0
            return p, True
        if p.balance == 0:
            p.balance = 1
            return p, False
        if p.right.balance >= 0:
            return self._rotate_rr_delete(p)
        return self._rotate_rl(p), True

    def _balance_right_shrunk(self, p: Node[K]) -> tuple[Node[K], bool]:
        """BR: rebalance p after its right subtree lost one level."""
        logger.debug(f"BR step at {p.value!r}")
        if p.balance == 1:
            p.balance = 0
            return p, True
        if p.balance == 0:
            p.balance = -1
            return p, False
        if p.left.balance <= 0:
            return self._rotate_ll_delete(p)
        return self._rotate_lr(p), True

    # -------------------------------
    # Delete
    # -------------------------------
    def delete(self, value: K) -> bool:
        """Remove the node holding value and rebalance.

        A node with two children takes over the value of its in-order
        predecessor, whose own cell is then removed.

        Returns:
            True if a node was removed, False if value was not found
        """
        self._root, _shrunk, removed = self._delete(self._root, value)
        if removed is None:
            logger.warning(f"No key found: {value!r}")
            return False
        self._release(removed)
        if self.config.check_invariants:
            self.check_invariants()
        return True

    def _delete(
        self, node: Node[K] | None, value: K
    ) -> tuple[Node[K] | None, bool, Node[K] | None]:
        """Return (subtree root, shrunk, removed cell or None)."""
        if node is None:
            return None, False, None

        if value < node.value:
            node.left, shrunk, removed = self._delete(node.left, value)
            if shrunk:
                node, shrunk = self._balance_left_shrunk(node)
            return node, shrunk, removed

        if value > node.value:
            node.right, shrunk, removed = self._delete(node.right, value)
            if shrunk:
                node, shrunk = self._balance_right_shrunk(node)
            return node, shrunk, removed

        if node.right is None:
            return node.left, True, node
        if node.left is None:
            return node.right, True, node

        node.left, shrunk, removed = self._remove_predecessor(node.left, node)
        if shrunk:
            node, shrunk = self._balance_left_shrunk(node)
        return node, shrunk, removed

    def _remove_predecessor(
        self, node: Node[K], target: Node[K]
    ) -> tuple[Node[K] | None, bool, Node[K]]:
        """Move the rightmost value of this subtree into target and unlink its cell."""
        if node.right is not None:
            node.right, shrunk, removed = self._remove_predecessor(node.right, target)
            if shrunk:
                node, shrunk = self._balance_right_shrunk(node)
            return node, shrunk, removed

        target.value = node.value
        return node.left, True, node

    # -------------------------------
    # Validation
    # -------------------------------
    def check_invariants(self) -> None:
        """Verify the stored balance of every node against measured heights.

        Raises:
            InvariantViolationError: If a balance is wrong or out of {-1, 0, +1}
        """
        # Postorder with an explicit stack; heights of finished subtrees by id
        heights: dict[int, int] = {}
        stack: list[tuple[Node[K], bool]] = []
        if self._root is not None:
            stack.append((self._root, False))
        while stack:
            node, children_done = stack.pop()
            if not children_done:
                stack.append((node, True))
                if node.right is not None:
                    stack.append((node.right, False))
                if node.left is not None:
                    stack.append((node.left, False))
                continue

            left = heights.pop(node.left.order_id) if node.left is not None else 0
            right = heights.pop(node.right.order_id) if node.right is not None else 0
            if right - left != node.balance:
                raise InvariantViolationError(
                    f"Node {node.value!r} stores balance {node.balance}"
                    f" but subtree heights differ by {right - left}"
                )
            if abs(node.balance) > 1:
                raise InvariantViolationError(
                    f"Node {node.value!r} is out of balance ({node.balance})"
                )
            heights[node.order_id] = 1 + max(left, right)
