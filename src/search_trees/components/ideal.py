"""Ideally balanced tree built from a sorted sequence.

The midpoint of every range becomes the subtree root, which yields the
minimum possible height ceil(log2(n + 1)) for n nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.config import TreeConfig
from ..core.errors import InvalidInputError
from ..core.node import Node
from ..core.tree import BinaryTree
from ..core.types import K

logger = logging.getLogger(__name__)


class IdealTree(BinaryTree[K]):
    """Perfectly balanced (by node count) tree over a sorted sequence.

    Args:
        values: Sequence sorted in non-decreasing order
        low: First index of the range to build from (inclusive), default 0
        high: Last index of the range to build from (inclusive), default len - 1
        config: Tree configuration

    The shape is fixed at construction; the tree offers no insert or delete.

    Raises:
        InvalidInputError: If values are not sorted or the range is out of bounds
    """

    __slots__ = ()

    def __init__(
        self,
        values: Sequence[K],
        low: int | None = None,
        high: int | None = None,
        config: TreeConfig | None = None,
    ) -> None:
        super().__init__(config)
        low = 0 if low is None else low
        high = len(values) - 1 if high is None else high

        if low < 0 or (low <= high and high >= len(values)):
            raise InvalidInputError(
                f"Range [{low}, {high}] is outside a sequence of length {len(values)}"
            )
        for i in range(low + 1, high + 1):
            if values[i] < values[i - 1]:
                raise InvalidInputError(f"Sequence is not sorted at index {i}")

        self._root = self._build(low, high, values)
        logger.info(f"Built ideal tree: {self.size()} nodes, height {self.height()}")

    def _build(self, low: int, high: int, values: Sequence[K]) -> Node[K] | None:
        if low > high:
            return None
        middle = (low + high) // 2
        node = self._new_node(values[middle])
        node.left = self._build(low, middle - 1, values)
        node.right = self._build(middle + 1, high, values)
        return node
