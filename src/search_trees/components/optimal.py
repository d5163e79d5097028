"""Statically optimal binary search tree.

Knuth's dynamic program over a weighted key sequence. Keys are numbered
1..n in ascending order and the range (i, j] denotes keys i+1..j. Three
(n + 1) x (n + 1) tables are filled:

    weight[i][j]  total weight of keys in (i, j]
    cost[i][j]    minimum sum of weight * depth over BSTs on (i, j], root depth 1
    root[i][j]    key index chosen as the root of that optimal subtree

cost[i][j] = weight[i][j] + min over k of (cost[i][k - 1] + cost[k][j]).
Optimal roots are monotone, root[i][j - 1] <= root[i][j] <= root[i + 1][j],
so only that window of k is searched and the whole build is O(n^2).

The tree is then materialized by inserting the DP roots in preorder through
the unbalanced insert, which reproduces the DP shape exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from operator import itemgetter

from ..core.config import TreeConfig
from ..core.errors import InvalidInputError
from ..core.types import K, Weight, WeightedItem
from .unbalanced import UnbalancedTree

logger = logging.getLogger(__name__)

Table = tuple[tuple[Weight, ...], ...]


class OptimalTree(UnbalancedTree[K]):
    """Search tree minimizing the weighted search cost of its keys.

    Args:
        items: (value, weight) pairs in any order; weights must be nonnegative
        config: Tree configuration

    After construction the tree is an ordinary UnbalancedTree: later inserts
    and deletes follow unbalanced rules and are not reflected in the tables.

    Raises:
        InvalidInputError: On empty input, negative weights or duplicate values
    """

    __slots__ = ("_items", "_weights", "_costs", "_roots")

    def __init__(self, items: Iterable[WeightedItem], config: TreeConfig | None = None) -> None:
        super().__init__(config=config)
        ordered = sorted(items, key=itemgetter(0))
        if not ordered:
            raise InvalidInputError("Optimal tree needs at least one weighted element")
        for i, (value, weight) in enumerate(ordered):
            if weight < 0:
                raise InvalidInputError(f"Weight of {value!r} is negative: {weight!r}")
            if i and not ordered[i - 1][0] < value:
                raise InvalidInputError(f"Duplicate value {value!r}")

        self._items: list[WeightedItem] = ordered
        self._weights, self._costs, self._roots = self._compute_tables()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Optimal tree tables:\n" + self.format_tables())

        self._materialize()
        logger.info(
            f"Built optimal tree: {len(ordered)} nodes, cost {self.cost}, height {self.height()}"
        )

    @classmethod
    def from_values(cls, values: Iterable[K], config: TreeConfig | None = None) -> OptimalTree[K]:
        """Build from plain numbers, each value acting as its own weight."""
        return cls(((value, value) for value in values), config=config)

    def _compute_tables(self) -> tuple[list[list[Weight]], list[list[Weight]], list[list[int]]]:
        n = len(self._items)
        weights: list[list[Weight]] = [[0] * (n + 1) for _ in range(n + 1)]
        costs: list[list[Weight]] = [[0] * (n + 1) for _ in range(n + 1)]
        roots: list[list[int]] = [[0] * (n + 1) for _ in range(n + 1)]

        for i in range(n + 1):
            for j in range(i + 1, n + 1):
                weights[i][j] = weights[i][j - 1] + self._items[j - 1][1]

        for i in range(n):
            costs[i][i + 1] = weights[i][i + 1]
            roots[i][i + 1] = i + 1

        for span in range(2, n + 1):
            for i in range(n - span + 1):
                j = i + span
                best_root = roots[i][j - 1]
                best = costs[i][best_root - 1] + costs[best_root][j]
                for k in range(best_root + 1, roots[i + 1][j] + 1):
                    candidate = costs[i][k - 1] + costs[k][j]
                    if candidate < best:
                        best_root, best = k, candidate
                costs[i][j] = best + weights[i][j]
                roots[i][j] = best_root

        return weights, costs, roots

    def _materialize(self) -> None:
        """Insert the DP roots in preorder."""
        stack = [(0, len(self._items))]
        while stack:
            low, high = stack.pop()
            if low >= high:
                continue
            k = self._roots[low][high]
            self.insert(self._items[k - 1][0])
            stack.append((k, high))
            stack.append((low, k - 1))

    # -------------------------------
    # Tables
    # -------------------------------
    @property
    def cost(self) -> Weight:
        """Minimum total weighted search cost, cost[0][n]."""
        return self._costs[0][len(self._items)]

    @property
    def weight_table(self) -> Table:
        return tuple(tuple(row) for row in self._weights)

    @property
    def cost_table(self) -> Table:
        return tuple(tuple(row) for row in self._costs)

    @property
    def root_table(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._roots)

    def format_tables(self, width: int = 6) -> str:
        """Text dump of the root, cost and weight tables."""
        lines: list[str] = []
        for title, table in (
            ("root", self._roots),
            ("cost", self._costs),
            ("weight", self._weights),
        ):
            lines.append(f"{title} table")
            for row in table:
                lines.append("".join(f"{cell:>{width}}" for cell in row))
        return "\n".join(lines)
