"""Construction entry points for the four tree variants."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .components.avl import AVLTree
from .components.ideal import IdealTree
from .components.optimal import OptimalTree
from .components.unbalanced import UnbalancedTree
from .core.config import TreeConfig
from .core.types import K, WeightedItem


def build_ideal(values: Sequence[K], config: TreeConfig | None = None) -> IdealTree[K]:
    """Perfectly balanced tree over an already sorted sequence."""
    return IdealTree(values, config=config)


def build_unbalanced_empty(config: TreeConfig | None = None) -> UnbalancedTree[K]:
    """Empty unbalanced tree, grown by repeated insert."""
    return UnbalancedTree(config=config)


def build_avl_empty(config: TreeConfig | None = None) -> AVLTree[K]:
    """Empty AVL tree, grown by repeated insert."""
    return AVLTree(config=config)


def build_optimal(items: Iterable[WeightedItem], config: TreeConfig | None = None) -> OptimalTree:
    """Tree minimizing sum(weight * depth) over (value, weight) pairs."""
    return OptimalTree(items, config=config)
