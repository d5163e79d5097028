"""Search Trees - ideal, unbalanced, AVL and optimal binary search trees in Python."""

from .components.avl import AVLTree
from .components.ideal import IdealTree
from .components.optimal import OptimalTree
from .components.unbalanced import UnbalancedTree
from .builders import (
    build_avl_empty,
    build_ideal,
    build_optimal,
    build_unbalanced_empty,
)
from .core.config import DiagramConfig, TreeConfig
from .core.errors import (
    EmptyTreeError,
    InvalidInputError,
    InvariantViolationError,
    TreeError,
)
from .core.node import Node
from .core.tree import BinaryTree
from .core.types import NodeRecord, WeightedItem

__all__ = [
    "AVLTree",
    "BinaryTree",
    "DiagramConfig",
    "EmptyTreeError",
    "IdealTree",
    "InvalidInputError",
    "InvariantViolationError",
    "Node",
    "NodeRecord",
    "OptimalTree",
    "TreeConfig",
    "TreeError",
    "UnbalancedTree",
    "WeightedItem",
    "build_avl_empty",
    "build_ideal",
    "build_optimal",
    "build_unbalanced_empty",
]
