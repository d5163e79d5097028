"""Tree variant implementations."""

from .avl import AVLTree
from .ideal import IdealTree
from .optimal import OptimalTree
from .unbalanced import UnbalancedTree

__all__ = ["AVLTree", "IdealTree", "OptimalTree", "UnbalancedTree"]
