"""Tree node shared by every search tree variant."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A single tree cell owning at most two child cells.

    Attributes:
        value: Payload, compared against search keys
        order_id: Construction-order handle, unique within one tree
        balance: height(right) - height(left); only maintained by AVLTree
        left: Left child or None
        right: Right child or None
    """

    __slots__ = ("value", "order_id", "balance", "left", "right")

    def __init__(
        self,
        value: T,
        order_id: int,
        left: Node[T] | None = None,
        right: Node[T] | None = None,
    ) -> None:
        self.value = value
        self.order_id = order_id
        self.balance = 0
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.value!r}, order_id={self.order_id}, balance={self.balance})"
