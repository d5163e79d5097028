"""Protocol definitions for search trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.node import Node
    from ..core.types import NodeRecord


@runtime_checkable
class SearchTree(Protocol):
    """Read-only queries every tree variant answers."""

    @property
    def root(self) -> Node[Any] | None:
        """Root node, or None for an empty tree."""
        ...

    def size(self) -> int:
        """Count of nodes."""
        ...

    def height(self) -> int:
        """Nodes on the longest root-to-leaf path; 0 when empty."""
        ...

    def average_depth(self) -> float:
        """Mean depth with the root at depth 1; raises EmptyTreeError when empty."""
        ...

    def checksum(self) -> Any:
        """Sum of numeric payloads, 0 for non-numeric payloads."""
        ...

    def in_order(self) -> Iterator[Any]:
        """Payloads in ascending order."""
        ...

    def export(self) -> list[NodeRecord]:
        """Per-node records for the diagram renderer."""
        ...

    def pretty_print(self, indent_step: int | None = None) -> str:
        """Sideways text display."""
        ...


@runtime_checkable
class MutableSearchTree(SearchTree, Protocol):
    """Tree variants that support insert and delete after construction."""

    def insert(self, value: Any) -> bool:
        """Insert value; False if it was already present."""
        ...

    def delete(self, value: Any) -> bool:
        """Delete value; False (and a warning) if it was not present."""
        ...
