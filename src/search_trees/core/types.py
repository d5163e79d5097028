"""Common type definitions for search trees.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from typing import Any, Protocol, TypedDict, TypeVar


# A protocol expressing that a type supports ordering comparisons
class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=Comparable)

# Weights are access-frequency proxies, any nonnegative real number
Weight = float
WeightedItem = tuple[Any, Weight]


class NodeRecord(TypedDict):
    """Flat description of one node handed to the diagram renderer."""
    order_id: int
    label: str
    left: int | None
    right: int | None
