"""Parent-id indexing for flat record collections.

Each child collection is grouped once by its parent reference so the
tree builder can look up a parent's children in constant time.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class ChildIndex(Generic[K, T]):
    """Mapping of parent id to the ordered children referencing it.

    Lookups for a parent id with no children return an empty sequence.
    """

    def __init__(self, groups: dict[K, list[T]]) -> None:
        self._groups = groups

    def children_of(self, parent_id: K) -> Sequence[T]:
        """Return the children of parent_id in input order."""
        return self._groups.get(parent_id, ())

    def __contains__(self, parent_id: object) -> bool:
        return parent_id in self._groups

    def __len__(self) -> int:
        return len(self._groups)


def group_by_parent(items: Iterable[T], parent_of: Callable[[T], K]) -> ChildIndex[K, T]:
    """Group items by their parent reference.

    Args:
        items: Child records in input order.
        parent_of: Accessor returning an item's parent id.

    Returns:
        ChildIndex preserving the relative order of siblings.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(parent_of(item), []).append(item)
    return ChildIndex(groups)


__all__ = ["ChildIndex", "group_by_parent"]
