"""SunburstNode - Visualization node for the test health sunburst.

This module provides:
- NodeType: Enum of hierarchy levels
- SunburstNode: Immutable node that is either a leaf (value = 1) or a
  branch (ordered children), never both
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Sequence


class NodeType(Enum):
    """Hierarchy levels of the sunburst tree."""

    ROOT = "root"
    TEAM = "team"
    APPLICATION = "application"
    TEST_SUITE = "testSuite"
    TEST_EXECUTION = "testExecution"
    TEST_CASE = "testCase"
    TEST_RESULT = "testResult"


LEAF_VALUE = 1


@dataclass(frozen=True)
class SunburstNode:
    """A node in the sunburst tree.

    Exactly one of ``value`` and ``children`` is set. Use the ``leaf`` and
    ``branch`` constructors, which decide the shape up front.

    Attributes:
        name: Display name.
        type: Hierarchy level of the node.
        id: Source record id (None for the root).
        status: Status string copied from the record, if it has one.
        metadata: Curated subset of the record's fields.
        value: Leaf weight (always 1) or None for branches.
        children: Ordered child nodes, or None for leaves.
    """

    name: str
    type: NodeType
    id: str | None = None
    status: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    value: int | None = None
    children: tuple[SunburstNode, ...] | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.children is None):
            raise ValueError(
                f"Node '{self.name}' must have exactly one of value or children"
            )

    @classmethod
    def leaf(
        cls,
        name: str,
        type: NodeType,
        id: str | None = None,
        status: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> SunburstNode:
        """Create a leaf node carrying value 1."""
        return cls(
            name=name,
            type=type,
            id=id,
            status=status,
            metadata=metadata or {},
            value=LEAF_VALUE,
        )

    @classmethod
    def branch(
        cls,
        name: str,
        type: NodeType,
        children: Sequence[SunburstNode],
        id: str | None = None,
        status: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> SunburstNode:
        """Create an internal node; children may be empty only for the root."""
        return cls(
            name=name,
            type=type,
            id=id,
            status=status,
            metadata=metadata or {},
            children=tuple(children),
        )

    @property
    def is_leaf(self) -> bool:
        """True if this node carries a value instead of children."""
        return self.children is None

    def iter_children(self) -> Iterator[SunburstNode]:
        """Iterate over child nodes (nothing for leaves)."""
        if self.children is not None:
            yield from self.children

    def walk(self) -> Iterator[SunburstNode]:
        """Iterate over this node and all descendants, parent first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def count_by_type(self) -> dict[NodeType, int]:
        """Count nodes in this subtree grouped by type."""
        counts: dict[NodeType, int] = {}
        for node in self.walk():
            counts[node.type] = counts.get(node.type, 0) + 1
        return counts


__all__ = ["LEAF_VALUE", "NodeType", "SunburstNode"]
