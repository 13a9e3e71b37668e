"""Sunburst Serialization - Export SunburstNode trees.

This module provides functions to serialize a SunburstNode tree to
JSON-compatible dicts and to a plain-text outline.
"""

from __future__ import annotations

from typing import Any

from testhealth.sunburst.annotators import annotate_tree
from testhealth.sunburst.node import SunburstNode


def _node_fields(node: SunburstNode) -> dict[str, Any]:
    """Serialize a node's own fields, without its children."""
    result: dict[str, Any] = {
        "name": node.name,
        "type": node.type.value,
    }
    if node.id is not None:
        result["id"] = node.id
    if node.value is not None:
        result["value"] = node.value
    if node.status is not None:
        result["status"] = node.status
    if node.metadata:
        result["metadata"] = dict(node.metadata)
    return result


def serialize_node(node: SunburstNode) -> dict[str, Any]:
    """Serialize a node and its descendants to a JSON-compatible dict.

    Keys are omitted when absent: ``id`` on the root, ``value`` on
    branches, ``children`` on leaves, ``status`` and ``metadata`` when
    unset or empty.

    Args:
        node: The node to serialize.

    Returns:
        Dict suitable for JSON serialization.
    """
    result = _node_fields(node)
    if node.children is not None:
        result["children"] = [serialize_node(child) for child in node.children]
    return result


def serialize_annotated(node: SunburstNode) -> dict[str, Any]:
    """Serialize a tree with percentage, color and label on every node.

    The percentage is null for excluded test results.

    Args:
        node: Root of the tree to serialize.

    Returns:
        Dict suitable for JSON serialization.
    """
    annotations = annotate_tree(node)

    def _serialize(current: SunburstNode) -> dict[str, Any]:
        result = _node_fields(current)
        annotation = annotations[id(current)]
        result["percentage"] = annotation.percentage
        result["color"] = annotation.color
        result["label"] = annotation.label
        if current.children is not None:
            result["children"] = [_serialize(child) for child in current.children]
        return result

    return _serialize(node)


def to_outline(node: SunburstNode, max_depth: int = 0, indent: str = "  ") -> str:
    """Render the tree as an indented outline of labels.

    Branches are marked ``+`` and leaves ``-``.

    Args:
        node: Root of the tree to render.
        max_depth: Deepest level to include (0 for unlimited).
        indent: Indentation added per level.

    Returns:
        Outline text, one node per line.
    """
    annotations = annotate_tree(node)
    lines: list[str] = []

    def _render(current: SunburstNode, depth: int) -> None:
        marker = "-" if current.is_leaf else "+"
        lines.append(f"{indent * depth}{marker} {annotations[id(current)].label}")
        if max_depth and depth >= max_depth:
            return
        for child in current.iter_children():
            _render(child, depth + 1)

    _render(node, 0)
    return "\n".join(lines)


__all__ = [
    "serialize_annotated",
    "serialize_node",
    "to_outline",
]
