"""Display annotation for sunburst trees.

Computes percentage, color and label for every node of a tree in one
post-order pass. Nodes are immutable, so annotations are returned in a
dict keyed by node identity rather than stored on the nodes.

Usage:
    from testhealth.sunburst.annotators import annotate_tree

    annotations = annotate_tree(root)
    print(annotations[id(root)].label)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from testhealth.sunburst.colors import color_for, label_for
from testhealth.sunburst.metrics import PercentageMemo
from testhealth.sunburst.node import SunburstNode


@dataclass(frozen=True)
class NodeAnnotation:
    """Display information for one node.

    Attributes:
        percentage: Passing percentage, or None for an excluded result.
        color: Hex or rgb() color string.
        label: Name with percentage or status suffix.
    """

    percentage: Optional[float]
    color: str
    label: str


def annotate_node(node: SunburstNode, memo: PercentageMemo | None = None) -> NodeAnnotation:
    """Annotate a single node.

    Args:
        node: The node to annotate.
        memo: Optional memo shared across calls on the same tree.

    Returns:
        NodeAnnotation for the node.
    """
    if memo is None:
        memo = PercentageMemo()
    percentage = memo.percentage(node)
    return NodeAnnotation(
        percentage=percentage,
        color=color_for(node.type, percentage),
        label=label_for(node.name, node.status, percentage),
    )


def annotate_tree(root: SunburstNode) -> dict[int, NodeAnnotation]:
    """Annotate every node of a tree.

    Args:
        root: Root of the tree.

    Returns:
        Map of id(node) to NodeAnnotation. Valid only while the tree
        is alive.
    """
    memo = PercentageMemo()
    return {id(node): annotate_node(node, memo) for node in root.walk()}


__all__ = ["NodeAnnotation", "annotate_node", "annotate_tree"]
