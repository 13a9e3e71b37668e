"""Passing-percentage roll-up for sunburst nodes.

Percentages are computed bottom-up:
- testResult: 100 for passed, 0 for failed/error, excluded otherwise
- internal node: unweighted mean of its children's non-excluded values,
  or NEUTRAL_PERCENTAGE when none remain
- any other leaf: NEUTRAL_PERCENTAGE

An excluded result is represented by None. Only testResult nodes can be
excluded; every node above them has a number in [0, 100].
"""

from __future__ import annotations

from typing import Optional

from testhealth.models import ResultStatus
from testhealth.sunburst.node import NodeType, SunburstNode

PASS_PERCENTAGE = 100.0
FAIL_PERCENTAGE = 0.0
NEUTRAL_PERCENTAGE = 50.0

PASSING_STATUSES = frozenset({ResultStatus.PASSED.value})
FAILING_STATUSES = frozenset({ResultStatus.FAILED.value, ResultStatus.ERROR.value})


def result_percentage(status: str | None) -> Optional[float]:
    """Map a test result status to 100, 0, or None (excluded)."""
    if status in PASSING_STATUSES:
        return PASS_PERCENTAGE
    if status in FAILING_STATUSES:
        return FAIL_PERCENTAGE
    return None


def _mean_of_included(values: list[Optional[float]]) -> float:
    included = [v for v in values if v is not None]
    if not included:
        return NEUTRAL_PERCENTAGE
    return sum(included) / len(included)


def passing_percentage(node: SunburstNode) -> Optional[float]:
    """Compute the passing percentage of a node.

    Pure and recursive; the node is not modified.

    Args:
        node: The node to evaluate.

    Returns:
        A float in [0, 100], or None for an excluded test result.
    """
    if node.type == NodeType.TEST_RESULT:
        return result_percentage(node.status)

    if node.children:
        return _mean_of_included([passing_percentage(child) for child in node.children])

    return NEUTRAL_PERCENTAGE


class PercentageMemo:
    """Per-call memo of passing percentages keyed by node identity.

    Produces the same values as passing_percentage() but evaluates each
    node once, so annotating a whole tree stays linear. Create a new memo
    for every tree; it holds references to the nodes it has seen.
    """

    def __init__(self) -> None:
        self._values: dict[int, Optional[float]] = {}
        self._nodes: list[SunburstNode] = []

    def percentage(self, node: SunburstNode) -> Optional[float]:
        """Return the passing percentage of node, computing it at most once."""
        key = id(node)
        if key in self._values:
            return self._values[key]

        if node.type == NodeType.TEST_RESULT:
            value = result_percentage(node.status)
        elif node.children:
            value = _mean_of_included([self.percentage(child) for child in node.children])
        else:
            value = NEUTRAL_PERCENTAGE

        self._values[key] = value
        # Keep the node alive so its id() cannot be reused within this memo.
        self._nodes.append(node)
        return value

    def __len__(self) -> int:
        return len(self._values)


__all__ = [
    "FAIL_PERCENTAGE",
    "NEUTRAL_PERCENTAGE",
    "PASS_PERCENTAGE",
    "PercentageMemo",
    "passing_percentage",
    "result_percentage",
]
