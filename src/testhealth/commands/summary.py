"""
testhealth.commands.summary - Print a labelled outline of the sunburst tree.
"""

from __future__ import annotations

import argparse

from testhealth.config import get_config
from testhealth.loader import load_snapshot
from testhealth.sunburst import DEFAULT_ROOT_NAME, NodeType, build_sunburst, to_outline

_COUNT_LABELS = [
    (NodeType.TEAM, "teams"),
    (NodeType.APPLICATION, "applications"),
    (NodeType.TEST_SUITE, "suites"),
    (NodeType.TEST_EXECUTION, "executions"),
    (NodeType.TEST_CASE, "cases"),
    (NodeType.TEST_RESULT, "results"),
]


def run(args: argparse.Namespace) -> int:
    """Run the summary command."""
    config = get_config(getattr(args, "config", None))

    depth = getattr(args, "depth", None)
    if depth is None:
        depth = int(config.get("summary.depth", 0))

    data = load_snapshot(args.snapshot)
    root_name = str(config.get("sunburst.root_name", DEFAULT_ROOT_NAME))
    root = build_sunburst(data, root_name=root_name)

    quiet = getattr(args, "quiet", False)
    if not quiet:
        print("Test Health Summary")
        print("=" * 60)
    print(to_outline(root, max_depth=depth))

    if not quiet:
        counts = root.count_by_type()
        print()
        print(", ".join(f"{counts.get(kind, 0)} {label}" for kind, label in _COUNT_LABELS))

    return 0
