"""
testhealth.commands.orphans_cmd - List records left out of the sunburst tree.
"""

from __future__ import annotations

import argparse

from testhealth.loader import load_snapshot
from testhealth.orphans import find_orphans


def run(args: argparse.Namespace) -> int:
    """
    Run the orphans command.

    Returns:
        0, or 1 with --strict when any orphan is found
    """
    data = load_snapshot(args.snapshot)
    orphans = find_orphans(data)

    if not orphans:
        if not getattr(args, "quiet", False):
            print("✓ No orphaned records")
        return 0

    print(f"Orphaned Records ({len(orphans)}):")
    print("-" * 40)
    for orphan in orphans:
        print(f"  {orphan.describe()}")

    return 1 if getattr(args, "strict", False) else 0
