"""
testhealth.commands.tree - Emit the sunburst tree as JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from testhealth.config import get_config
from testhealth.loader import load_snapshot
from testhealth.sunburst import (
    DEFAULT_ROOT_NAME,
    build_sunburst,
    serialize_annotated,
    serialize_node,
)


def run(args: argparse.Namespace) -> int:
    """
    Run the tree command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success)
    """
    config = get_config(getattr(args, "config", None))

    root_name = getattr(args, "root_name", None) or config.get(
        "sunburst.root_name", DEFAULT_ROOT_NAME
    )
    root_name = str(root_name)
    annotate = getattr(args, "annotate", False) or config.get("output.annotate", False)
    indent = getattr(args, "indent", None)
    if indent is None:
        indent = int(config.get("output.indent", 2))

    data = load_snapshot(args.snapshot)
    root = build_sunburst(data, root_name=root_name)
    payload = serialize_annotated(root) if annotate else serialize_node(root)

    text = json.dumps(payload, indent=indent or None, ensure_ascii=False)

    output: Path | None = getattr(args, "output", None)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        if not getattr(args, "quiet", False):
            print(f"Wrote {output}", file=sys.stderr)
    else:
        print(text)

    return 0
