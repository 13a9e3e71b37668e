"""
testhealth.commands.config_cmd - Inspect configuration.

- `testhealth config show` - Print the effective configuration as TOML
- `testhealth config path` - Print the config file location
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import tomlkit

from testhealth.config import find_config_file, get_config


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)

    if action == "show":
        return _show(args)
    elif action == "path":
        return _path(args)

    print("Usage: testhealth config <show|path>", file=sys.stderr)
    return 1


def _show(args: argparse.Namespace) -> int:
    config = get_config(getattr(args, "config", None))
    data = config.get_raw()

    if getattr(args, "json", False):
        print(json.dumps(data, indent=2))
    else:
        print(tomlkit.dumps(data), end="")
    return 0


def _path(args: argparse.Namespace) -> int:
    path = getattr(args, "config", None) or find_config_file(Path.cwd())
    if path is None:
        print("No .testhealth.toml found (using defaults)", file=sys.stderr)
        return 1
    print(path)
    return 0
