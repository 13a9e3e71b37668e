"""
testhealth.loader - Load snapshot bundles from JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from testhealth.models import SnapshotError, TestResultData


def parse_snapshot(content: str, source: str = "<string>") -> TestResultData:
    """
    Parse a snapshot bundle from JSON text.

    Args:
        content: JSON document with the six record collections
        source: Name used in error messages

    Returns:
        Parsed TestResultData

    Raises:
        SnapshotError: If the JSON is invalid or a record is malformed
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{source}: invalid JSON: {e}") from e

    try:
        return TestResultData.from_dict(data)
    except SnapshotError as e:
        raise SnapshotError(f"{source}: {e}") from e


def load_snapshot(path: Union[str, Path]) -> TestResultData:
    """
    Load a snapshot bundle from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed TestResultData
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    return parse_snapshot(content, source=str(path))
