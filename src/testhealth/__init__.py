"""
testhealth - Hierarchical pass-rate aggregation for test results

testhealth rebuilds team → application → test suite → test execution →
test case → test result trees from flat record collections, rolls up a
passing percentage at every level, and maps it to sunburst colors and
labels.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("testhealth")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from testhealth.loader import load_snapshot, parse_snapshot
from testhealth.models import SnapshotError, TestResultData
from testhealth.orphans import OrphanRecord, find_orphans
from testhealth.sunburst import (
    NodeType,
    SunburstNode,
    build_sunburst,
    node_color,
    node_label,
    passing_percentage,
    serialize_node,
)

__all__ = [
    "__version__",
    "SnapshotError",
    "TestResultData",
    "load_snapshot",
    "parse_snapshot",
    "OrphanRecord",
    "find_orphans",
    "NodeType",
    "SunburstNode",
    "build_sunburst",
    "node_color",
    "node_label",
    "passing_percentage",
    "serialize_node",
]
