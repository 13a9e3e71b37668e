"""Sunburst - Hierarchical pass-rate aggregation for test results.

This package provides:
- group_by_parent: Parent-id indexing of flat record collections
- SunburstNode / NodeType: Leaf-or-branch visualization nodes
- build_sunburst: Tree reconstruction from a TestResultData snapshot
- passing_percentage: Bottom-up pass-rate roll-up
- node_color / node_label: Display mapping
- serialize_node / serialize_annotated / to_outline: Output formats
"""

from testhealth.sunburst.annotators import NodeAnnotation, annotate_node, annotate_tree
from testhealth.sunburst.builder import (
    DEFAULT_ROOT_NAME,
    SunburstBuilder,
    build_sunburst,
    execution_name,
)
from testhealth.sunburst.colors import (
    EXCELLENT_COLOR,
    EXCLUDED_COLOR,
    ROOT_COLOR,
    color_for,
    format_percentage,
    hsl_to_rgb,
    label_for,
    node_color,
    node_label,
    percentage_color,
)
from testhealth.sunburst.index import ChildIndex, group_by_parent
from testhealth.sunburst.metrics import (
    NEUTRAL_PERCENTAGE,
    PercentageMemo,
    passing_percentage,
    result_percentage,
)
from testhealth.sunburst.node import LEAF_VALUE, NodeType, SunburstNode
from testhealth.sunburst.serialize import serialize_annotated, serialize_node, to_outline

__all__ = [
    # Index
    "ChildIndex",
    "group_by_parent",
    # Nodes
    "LEAF_VALUE",
    "NodeType",
    "SunburstNode",
    # Builder
    "DEFAULT_ROOT_NAME",
    "SunburstBuilder",
    "build_sunburst",
    "execution_name",
    # Metrics
    "NEUTRAL_PERCENTAGE",
    "PercentageMemo",
    "passing_percentage",
    "result_percentage",
    # Colors
    "EXCELLENT_COLOR",
    "EXCLUDED_COLOR",
    "ROOT_COLOR",
    "color_for",
    "format_percentage",
    "hsl_to_rgb",
    "label_for",
    "node_color",
    "node_label",
    "percentage_color",
    # Annotation
    "NodeAnnotation",
    "annotate_node",
    "annotate_tree",
    # Serialization
    "serialize_annotated",
    "serialize_node",
    "to_outline",
]
