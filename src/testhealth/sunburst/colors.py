"""Color and label mapping for sunburst nodes.

Colors run from red (0%) through orange and yellow to green (95%+),
produced by interpolating HSL parameters within six percentage bands.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from testhealth.sunburst.metrics import passing_percentage
from testhealth.sunburst.node import NodeType, SunburstNode

EXCLUDED_COLOR = "#6c757d"
ROOT_COLOR = "#495057"
EXCELLENT_COLOR = "#28a745"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsl_to_rgb(h: float, s: float, l: float) -> str:
    """Convert HSL to an ``rgb(r, g, b)`` string.

    Args:
        h: Hue in degrees [0, 360).
        s: Saturation in percent [0, 100].
        l: Lightness in percent [0, 100].

    Returns:
        CSS rgb() string with integer channels in [0, 255].
    """
    h /= 360
    s /= 100
    l /= 100

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h * 6) % 2) - 1))
    m = l - c / 2

    if 0 <= h < 1 / 6:
        r, g, b = c, x, 0.0
    elif 1 / 6 <= h < 2 / 6:
        r, g, b = x, c, 0.0
    elif 2 / 6 <= h < 3 / 6:
        r, g, b = 0.0, c, x
    elif 3 / 6 <= h < 4 / 6:
        r, g, b = 0.0, x, c
    elif 4 / 6 <= h < 5 / 6:
        r, g, b = x, 0.0, c
    elif 5 / 6 <= h < 1:
        r, g, b = c, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    channels = [
        min(255, max(0, _round_half_up((v + m) * 255))) for v in (r, g, b)
    ]
    return "rgb({}, {}, {})".format(*channels)


def percentage_color(percentage: float) -> str:
    """Map a percentage in [0, 100] to a gradient color."""
    if percentage >= 95:
        return EXCELLENT_COLOR
    elif percentage >= 85:
        # light green to green
        factor = (percentage - 85) / 10
        return hsl_to_rgb(120, 60 + factor * 20, 45 + factor * 10)
    elif percentage >= 70:
        # yellow-green to green
        factor = (percentage - 70) / 15
        return hsl_to_rgb(90 + factor * 30, 70, 50)
    elif percentage >= 50:
        # orange-yellow to yellow-green
        factor = (percentage - 50) / 20
        return hsl_to_rgb(60 + factor * 30, 75, 50)
    elif percentage >= 30:
        # orange to orange-yellow
        factor = (percentage - 30) / 20
        return hsl_to_rgb(30 + factor * 30, 80, 50)
    else:
        # red to orange
        factor = percentage / 30
        return hsl_to_rgb(factor * 30, 75 + factor * 10, 45 + factor * 10)


def color_for(node_type: NodeType, percentage: Optional[float]) -> str:
    """Pick the display color for a node type and its percentage.

    Excluded percentages win over the root color.
    """
    if percentage is None:
        return EXCLUDED_COLOR
    if node_type == NodeType.ROOT:
        return ROOT_COLOR
    return percentage_color(percentage)


def format_percentage(percentage: float) -> str:
    """Format to one decimal, rounding ties on the exact binary value up."""
    return str(Decimal(percentage).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def label_for(name: str, status: str | None, percentage: Optional[float]) -> str:
    """Build the display label for a node."""
    if percentage is not None:
        return f"{name} ({format_percentage(percentage)}%)"
    if status:
        return f"{name} ({status})"
    return name


def node_color(node: SunburstNode) -> str:
    """Return the display color of a node."""
    return color_for(node.type, passing_percentage(node))


def node_label(node: SunburstNode) -> str:
    """Return the display label of a node, e.g. ``"Checkout (87.5%)"``."""
    return label_for(node.name, node.status, passing_percentage(node))


__all__ = [
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
]
