"""Tests for color and label mapping."""

from __future__ import annotations

import re

import pytest

from testhealth.models import TestResultData
from testhealth.sunburst import (
    EXCELLENT_COLOR,
    EXCLUDED_COLOR,
    ROOT_COLOR,
    NodeType,
    SunburstNode,
    build_sunburst,
    color_for,
    format_percentage,
    hsl_to_rgb,
    label_for,
    node_color,
    node_label,
    percentage_color,
)
from tests.helpers import single_chain

RGB_PATTERN = re.compile(r"^rgb\((\d{1,3}), (\d{1,3}), (\d{1,3})\)$")


class TestHslToRgb:
    """Tests for hsl_to_rgb()."""

    def test_pure_red(self):
        assert hsl_to_rgb(0, 100, 50) == "rgb(255, 0, 0)"

    def test_pure_green(self):
        assert hsl_to_rgb(120, 100, 50) == "rgb(0, 255, 0)"

    def test_pure_blue(self):
        assert hsl_to_rgb(240, 100, 50) == "rgb(0, 0, 255)"

    def test_grey_without_saturation(self):
        assert hsl_to_rgb(200, 0, 50) == "rgb(128, 128, 128)"

    def test_yellow_sector_boundary(self):
        assert hsl_to_rgb(60, 75, 50) == "rgb(223, 223, 32)"


class TestPercentageColor:
    """Tests for the six gradient bands."""

    @pytest.mark.parametrize("percentage", [95, 97, 100])
    def test_excellent_is_fixed(self, percentage):
        assert percentage_color(percentage) == "#28a745"

    def test_green_band(self):
        # f = 0.5 -> hsl(120, 70, 50)
        assert percentage_color(90) == "rgb(38, 217, 38)"

    def test_yellow_green_band(self):
        # f = 1/3 -> hsl(100, 70, 50)
        assert percentage_color(75) == "rgb(98, 217, 38)"

    def test_fifty_uses_upper_band(self):
        # 50 falls in [50, 70): hsl(60, 75, 50)
        assert percentage_color(50) == "rgb(223, 223, 32)"

    def test_zero_is_red(self):
        # hsl(0, 75, 45)
        assert percentage_color(0) == "rgb(201, 29, 29)"

    @pytest.mark.parametrize(
        "percentage,expected",
        [
            (15, "rgb(230, 77, 25)"),  # hsl(15, 80, 50)
            (30, "rgb(230, 128, 25)"),  # hsl(30, 80, 50)
            (40, "rgb(230, 179, 25)"),  # hsl(45, 80, 50)
            (70, "rgb(128, 217, 38)"),  # hsl(90, 70, 50)
            (85, "rgb(46, 184, 46)"),  # hsl(120, 60, 45)
        ],
    )
    def test_band_values(self, percentage, expected):
        assert percentage_color(percentage) == expected

    @pytest.mark.parametrize("percentage", [i * 0.5 for i in range(0, 201)])
    def test_always_valid_color(self, percentage):
        color = percentage_color(percentage)

        if color == EXCELLENT_COLOR:
            assert percentage >= 95
            return
        match = RGB_PATTERN.match(color)
        assert match is not None
        assert all(0 <= int(channel) <= 255 for channel in match.groups())


class TestColorFor:
    """Tests for color priority rules."""

    def test_excluded_is_grey(self):
        assert color_for(NodeType.TEST_RESULT, None) == "#6c757d"

    def test_excluded_wins_over_root(self):
        assert color_for(NodeType.ROOT, None) == EXCLUDED_COLOR

    def test_root_is_dark_grey(self):
        assert color_for(NodeType.ROOT, 100) == "#495057"
        assert color_for(NodeType.ROOT, 0) == ROOT_COLOR

    def test_other_types_use_gradient(self):
        assert color_for(NodeType.TEAM, 97) == "#28a745"


class TestNodeColorAndLabel:
    """Tests for node_color() and node_label() on built trees."""

    def test_skipped_result(self):
        root = build_sunburst(single_chain("skipped"))
        result = root.children[0].children[0].children[0].children[0].children[0].children[0]

        assert node_color(result) == EXCLUDED_COLOR
        assert node_label(result) == "result-1 (skipped)"

    def test_passed_result(self):
        root = build_sunburst(single_chain("passed"))
        result = root.children[0].children[0].children[0].children[0].children[0].children[0]

        assert node_color(result) == EXCELLENT_COLOR
        assert node_label(result) == "result-1 (100.0%)"

    def test_mixed_case(self):
        root = build_sunburst(single_chain("passed", "failed"))
        case = root.children[0].children[0].children[0].children[0].children[0]

        assert node_label(case) == "case-1 (50.0%)"
        assert node_color(case) == "rgb(223, 223, 32)"

    def test_root(self):
        root = build_sunburst(TestResultData())

        assert node_color(root) == ROOT_COLOR
        assert node_label(root) == "Test Results (50.0%)"

    def test_label_rounds_to_one_decimal(self):
        root = build_sunburst(single_chain("passed", "passed", "failed"))

        assert node_label(root) == "Test Results (66.7%)"

    def test_label_rounds_ties_up(self):
        # 1 of 16 passed: 6.25
        root = build_sunburst(single_chain("passed", *["failed"] * 15))
        case = root.children[0].children[0].children[0].children[0].children[0]

        assert node_label(case) == "case-1 (6.3%)"


class TestLabelFor:
    """Tests for label_for()."""

    def test_percentage_suffix(self):
        assert label_for("Checkout", None, 87.5) == "Checkout (87.5%)"

    def test_status_suffix_when_excluded(self):
        assert label_for("step", "blocked", None) == "step (blocked)"

    def test_bare_name(self):
        assert label_for("step", None, None) == "step"

    @pytest.mark.parametrize(
        "percentage,expected",
        [
            (6.25, "6.3"),
            (31.25, "31.3"),
            (56.25, "56.3"),
            (66.66666666666667, "66.7"),
            (0, "0.0"),
            (100.0, "100.0"),
        ],
    )
    def test_format_percentage(self, percentage, expected):
        assert format_percentage(percentage) == expected

    def test_percentage_wins_over_status(self):
        node = SunburstNode.leaf("c", NodeType.TEST_CASE, id="c", status="failed")

        assert node_label(node) == "c (50.0%)"
