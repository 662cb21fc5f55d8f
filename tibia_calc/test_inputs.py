"""
Unit tests for streamlit_app/utils - input parsing/clamping and the range chart.
"""
import sys
from pathlib import Path

# Add parent and streamlit_app to path for imports
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent / "streamlit_app"))

import plotly.graph_objects as go

from tibia_core import compute_base_power_result
from utils.inputs import (
    format_int,
    format_multiplier,
    parse_base_power,
    parse_equip_bonus,
    parse_int,
    parse_level,
    parse_stat,
    parse_target_resistance,
)
from utils.range_chart import create_range_chart, DAMAGE_COLOR, HEALING_COLOR


class TestParseInt:
    """Tests for the generic parser."""

    def test_plain_values(self):
        assert parse_int(42, 0) == 42
        assert parse_int("42", 0) == 42
        assert parse_int(" -7 ", 0) == -7

    def test_leading_digits(self):
        """Like parseInt: trailing junk is ignored."""
        assert parse_int("12abc", 0) == 12

    def test_non_numeric_uses_default(self):
        assert parse_int("abc", 5) == 5
        assert parse_int("", 5) == 5
        assert parse_int(None, 5) == 5

    def test_floats_truncate(self):
        assert parse_int(150.7, 0) == 150
        assert parse_int(float("nan"), 3) == 3

    def test_minimum_clamp(self):
        assert parse_int(-5, 0, minimum=1) == 1
        assert parse_int("x", 0, minimum=1) == 1

    def test_non_numeric_logs_warning(self, caplog):
        parse_int("abc", 5)
        assert "abc" in caplog.text


class TestFieldParsers:
    """Field rules: level >= 1, stats >= 0, base power >= 1, equip signed, resistance 0 -> 100."""

    def test_level(self):
        assert parse_level("abc") == 1
        assert parse_level(0) == 1
        assert parse_level(-20) == 1
        assert parse_level(250) == 250

    def test_stats(self):
        assert parse_stat(-3) == 0
        assert parse_stat("x") == 0
        assert parse_stat(95) == 95

    def test_base_power(self):
        assert parse_base_power(0) == 1
        assert parse_base_power("") == 1
        assert parse_base_power(140) == 140

    def test_equip_bonus_signed(self):
        assert parse_equip_bonus("-15") == -15
        assert parse_equip_bonus("x") == 0
        assert parse_equip_bonus(-300) == -300

    def test_target_resistance(self):
        assert parse_target_resistance(50) == 50
        assert parse_target_resistance(0) == 100
        assert parse_target_resistance("") == 100
        assert parse_target_resistance(135) == 135


class TestFormatting:

    def test_multiplier_three_decimals(self):
        assert format_multiplier(6.980974144057547) == "6.981"
        assert format_multiplier(1.0) == "1.000"

    def test_int_no_grouping(self):
        assert format_int(1234567) == "1234567"
        assert format_int(-592) == "-592"


class TestRangeChart:
    """Tests for create_range_chart()."""

    def test_bar_spans_min_to_max(self):
        result = compute_base_power_result(250, 95, 140)
        fig = create_range_chart(result)
        assert isinstance(fig, go.Figure)

        bar = fig.data[0]
        assert list(bar.base) == [result.min]
        assert list(bar.x) == [result.spread]
        assert bar.marker.color == DAMAGE_COLOR

    def test_markers(self):
        result = compute_base_power_result(250, 95, 140)
        markers = create_range_chart(result).data[1]
        assert list(markers.x) == [result.min, result.avg, result.max]
        assert list(markers.text) == ["MIN 435", "AVG 591", "MAX 748"]

    def test_healing_colors(self):
        result = compute_base_power_result(250, 95, 140, calc_mode="healing")
        fig = create_range_chart(result, healing=True)
        assert fig.data[0].marker.color == HEALING_COLOR
        assert "Heal" in fig.data[0].hovertemplate

    def test_title_shows_spread(self):
        result = compute_base_power_result(250, 95, 140)
        fig = create_range_chart(result)
        assert "313" in fig.layout.title.text
