"""Tests for the weekly drill-down series."""

import pytest

from utils.shift_performance.constants import COLORS
from utils.shift_performance.models import MetricRecord
from utils.shift_performance.weekly_trend import build_weekly_trend, week_labels, weekly_goal_flags


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _record(**overrides) -> MetricRecord:
    fields = dict(
        month="March",
        value="1,350",
        status="green",
        goal=1500.0,
        goal_direction="lower",
        weekly_raw=(1200.0, 1600.0, 1250.0, 1350.0),
        week_numbers=(6, 7, 8, 9),
    )
    fields.update(overrides)
    return MetricRecord(**fields)


class TestBuildWeeklyTrend:
    def test_series(self) -> None:
        trend = build_weekly_trend("DPM", _record())
        assert trend.title == "DPM - March 2025"
        assert trend.labels == ["Week 6", "Week 7", "Week 8", "Week 9"]
        assert trend.values == [1200.0, 1600.0, 1250.0, 1350.0]
        assert trend.average == pytest.approx(1350.0)
        assert trend.monthly_value == "1,350"

    def test_goal_flags_lower_is_better(self) -> None:
        trend = build_weekly_trend("DPM", _record())
        assert trend.goal_met == [True, False, True, True]
        assert trend.weeks_met == 3
        assert trend.point_colors[1] == COLORS['goal_missed']

    def test_goal_flags_higher_is_better(self) -> None:
        record = _record(goal=1100.0, goal_direction="higher", weekly_raw=(1100.0, 1000.0))
        assert weekly_goal_flags(record) == [True, False]

    def test_flags_without_goal(self) -> None:
        trend = build_weekly_trend("DPM", _record(goal=None, status="red"))
        assert trend.goal_met == [None, None, None, None]
        assert trend.point_colors == [COLORS['goal_missed']] * 4
        assert trend.line_color == COLORS['goal_missed']

    def test_labels_fall_back_to_position(self) -> None:
        assert week_labels(_record(week_numbers=())) == ["Week 1", "Week 2", "Week 3", "Week 4"]

    def test_january_title_uses_next_year(self) -> None:
        trend = build_weekly_trend("DPM", _record(month="January"), fiscal_year=2025)
        assert trend.title == "DPM - January 2026"

    def test_no_weekly_values(self) -> None:
        assert build_weekly_trend("DPM", _record(weekly_raw=())) is None

    def test_frame(self) -> None:
        df = build_weekly_trend("DPM", _record()).to_frame()
        assert list(df.columns) == ["week", "value", "goal_met", "color"]
        assert len(df) == 4


class TestIrregularWeeklyData:
    """Weekly lists as they can arrive from the metrics file."""

    def test_mismatched_week_numbers_use_positions(self) -> None:
        trend = build_weekly_trend("DPM", _record(weekly_raw=(1.0, 2.0, 3.0), week_numbers=(10, 11)))
        assert trend.labels == ["Week 1", "Week 2", "Week 3"]
        assert len(trend.to_frame()) == 3

    def test_display_strings_are_parsed(self) -> None:
        trend = build_weekly_trend("DPM", _record(weekly_raw=("1,400", "1,300"), week_numbers=(6, 7)))
        assert trend.values == [1400.0, 1300.0]
        assert trend.goal_met == [True, True]
        assert trend.average == pytest.approx(1350.0)

    def test_unreadable_weeks_dropped(self) -> None:
        record = _record(weekly_raw=("1,600", "N/A", "pending", 1300), week_numbers=(6, 7, 8, 9))
        trend = build_weekly_trend("DPM", record)
        assert trend.labels == ["Week 6", "Week 9"]
        assert trend.values == [1600.0, 1300.0]
        assert trend.goal_met == [False, True]
        assert len(trend.to_frame()) == 2

    def test_nothing_readable(self) -> None:
        assert build_weekly_trend("DPM", _record(weekly_raw=("N/A", "-"), week_numbers=(6, 7))) is None
