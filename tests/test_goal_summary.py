"""Tests for the goal achievement breakdown."""

import pytest

from utils.shift_performance.goal_summary import (
    MetricAchievement,
    goal_badge,
    summarize_goal_achievement,
)
from utils.shift_performance.overview_aggregator import collect_shift_summaries


class TestSummarizeGoalAchievement:
    @pytest.fixture
    def summary(self, fleet):
        return summarize_goal_achievement(collect_shift_summaries(fleet, "April"))

    def test_unmeasured_metrics_left_out(self, summary) -> None:
        assert [m.metric for m in summary.metrics] == [
            "Safety Medical", "Safety Non-Medical", "DPM", "Chase %", "Overtime", "Receiving CPH",
        ]

    def test_counters(self, summary) -> None:
        by_metric = {m.metric: m for m in summary.metrics}

        medical = by_metric["Safety Medical"]
        assert (medical.met, medical.missed, medical.not_available) == (2, 0, 1)
        assert medical.status_class == "excellent"

        chase = by_metric["Chase %"]
        assert (chase.met, chase.missed, chase.not_available) == (1, 1, 1)
        assert chase.met_percent == 50
        assert chase.status_class == "warning"

        dpm = by_metric["DPM"]
        assert dpm.met_percent == 67
        assert dpm.missed_percent == 33

    def test_shift_badges(self, summary) -> None:
        assert [(s.shift_name, s.badge) for s in summary.shifts] == [
            ("Dry 1st", "⭐"), ("Dry 2nd", "⭐"), ("Perishable 1st", "🏆"),
        ]

    def test_shift_status_lists(self, summary) -> None:
        dry_2nd = summary.shifts[1]
        assert dry_2nd.red == ["Chase %", "Overtime", "Receiving CPH"]
        assert dry_2nd.to_dict()["missed_metrics"] == "Chase %, Overtime, Receiving CPH"

    def test_empty(self) -> None:
        summary = summarize_goal_achievement([])
        assert summary.metrics == []
        assert summary.shifts == []


class TestTiers:
    @pytest.mark.parametrize("percent, badge", [
        (100, "🏆"), (90, "⭐⭐⭐"), (75, "⭐⭐"), (50, "⭐"), (49, "⚠️"),
    ])
    def test_goal_badge(self, percent, badge) -> None:
        assert goal_badge(percent) == badge

    @pytest.mark.parametrize("met, missed, status", [
        (4, 0, "excellent"), (3, 1, "good"), (1, 1, "warning"), (1, 3, "poor"),
    ])
    def test_status_class(self, met, missed, status) -> None:
        assert MetricAchievement("DPM", met, missed, 0).status_class == status
