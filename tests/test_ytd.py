"""Tests for Year-to-Date rollups."""

import pytest

from utils.shift_performance.constants import CATEGORY_QUALITY, CATEGORY_SAFETY
from utils.shift_performance.overview_aggregator import aggregate_overview
from utils.shift_performance.ytd_aggregator import (
    YTD_SPECS,
    aggregate_shift_ytd,
    aggregate_ytd,
    fold_metric,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _spec(metric: str):
    return next(spec for spec in YTD_SPECS if spec.metric == metric)


class TestWindow:
    def test_february_has_no_ytd(self, fleet) -> None:
        assert aggregate_ytd(fleet, "February") is None
        assert aggregate_shift_ytd(fleet["dry-1st"], "February") is None

    def test_unknown_month_has_no_ytd(self, fleet) -> None:
        assert aggregate_ytd(fleet, "Smarch") is None

    def test_window_and_progress(self, fleet) -> None:
        ytd = aggregate_ytd(fleet, "April")
        assert ytd.months == ["February", "March", "April"]
        assert ytd.start_month == "February"
        assert ytd.end_month == "April"
        assert ytd.progress == 0.25
        assert ytd.progress_percent == 25


class TestFleetYTD:
    """Fleet figures: monthly cross-shift figure first, then the window fold."""

    @pytest.fixture
    def ytd(self, fleet):
        return aggregate_ytd(fleet, "April")

    def test_dpm_average_of_monthly_averages(self, ytd) -> None:
        dpm = ytd.get("DPM")
        # monthly: 1733 (Feb), 1350 (Mar, N/A skipped), 1467 (Apr)
        assert [point.value for point in dpm.series] == [1733, 1350, 1467]
        assert dpm.average == 1517
        assert dpm.best_month == "March"
        assert dpm.worst_month == "February"
        assert dpm.trend == 1467 - 1733

    def test_safety_running_total(self, ytd) -> None:
        safety = ytd.get("Safety")
        assert safety.total == 5
        assert safety.average == pytest.approx(5 / 3)
        assert safety.best_month == "April"
        # February and March tie at 2; the earlier month keeps the title
        assert safety.worst_month == "February"

    def test_overtime_running_total(self, ytd) -> None:
        overtime = ytd.get("Overtime")
        assert overtime.total == 16.5
        assert overtime.best_month == "March"
        assert overtime.worst_month == "February"

    def test_chase_is_not_rounded(self, ytd) -> None:
        chase = ytd.get("Chase %")
        assert chase.average == pytest.approx(8.5 / 3)
        assert chase.best_month == "April"

    def test_receiving_higher_is_better(self, ytd) -> None:
        receiving = ytd.get("Receiving CPH")
        assert [point.value for point in receiving.series] == [1050, 1133, 1150]
        assert receiving.average == 1111
        assert receiving.best_month == "April"
        assert receiving.worst_month == "February"

    def test_metric_without_data(self, ytd) -> None:
        shipping = ytd.get("Shipping CPH")
        assert not shipping.has_data
        assert shipping.best is None
        assert shipping.best_month == ""

    def test_rows(self, ytd) -> None:
        rows = ytd.to_rows()
        assert [row["metric"] for row in rows] == [spec.metric for spec in YTD_SPECS]
        assert rows[0]["total"] is None

    def test_deterministic(self, fleet) -> None:
        first = aggregate_ytd(fleet, "April")
        second = aggregate_ytd(fleet, "April")
        for metric, stats in first.metrics.items():
            assert stats.best_month == second.metrics[metric].best_month
            assert stats.worst_month == second.metrics[metric].worst_month

    def test_totals_match_overview(self, fleet, ytd) -> None:
        overviews = [aggregate_overview(fleet, month) for month in ["February", "March", "April"]]
        assert sum(o.safety_incidents for o in overviews) == ytd.get("Safety").total
        assert sum(o.overtime_hours for o in overviews) == ytd.get("Overtime").total


class TestShiftYTD:
    def test_counted_average_skips_not_available(self, make_shifts) -> None:
        shifts = make_shifts({
            "dry-1st": {
                (CATEGORY_QUALITY, "DPM"): {
                    "February": ("N/A", None),
                    "March": ("1,400", "green"),
                    "April": ("N/A", None),
                    "May": ("1,600", "red"),
                },
            },
        })
        dpm = aggregate_shift_ytd(shifts["dry-1st"], "May").get("DPM")
        assert dpm.average == 1500
        assert dpm.included_count == 2
        assert dpm.best_month == "March"
        assert dpm.trend == 200

    def test_single_point_has_no_trend(self, fleet) -> None:
        ytd = aggregate_shift_ytd(fleet["dry-2nd"], "March")
        dpm = ytd.get("DPM")
        assert dpm.included_count == 1
        assert dpm.trend == 0

    def test_running_total_counts_missing_as_zero(self, make_shifts) -> None:
        shifts = make_shifts({
            "dry-1st": {
                (CATEGORY_SAFETY, "Safety Medical"): {"February": (1, "red"), "March": ("N/A", None)},
            },
        })
        safety = aggregate_shift_ytd(shifts["dry-1st"], "March").get("Safety")
        assert [(p.month, p.value) for p in safety.series] == [("February", 1), ("March", 0)]
        assert safety.total == 1
        assert safety.average == 0.5

    def test_shift_scope(self, fleet) -> None:
        ytd = aggregate_shift_ytd(fleet["dry-2nd"], "April")
        assert ytd.scope == "dry-2nd"
        assert ytd.name == "Dry 2nd"
        assert ytd.get("DPM").average == 1550


class TestFoldMetric:
    def test_first_occurrence_wins_ties(self) -> None:
        stats = fold_metric(
            _spec("Receiving CPH"),
            [("February", 1100.0), ("March", 1200.0), ("April", 1200.0), ("May", 1000.0), ("June", 1000.0)],
            5,
        )
        assert stats.best_month == "March"
        assert stats.worst_month == "May"

    def test_none_readings_skipped(self) -> None:
        stats = fold_metric(_spec("DPM"), [("February", None), ("March", None)], 2)
        assert not stats.has_data
        assert stats.average == 0


class TestExplicitSelection:
    def test_empty_selection_has_no_data(self, fleet) -> None:
        ytd = aggregate_ytd(fleet, "April", shift_ids=[])
        assert not ytd.get("DPM").has_data
        assert ytd.get("Safety").total == 0

    def test_subset_selection(self, fleet) -> None:
        ytd = aggregate_ytd(fleet, "April", shift_ids=["dry-2nd"])
        assert ytd.get("DPM").average == 1550
