"""Tests for metric extraction and previous-month trends."""

from utils.shift_performance.constants import CATEGORY_QUALITY, CATEGORY_SAFETY
from utils.shift_performance.extractor import (
    extract,
    extract_for_month,
    extract_month,
    extract_month_with_trend,
    extract_with_trend,
    iter_month_records,
    metric_history,
)

DPM = (CATEGORY_QUALITY, "DPM")


class TestExtract:
    """Lookups return None instead of raising."""

    def test_by_calendar_index(self, fleet) -> None:
        record = extract(fleet["dry-1st"], DPM, 2)
        assert record.month == "March"
        assert record.value == "1,200"

    def test_by_name_searches_categories(self, fleet) -> None:
        record = extract_for_month(fleet["dry-1st"], "Safety Medical", "March")
        assert record.value == 1

    def test_missing_metric(self, fleet) -> None:
        assert extract(fleet["per-1st"], "Chase %", 2) is None
        assert extract(fleet["per-1st"], (CATEGORY_SAFETY, "DPM"), 2) is None

    def test_out_of_range_index(self, fleet) -> None:
        assert extract(fleet["dry-1st"], DPM, -1) is None
        assert extract(fleet["dry-1st"], DPM, 12) is None

    def test_unknown_month(self, fleet) -> None:
        assert extract_for_month(fleet["dry-1st"], DPM, "Smarch") is None

    def test_padded_month_is_placeholder(self, fleet) -> None:
        record = extract_for_month(fleet["dry-1st"], DPM, "July")
        assert record.is_not_available
        assert not record.has_status


class TestExtractWithTrend:
    def test_trend_against_previous_fiscal_month(self, fleet) -> None:
        snapshot = extract_with_trend(fleet["dry-1st"], DPM, "April")
        assert snapshot.previous.month == "March"
        assert snapshot.trend.direction == "up"
        assert snapshot.trend.color == "red"
        assert snapshot.previous_value == "1,200"

    def test_no_trend_when_previous_is_not_available(self, fleet) -> None:
        snapshot = extract_with_trend(fleet["dry-2nd"], DPM, "April")
        assert snapshot.previous is not None
        assert snapshot.trend is None
        assert snapshot.previous_value is None

    def test_no_trend_when_current_is_not_available(self, fleet) -> None:
        snapshot = extract_with_trend(fleet["dry-2nd"], DPM, "March")
        assert snapshot.record.is_not_available
        assert snapshot.trend is None

    def test_february_has_no_previous(self, fleet) -> None:
        snapshot = extract_with_trend(fleet["dry-1st"], DPM, "February")
        assert snapshot.previous is None
        assert snapshot.trend is None

    def test_missing_metric(self, fleet) -> None:
        assert extract_with_trend(fleet["per-1st"], "Chase %", "April") is None


class TestMonthMappings:
    def test_extract_month_flat_mapping(self, fleet) -> None:
        month_data = extract_month(fleet["dry-1st"], "April")
        assert list(month_data) == [
            "DPM", "Chase %", "Safety Medical", "Safety Non-Medical", "Overtime", "Receiving CPH",
        ]
        assert month_data["Overtime"].value == "0"

    def test_extract_month_unknown(self, fleet) -> None:
        assert extract_month(fleet["dry-1st"], "Smarch") == {}
        assert extract_month_with_trend(fleet["dry-1st"], "Smarch") == {}

    def test_extract_month_with_trend(self, fleet) -> None:
        month_data = extract_month_with_trend(fleet["dry-1st"], "April")
        assert month_data["Safety Non-Medical"].trend.color == "red"
        assert month_data["Receiving CPH"].trend.color == "green"

    def test_metric_history_in_fiscal_order(self, fleet) -> None:
        history = metric_history(fleet["dry-1st"], DPM)
        assert len(history) == 12
        assert history[0].month == "February"
        assert history[-1].month == "January"
        assert [record.value for record in history[:3]] == ["1,400", "1,200", "1,600"]

    def test_metric_history_missing(self, fleet) -> None:
        assert metric_history(fleet["per-1st"], "Chase %") == []


class TestIterMonthRecords:
    def test_yields_every_category_slot(self, make_shifts) -> None:
        shifts = make_shifts({
            "dry-1st": {
                DPM: {"March": ("1,200", "green")},
                (CATEGORY_SAFETY, "DPM"): {"March": ("1,700", "red")},
            },
        })
        rows = [(category, record.value) for category, _, record in iter_month_records(shifts["dry-1st"], "March")]
        assert rows == [(CATEGORY_QUALITY, "1,200"), (CATEGORY_SAFETY, "1,700")]

    def test_unknown_month(self, fleet) -> None:
        assert list(iter_month_records(fleet["dry-1st"], "Smarch")) == []
