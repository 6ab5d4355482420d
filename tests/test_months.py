"""Tests for calendar/fiscal month resolution."""

from utils.shift_performance.months import (
    NOT_FOUND,
    display_year,
    fiscal_progress,
    fiscal_window,
    month_label,
    previous_fiscal_month,
    to_calendar_index,
    to_fiscal_index,
    ytd_window,
)


class TestIndexes:
    def test_calendar_index(self) -> None:
        assert to_calendar_index("January") == 0
        assert to_calendar_index("December") == 11

    def test_fiscal_index(self) -> None:
        assert to_fiscal_index("February") == 0
        assert to_fiscal_index("January") == 11

    def test_unknown_month(self) -> None:
        assert to_calendar_index("Smarch") == NOT_FOUND
        assert to_fiscal_index("march") == NOT_FOUND


class TestWindows:
    """Fiscal windows run February through the target month."""

    def test_fiscal_window(self) -> None:
        assert fiscal_window("April") == ["February", "March", "April"]
        assert fiscal_window("February") == ["February"]
        assert len(fiscal_window("January")) == 12

    def test_ytd_window_empty_for_february(self) -> None:
        assert ytd_window("February") == []

    def test_ytd_window_empty_for_unknown(self) -> None:
        assert ytd_window("Smarch") == []
        assert fiscal_window("Smarch") == []

    def test_ytd_window_march(self) -> None:
        assert ytd_window("March") == ["February", "March"]

    def test_previous_fiscal_month(self) -> None:
        assert previous_fiscal_month("March") == "February"
        assert previous_fiscal_month("January") == "December"
        assert previous_fiscal_month("February") is None
        assert previous_fiscal_month("Smarch") is None

    def test_progress(self) -> None:
        assert fiscal_progress(3) == 0.25


class TestDisplayYear:
    def test_january_rolls_over(self) -> None:
        assert display_year("January") == 2026
        assert display_year("December") == 2025
        assert display_year("January", fiscal_year=2030) == 2031

    def test_month_label(self) -> None:
        assert month_label("March") == "March 2025"
        assert month_label("January") == "January 2026"
