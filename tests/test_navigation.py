"""Tests for the drill-down navigation state."""

from utils.shift_performance.navigation import (
    VIEW_COMPARISON,
    VIEW_MONTHS,
    VIEW_OVERVIEW,
    VIEW_SHIFT_DETAIL,
    VIEW_SHIFTS,
    NavigationState,
    comparison_selection_label,
)


class TestTransitions:
    def test_month_then_shift(self) -> None:
        nav = NavigationState()
        nav.select_month("March")
        assert nav.view == VIEW_SHIFTS
        nav.select_shift("dry-1st")
        assert nav.view == VIEW_SHIFT_DETAIL
        assert nav.shift_id == "dry-1st"

    def test_shift_requires_month(self) -> None:
        nav = NavigationState()
        nav.select_shift("dry-1st")
        assert nav.view == VIEW_MONTHS
        assert nav.shift_id is None

    def test_overview(self) -> None:
        nav = NavigationState()
        nav.open_overview()
        assert nav.view == VIEW_MONTHS
        nav.select_month("April")
        nav.open_overview()
        assert nav.view == VIEW_OVERVIEW

    def test_back_to_shifts_keeps_month(self) -> None:
        nav = NavigationState()
        nav.select_month("April")
        nav.select_shift("per-1st")
        nav.back_to_shifts()
        assert nav.view == VIEW_SHIFTS
        assert nav.month == "April"
        assert nav.shift_id is None

    def test_back_to_months_clears(self) -> None:
        nav = NavigationState()
        nav.select_month("April")
        nav.enable_comparison()
        nav.back_to_months()
        assert nav.view == VIEW_MONTHS
        assert nav.month is None
        assert not nav.comparison_mode


class TestComparisonSelection:
    def test_toggle_caps_at_three(self) -> None:
        nav = NavigationState()
        nav.select_month("April")
        nav.enable_comparison()
        for shift_id in ["dry-1st", "dry-2nd", "per-1st"]:
            assert nav.toggle_comparison_shift(shift_id)
        assert not nav.toggle_comparison_shift("per-2nd")
        assert nav.comparison_selection == ["dry-1st", "dry-2nd", "per-1st"]

    def test_toggle_removes(self) -> None:
        nav = NavigationState()
        nav.enable_comparison()
        nav.toggle_comparison_shift("dry-1st")
        nav.toggle_comparison_shift("dry-1st")
        assert nav.comparison_selection == []

    def test_start_needs_two(self) -> None:
        nav = NavigationState()
        nav.select_month("April")
        nav.enable_comparison()
        nav.toggle_comparison_shift("dry-1st")
        assert not nav.start_comparison()
        nav.toggle_comparison_shift("dry-2nd")
        assert nav.start_comparison()
        assert nav.view == VIEW_COMPARISON

    def test_selecting_month_resets_selection(self) -> None:
        nav = NavigationState()
        nav.select_month("April")
        nav.enable_comparison()
        nav.toggle_comparison_shift("dry-1st")
        nav.select_month("May")
        assert nav.comparison_selection == []
        assert not nav.comparison_mode

    def test_selection_label(self) -> None:
        nav = NavigationState()
        nav.enable_comparison()
        nav.toggle_comparison_shift("dry-1st")
        assert comparison_selection_label(nav) == (1, "1 selected (pick 2-3)")


class TestBreadcrumb:
    def test_levels(self) -> None:
        nav = NavigationState()
        assert nav.breadcrumb() == ["🏠 Months"]
        nav.select_month("April")
        assert nav.breadcrumb("Overview") == ["🏠 Months", "📅 April"]
        nav.open_overview()
        assert nav.breadcrumb("Overview") == ["🏠 Months", "📅 April", "Overview"]
