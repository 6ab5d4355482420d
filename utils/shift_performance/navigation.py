# utils/shift_performance/navigation.py
"""
Session-scoped navigation state for the Shift Performance page.

Month → Shift → Categories drill-down, plus the Month Overview and the
comparison view. The state object is plain data with transition methods;
the page stores it in st.session_state and passes month/shift/selection
to the aggregators as explicit arguments.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import streamlit as st

from .constants import CACHE_KEY_NAVIGATION, COMPARISON_MAX_SHIFTS, COMPARISON_MIN_SHIFTS

logger = logging.getLogger(__name__)

VIEW_MONTHS = 'months'
VIEW_SHIFTS = 'shifts'
VIEW_OVERVIEW = 'overview'
VIEW_SHIFT_DETAIL = 'shift_detail'
VIEW_COMPARISON = 'comparison'


@dataclass
class NavigationState:
    view: str = VIEW_MONTHS
    month: Optional[str] = None
    shift_id: Optional[str] = None
    comparison_mode: bool = False
    comparison_selection: List[str] = field(default_factory=list)

    # ==================== TRANSITIONS ====================

    def select_month(self, month: str):
        self.month = month
        self.shift_id = None
        self.view = VIEW_SHIFTS
        self.disable_comparison()

    def open_overview(self):
        if self.month is None:
            return
        self.view = VIEW_OVERVIEW

    def select_shift(self, shift_id: str):
        if self.month is None:
            return
        self.shift_id = shift_id
        self.view = VIEW_SHIFT_DETAIL

    def back_to_shifts(self):
        self.shift_id = None
        self.view = VIEW_SHIFTS if self.month else VIEW_MONTHS
        self.disable_comparison()

    def back_to_months(self):
        self.month = None
        self.shift_id = None
        self.view = VIEW_MONTHS
        self.disable_comparison()

    # ==================== COMPARISON ====================

    def enable_comparison(self):
        self.comparison_mode = True
        self.comparison_selection = []

    def disable_comparison(self):
        self.comparison_mode = False
        self.comparison_selection = []

    def toggle_comparison_shift(self, shift_id: str) -> bool:
        """
        Add or remove a shift from the comparison selection.

        Returns:
            False when adding would exceed the maximum selection
        """
        if shift_id in self.comparison_selection:
            self.comparison_selection.remove(shift_id)
            return True
        if len(self.comparison_selection) >= COMPARISON_MAX_SHIFTS:
            return False
        self.comparison_selection.append(shift_id)
        return True

    @property
    def can_compare(self) -> bool:
        return COMPARISON_MIN_SHIFTS <= len(self.comparison_selection) <= COMPARISON_MAX_SHIFTS

    def start_comparison(self) -> bool:
        if self.month is None or not self.can_compare:
            return False
        self.view = VIEW_COMPARISON
        logger.debug(f"[Navigation] Comparing {self.comparison_selection} in {self.month}")
        return True

    # ==================== BREADCRUMB ====================

    def breadcrumb(self, view_label: str = None) -> List[str]:
        """
        Breadcrumb parts: home only, home + month, or home + month + view.
        """
        parts = ['🏠 Months']
        if self.view == VIEW_MONTHS or self.month is None:
            return parts
        parts.append(f"📅 {self.month}")
        if self.view != VIEW_SHIFTS and view_label:
            parts.append(view_label)
        return parts


def get_navigation() -> NavigationState:
    """Navigation state for this session (created on first access)."""
    if CACHE_KEY_NAVIGATION not in st.session_state:
        st.session_state[CACHE_KEY_NAVIGATION] = NavigationState()
    return st.session_state[CACHE_KEY_NAVIGATION]


def reset_navigation():
    st.session_state[CACHE_KEY_NAVIGATION] = NavigationState()


def comparison_selection_label(state: NavigationState) -> Tuple[int, str]:
    count = len(state.comparison_selection)
    return count, f"{count} selected (pick {COMPARISON_MIN_SHIFTS}-{COMPARISON_MAX_SHIFTS})"
