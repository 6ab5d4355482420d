# utils/shift_performance/comparison/fragments.py
"""
Streamlit Fragments for Shift Performance - Shift Comparison.

Layout: summary cards (best performer 🏆) → overall winner + top metric
winners → metric-by-metric rows grouped by category.
"""

import logging
from typing import Mapping, Sequence

import streamlit as st

from ..common.charts import status_icon
from ..comparison_engine import ComparisonResult, ComparisonRow, compare_shifts
from ..constants import DEFAULT_FISCAL_YEAR, STATUS_GREEN, STATUS_RED
from ..export_utils import ShiftPerformanceExport, comparison_frame
from ..models import ShiftDataset
from ..months import month_label

logger = logging.getLogger(__name__)


def render_summary_cards(result: ComparisonResult):
    best = result.best_performer
    cols = st.columns(len(result.shifts))
    for col, shift in zip(cols, result.shifts):
        # every shift tied with the best performer gets the trophy
        is_best = best is not None and shift.goal_percent == best.goal_percent
        with col:
            with st.container(border=True):
                st.metric(
                    label=f"{'🏆 ' if is_best else ''}{shift.name}",
                    value=f"{shift.goal_percent}%",
                    help=f"{shift.goals_met_count}/{shift.total_metrics} goals met"
                )
                st.caption(f"{shift.goals_met_count}/{shift.total_metrics} goals met")


def render_winner_section(result: ComparisonResult):
    winner = result.overall_winner
    if winner is None:
        return

    wins = result.win_counts.get(winner.id, 0)
    st.success(f"🏆 Overall Winner: **{winner.name}** ({wins} metrics won)")

    shown, remaining = result.winner_highlights()
    for row in shown:
        st.markdown(f"- **{row.metric}**: {row.winner_name} ✓")
    if remaining > 0:
        st.caption(f"... and {remaining} more")


def _render_row(row: ComparisonRow):
    with st.container(border=True):
        col_name, col_goal = st.columns([3, 1])
        with col_name:
            st.markdown(f"**{row.metric}**")
        with col_goal:
            st.caption(f"Goal: {row.goal_label}" if row.goal_label else "")

        cols = st.columns(len(row.cells))
        for col, cell in zip(cols, row.cells):
            with col:
                value = cell.record.value if cell.record is not None else 'N/A'
                badges = []
                if cell.status == STATUS_GREEN:
                    badges.append(f"{status_icon(STATUS_GREEN)} Goal Met")
                elif cell.status == STATUS_RED:
                    badges.append(f"{status_icon(STATUS_RED)} Missed")
                if cell.is_winner:
                    badges.append("🏆 Winner")
                st.caption(cell.shift_name)
                st.markdown(f"**{value}**")
                if badges:
                    st.caption(" · ".join(badges))


def render_metric_rows(result: ComparisonResult):
    for group_name, rows in result.grouped_rows():
        st.markdown(f"#### {group_name}")
        for row in rows:
            _render_row(row)


@st.fragment
def comparison_fragment(
    shifts: Mapping[str, ShiftDataset],
    shift_ids: Sequence[str],
    month: str,
    fiscal_year: int = DEFAULT_FISCAL_YEAR,
    enable_export: bool = True,
    fragment_key: str = "sp_comparison",
):
    """Side-by-side comparison of the selected shifts."""
    result = compare_shifts(shifts, shift_ids, month)
    if len(result.shifts) < 2:
        st.warning("Select at least 2 known shifts to compare.")
        return

    st.subheader(f"⚖️ {month_label(month, fiscal_year)} - {' vs '.join(s.name for s in result.shifts)}")

    render_summary_cards(result)
    render_winner_section(result)

    st.markdown("### 📊 Metric-by-Metric Comparison")
    render_metric_rows(result)

    if enable_export:
        with st.expander("📥 Export"):
            ShiftPerformanceExport.render_download_button(
                comparison_frame(result),
                filename=f"shift_comparison_{month.lower()}",
                key=fragment_key,
            )
