# utils/shift_performance/overview/fragments.py
"""
Streamlit Fragments for Shift Performance - Month Overview.

Layout: KPI cards → Alerts → YTD → Rankings → Goal Achievement → Shift cards
"""

import logging
from typing import Mapping

import streamlit as st

from .charts import (
    render_alerts,
    render_goal_achievement,
    render_kpi_cards,
    render_rankings,
    render_shift_summary_cards,
    render_ytd_section,
)
from ..constants import DEFAULT_FISCAL_YEAR
from ..export_utils import (
    ShiftPerformanceExport,
    goal_achievement_frames,
    overview_frame,
    ytd_frame,
)
from ..goal_summary import summarize_goal_achievement
from ..models import ShiftDataset
from ..months import month_label
from ..overview_aggregator import aggregate_overview
from ..ranking_engine import rank_shifts
from ..ytd_aggregator import aggregate_ytd

logger = logging.getLogger(__name__)


@st.fragment
def overview_fragment(
    shifts: Mapping[str, ShiftDataset],
    month: str,
    fiscal_year: int = DEFAULT_FISCAL_YEAR,
    enable_export: bool = True,
    fragment_key: str = "sp_overview",
):
    """All-shifts overview for one month."""
    st.subheader(f"📊 {month_label(month, fiscal_year)} - All Shifts Overview")

    snapshot = aggregate_overview(shifts, month)
    if not snapshot.shifts:
        st.info("No shift data for this month")
        return

    render_kpi_cards(snapshot)
    render_alerts(snapshot)

    ytd = aggregate_ytd(shifts, month)
    if ytd is not None:
        st.divider()
        render_ytd_section(ytd, key_prefix=f"{fragment_key}_ytd")

    st.divider()
    st.markdown("#### 🏅 Shift Rankings")
    ranking = rank_shifts(snapshot.shifts)
    render_rankings(ranking)

    st.divider()
    st.markdown("#### 🎯 Goal Achievement Summary")
    goal_summary = summarize_goal_achievement(snapshot.shifts)
    render_goal_achievement(goal_summary, key=f"{fragment_key}_goals")

    st.divider()
    st.markdown("#### 👥 Shift Summaries")
    render_shift_summary_cards(snapshot.shifts)

    if enable_export:
        with st.expander("📥 Export"):
            frames = {'Shift Summary': overview_frame(snapshot)}
            frames.update(goal_achievement_frames(goal_summary))
            frames['YTD'] = ytd_frame(ytd)
            ShiftPerformanceExport.render_workbook_button(
                frames,
                filename=f"shift_overview_{month.lower()}",
                key=f"{fragment_key}_export",
            )

    logger.debug(f"[Overview] Rendered {month}: {len(snapshot.shifts)} shifts")
