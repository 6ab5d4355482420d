# utils/shift_performance/shift_detail/fragments.py
"""
Streamlit Fragments for Shift Performance - Shift Detail.

Layout: shift YTD (skipped in February) → one section per category with a
card per metric. Expanding a card shows its weekly trend and month history.
"""

import logging

import streamlit as st

from .charts import build_weekly_trend_chart, render_month_strip
from ..common.charts import status_icon, trend_delta, trend_delta_color
from ..constants import CATEGORY_ICONS, DEFAULT_FISCAL_YEAR
from ..extractor import extract_with_trend, metric_history
from ..models import ShiftDataset
from ..months import month_label
from ..overview.charts import render_ytd_section
from ..weekly_trend import build_weekly_trend
from ..ytd_aggregator import aggregate_shift_ytd

logger = logging.getLogger(__name__)


def _render_metric_card(shift: ShiftDataset, category: str, metric_name: str, month: str,
                        fiscal_year: int, fragment_key: str):
    snapshot = extract_with_trend(shift, (category, metric_name), month)

    with st.container(border=True):
        if snapshot is None:
            st.caption(f"{metric_name}: No data")
            return

        st.metric(
            label=f"{status_icon(snapshot.status)} {metric_name}",
            value=str(snapshot.value),
            delta=trend_delta(snapshot.trend),
            delta_color=trend_delta_color(snapshot.trend),
        )

        trend = build_weekly_trend(metric_name, snapshot.record, fiscal_year)
        with st.expander("📈 Details", expanded=False):
            if trend is not None:
                st.altair_chart(
                    build_weekly_trend_chart(trend),
                    use_container_width=True,
                    key=f"{fragment_key}_{category}_{metric_name}_weekly"
                )
                goal_text = f" · Goal: {trend.goal:,.2f} ({trend.goal_direction})" if trend.goal is not None else ""
                st.caption(
                    f"Monthly Average: {trend.monthly_value} · "
                    f"{trend.weeks_met}/{len(trend.values)} weeks on goal{goal_text}"
                )
            else:
                st.caption("No weekly breakdown for this month")
            render_month_strip(metric_history(shift, (category, metric_name)))


@st.fragment
def shift_detail_fragment(
    shift: ShiftDataset,
    month: str,
    fiscal_year: int = DEFAULT_FISCAL_YEAR,
    fragment_key: str = "sp_detail",
):
    """Category/metric drill-down for one shift and month."""
    st.subheader(f"🎯 {shift.name} - {month_label(month, fiscal_year)}")

    ytd = aggregate_shift_ytd(shift, month)
    if ytd is not None:
        render_ytd_section(ytd, key_prefix=f"{fragment_key}_{shift.id}_ytd")
        st.divider()

    for category, metrics in shift.categories.items():
        st.markdown(f"#### {CATEGORY_ICONS.get(category, '📊')} {category}")
        metric_names = list(metrics)
        per_row = 4
        for row_start in range(0, len(metric_names), per_row):
            cols = st.columns(per_row)
            for col, metric_name in zip(cols, metric_names[row_start:row_start + per_row]):
                with col:
                    _render_metric_card(shift, category, metric_name, month, fiscal_year,
                                        fragment_key=f"{fragment_key}_{shift.id}")

    logger.debug(f"[Detail] Rendered {shift.id} / {month}")
