# utils/shift_performance/overview/charts.py
"""
Month Overview charts and cards for Shift Performance.

Charts:
- render_kpi_cards: Safety / Avg DPM / Overtime / Goals Met with trends
- render_alerts: issues requiring attention + successes
- build_ytd_sparkline / render_ytd_section: YTD tiles with monthly bars
- render_rankings: top/bottom shifts, metric leaders, areas of concern
- build_goal_achievement_chart / render_goal_achievement: met vs missed per metric
- render_shift_summary_cards: per-shift score card with key metrics
"""

import logging
from typing import List, Optional

import altair as alt
import pandas as pd
import streamlit as st

from ..common.charts import empty_chart, status_icon, trend_delta, trend_delta_color
from ..constants import (
    CHART_HEIGHT,
    COLORS,
    DPM_GOAL,
    FISCAL_MONTHS,
    METRIC_DPM,
    METRIC_OVERTIME,
    METRIC_RECEIVING_CPH,
    METRIC_SHIPPING_CPH,
    SPARKLINE_HEIGHT,
    YTD_MODE_TOTAL,
)
from ..goal_summary import GoalAchievementSummary
from ..overview_aggregator import OverviewSnapshot, ShiftMonthSummary
from ..ranking_engine import RankingResult
from ..ytd_aggregator import YTDMetricStats, YTDSnapshot

logger = logging.getLogger(__name__)

_SCORE_COLORS = {
    'excellent': COLORS['goal_met'],
    'good': COLORS['primary'],
    'needs-improvement': COLORS['warning'],
    'poor': COLORS['goal_missed'],
}


def _fmt(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return 'N/A'
    return f"{value:,.{decimals}f}"


# =============================================================================
# KPI CARDS
# =============================================================================

def render_kpi_cards(snapshot: OverviewSnapshot):
    """Fleet KPI cards with month-over-month trends."""
    trends = snapshot.trends
    with st.container(border=True):
        st.markdown("**📊 MONTH AT A GLANCE**")
        col1, col2, col3, col4 = st.columns(4)

        with col1:
            st.metric(
                label=f"🛡️ Safety Incidents {'✅' if snapshot.safety_status == 'success' else '🚨'}",
                value=_fmt(snapshot.safety_incidents),
                delta=trend_delta(trends.safety),
                delta_color=trend_delta_color(trends.safety),
                help="Medical + Non-Medical incidents across all shifts"
            )

        with col2:
            st.metric(
                label=f"📊 Avg DPM {'✅' if snapshot.dpm_status == 'success' else '⚠️'}",
                value=_fmt(snapshot.avg_dpm) if snapshot.dpm_count else 'N/A',
                delta=trend_delta(trends.dpm),
                delta_color=trend_delta_color(trends.dpm),
                help=f"Average over {snapshot.dpm_count} shifts with a measurement. Goal ≤ {DPM_GOAL:,}"
            )

        with col3:
            st.metric(
                label=f"⏰ Overtime {'✅' if snapshot.overtime_status == 'success' else '🚨'}",
                value=f"{snapshot.overtime_hours:,.1f} h",
                delta=trend_delta(trends.overtime),
                delta_color=trend_delta_color(trends.overtime),
                help="Total overtime hours across all shifts"
            )

        with col4:
            st.metric(
                label="🎯 Goals Met",
                value=f"{snapshot.goals_met_percent}%",
                delta=trend_delta(trends.goals_met),
                delta_color=trend_delta_color(trends.goals_met),
                help=f"{snapshot.goals_met_total} of {snapshot.total_goals} metrics on goal"
            )


def render_alerts(snapshot: OverviewSnapshot):
    col_alerts, col_successes = st.columns(2)

    with col_alerts:
        st.markdown("##### 🚨 Issues Requiring Attention")
        if not snapshot.alerts:
            st.success("No issues this month")
        for alert in snapshot.alerts:
            st.markdown(f"- **{alert.text}**: {alert.value}")

    with col_successes:
        st.markdown("##### 🌟 Successes")
        if not snapshot.successes:
            st.caption("No DPM goals met this month")
        for success in snapshot.successes:
            st.markdown(f"- **{success.text}**: {success.value}")


# =============================================================================
# YTD
# =============================================================================

def build_ytd_sparkline(stats: YTDMetricStats) -> alt.Chart:
    """Monthly bars for one YTD metric, best month highlighted."""
    if not stats.has_data:
        return empty_chart("No data")

    df = pd.DataFrame([{'month': point.month, 'value': point.value} for point in stats.series])
    df['is_best'] = df['month'] == stats.best_month

    return alt.Chart(df).mark_bar(
        cornerRadiusTopLeft=2, cornerRadiusTopRight=2
    ).encode(
        x=alt.X('month:N', sort=FISCAL_MONTHS, axis=None),
        y=alt.Y('value:Q', axis=None),
        color=alt.condition(
            alt.datum.is_best,
            alt.value(COLORS['best']),
            alt.value(COLORS['neutral'])
        ),
        tooltip=[
            alt.Tooltip('month:N', title='Month'),
            alt.Tooltip('value:Q', title=stats.metric, format=',.1f'),
        ]
    ).properties(width='container', height=SPARKLINE_HEIGHT)


def _render_ytd_tile(stats: YTDMetricStats, key: str):
    with st.container(border=True):
        if stats.mode == YTD_MODE_TOTAL:
            st.metric(
                label=f"{stats.metric} (YTD total)",
                value=_fmt(stats.total, 1 if not float(stats.total).is_integer() else 0),
                help=f"Monthly average {_fmt(stats.average, 1)}"
            )
        else:
            st.metric(
                label=f"{stats.metric} (YTD avg)",
                value=_fmt(stats.average, 0 if float(stats.average).is_integer() else 2),
                delta=f"{stats.trend:+,.1f} since start" if stats.included_count >= 2 else None,
                delta_color='off',
                help=f"Average of {stats.included_count} months with data"
            )

        if stats.has_data:
            st.caption(
                f"🏆 Best: {stats.best_month} ({_fmt(stats.best, 1)}) · "
                f"⚠️ Worst: {stats.worst_month} ({_fmt(stats.worst, 1)})"
            )
        st.altair_chart(build_ytd_sparkline(stats), use_container_width=True, key=key)


def render_ytd_section(ytd: Optional[YTDSnapshot], key_prefix: str = "sp_ytd"):
    """YTD tiles; nothing is rendered without a YTD window (February)."""
    if ytd is None:
        return

    st.markdown(f"#### 📅 Year-to-Date: {ytd.name} ({ytd.start_month} → {ytd.end_month})")
    st.progress(min(ytd.progress, 1.0), text=f"{ytd.month_count} of 12 fiscal months ({ytd.progress_percent}%)")

    tiles = [stats for stats in ytd.metrics.values()]
    for row_start in range(0, len(tiles), 4):
        cols = st.columns(4)
        for col, stats in zip(cols, tiles[row_start:row_start + 4]):
            with col:
                _render_ytd_tile(stats, key=f"{key_prefix}_{stats.metric}")


# =============================================================================
# RANKINGS
# =============================================================================

def render_rankings(ranking: RankingResult):
    if not ranking.ranked:
        st.info("No shifts to rank")
        return

    col_top, col_bottom = st.columns(2)
    with col_top:
        st.markdown("##### 🏆 Top Performers")
        for entry in ranking.top:
            st.markdown(
                f"**{entry.label}** {entry.summary.name}: "
                f"{entry.summary.goals_met_count}/{entry.summary.total_metrics} goals ({entry.summary.goal_percent}%)"
            )
    with col_bottom:
        st.markdown("##### 📉 Needs Improvement")
        for entry in ranking.bottom:
            st.markdown(
                f"**{entry.label}** {entry.summary.name}: "
                f"{entry.summary.goals_met_count}/{entry.summary.total_metrics} goals ({entry.summary.goal_percent}%)"
            )

    st.markdown("##### 🥇 Metric Leaders")
    cols = st.columns(5)
    leader_cards = [
        (METRIC_DPM, "Lowest DPM"),
        (METRIC_OVERTIME, "Lowest Overtime"),
        (METRIC_RECEIVING_CPH, "Best Receiving CPH"),
        (METRIC_SHIPPING_CPH, "Best Shipping CPH"),
    ]
    for col, (metric_name, label) in zip(cols, leader_cards):
        best = ranking.leaders.get(metric_name).best if metric_name in ranking.leaders else None
        with col:
            st.metric(label=label, value=best.shift_name if best else 'N/A',
                      delta=str(best.value) if best else None, delta_color='off')
    with cols[4]:
        zero = ranking.zero_safety_shifts
        st.metric(label="Zero Safety Incidents", value=f"{len(zero)} shifts",
                  help=", ".join(zero) if zero else "No shift was incident-free")

    if ranking.has_concerns:
        st.markdown("##### ⚠️ Areas of Concern")
        for metric_name, info in ranking.concerns.items():
            st.warning(f"**{metric_name}**: {info.shift_name} at {info.value}")


# =============================================================================
# GOAL ACHIEVEMENT
# =============================================================================

def build_goal_achievement_chart(summary: GoalAchievementSummary) -> alt.Chart:
    """Stacked met/missed bars per metric."""
    if not summary.metrics:
        return empty_chart("No goal data for this month")

    rows = []
    for metric in summary.metrics:
        rows.append({'metric': metric.metric, 'result': 'Met', 'shifts': metric.met, 'percent': metric.met_percent})
        rows.append({'metric': metric.metric, 'result': 'Missed', 'shifts': metric.missed, 'percent': metric.missed_percent})
    df = pd.DataFrame(rows)
    order = [metric.metric for metric in summary.metrics]

    return alt.Chart(df).mark_bar().encode(
        y=alt.Y('metric:N', sort=order, title=None),
        x=alt.X('shifts:Q', stack='zero', title='Shifts'),
        color=alt.Color(
            'result:N',
            scale=alt.Scale(domain=['Met', 'Missed'], range=[COLORS['goal_met'], COLORS['goal_missed']]),
            legend=alt.Legend(title=None, orient='bottom')
        ),
        tooltip=[
            alt.Tooltip('metric:N', title='Metric'),
            alt.Tooltip('result:N', title='Result'),
            alt.Tooltip('shifts:Q', title='Shifts'),
            alt.Tooltip('percent:Q', title='%'),
        ]
    ).properties(width='container', height=CHART_HEIGHT)


def render_goal_achievement(summary: GoalAchievementSummary, key: str = "sp_goal_chart"):
    st.altair_chart(build_goal_achievement_chart(summary), use_container_width=True, key=key)

    if summary.shifts:
        df = pd.DataFrame([shift.to_dict() for shift in summary.shifts])
        st.dataframe(
            df,
            hide_index=True,
            use_container_width=True,
            column_config={
                'goal_percent': st.column_config.ProgressColumn(
                    'Goal %', min_value=0, max_value=100, format='%d%%'
                ),
            }
        )


# =============================================================================
# SHIFT SUMMARY CARDS
# =============================================================================

def _render_shift_summary_card(summary: ShiftMonthSummary):
    color = _SCORE_COLORS.get(summary.score_class, COLORS['neutral'])
    with st.container(border=True):
        col_name, col_score = st.columns([3, 1])
        with col_name:
            st.markdown(f"**{summary.name}**")
        with col_score:
            st.markdown(
                f"<span style='color:{color};font-weight:bold'>{summary.goal_percent}%</span>",
                unsafe_allow_html=True
            )
        for metric_name, snapshot in summary.key_metrics():
            arrow = snapshot.trend.arrow if snapshot.trend else ''
            st.caption(f"{status_icon(snapshot.status)} {metric_name} {arrow}: **{snapshot.value}**")


def render_shift_summary_cards(summaries: List[ShiftMonthSummary], per_row: int = 4):
    for row_start in range(0, len(summaries), per_row):
        cols = st.columns(per_row)
        for col, summary in zip(cols, summaries[row_start:row_start + per_row]):
            with col:
                _render_shift_summary_card(summary)
