# utils/shift_performance/shift_detail/charts.py
"""
Shift detail charts: weekly trend line and 12-month history strip.
"""

import logging
from typing import List

import altair as alt
import pandas as pd
import streamlit as st

from ..common.charts import empty_chart, status_icon
from ..constants import CHART_HEIGHT, COLORS
from ..models import MetricRecord
from ..weekly_trend import WeeklyTrend

logger = logging.getLogger(__name__)


def build_weekly_trend_chart(trend: WeeklyTrend) -> alt.Chart:
    """
    Line chart of the weekly values. Points are colored by weekly goal
    result (or the month status when there is no goal), with a dashed goal
    rule and a dotted monthly-average rule.
    """
    if trend is None or not trend.values:
        return empty_chart("No weekly data")

    df = trend.to_frame()
    week_sort = df['week'].tolist()

    base = alt.Chart(df).encode(
        x=alt.X('week:N', sort=week_sort, title=None, axis=alt.Axis(labelAngle=0)),
    )

    area = base.mark_area(color=trend.fill_color, line=False).encode(
        y=alt.Y('value:Q', title=trend.metric),
    )

    line = base.mark_line(color=trend.line_color, strokeWidth=3).encode(
        y=alt.Y('value:Q'),
    )

    points = base.mark_circle(size=120, stroke='#ffffff', strokeWidth=2, opacity=1).encode(
        y=alt.Y('value:Q'),
        color=alt.Color('color:N', scale=None),
        tooltip=[
            alt.Tooltip('week:N', title='Week'),
            alt.Tooltip('value:Q', title=trend.metric, format=',.2f'),
        ]
    )

    layers = [area, line, points]

    avg_df = pd.DataFrame({'avg': [trend.average]})
    layers.append(
        alt.Chart(avg_df).mark_rule(color=COLORS['neutral'], strokeDash=[2, 2]).encode(y='avg:Q')
    )

    if trend.goal is not None:
        goal_df = pd.DataFrame({'goal': [trend.goal]})
        layers.append(
            alt.Chart(goal_df).mark_rule(color=COLORS['warning'], strokeDash=[6, 4], strokeWidth=2).encode(
                y='goal:Q',
                tooltip=[alt.Tooltip('goal:Q', title='Goal', format=',.2f')]
            )
        )

    return alt.layer(*layers).properties(
        width='container', height=CHART_HEIGHT,
        title=trend.title
    )


def render_month_strip(history: List[MetricRecord]):
    """12 compact month cards in fiscal order."""
    if not history:
        return
    cols = st.columns(len(history))
    for col, record in zip(cols, history):
        with col:
            st.caption(record.month[:3])
            st.markdown(f"{status_icon(record.status)}  \n**{record.value}**")
