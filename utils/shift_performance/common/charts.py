# utils/shift_performance/common/charts.py
"""
Common chart and display helpers for Shift Performance.
"""

from typing import Optional

import altair as alt
import pandas as pd

from ..constants import COLORS, STATUS_ICONS, TREND_STABLE, TREND_UP
from ..models import Trend


def empty_chart(message: str = "No data available") -> alt.Chart:
    """Return an empty chart with a message."""
    return alt.Chart(pd.DataFrame({'text': [message]})).mark_text(
        fontSize=14, color=COLORS['text_light']
    ).encode(
        text='text:N'
    ).properties(width='container', height=100)


def status_icon(status: Optional[str]) -> str:
    return STATUS_ICONS.get(status, '➖')


def trend_delta(trend: Optional[Trend]) -> Optional[str]:
    """st.metric delta text, e.g. '+12.5%'. None hides the delta."""
    if trend is None:
        return None
    return f"{trend.percent:+.1f}%"


def trend_delta_color(trend: Optional[Trend]) -> str:
    """
    st.metric delta_color matching the trend's goodness: an upward green
    trend is 'normal', a downward green trend is 'inverse'.
    """
    if trend is None or trend.direction == TREND_STABLE:
        return 'off'
    going_up = trend.direction == TREND_UP
    good = trend.color == 'green'
    return 'normal' if going_up == good else 'inverse'
