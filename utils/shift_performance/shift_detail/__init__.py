# utils/shift_performance/shift_detail/__init__.py
"""Shift detail fragments for Shift Performance."""

from .fragments import shift_detail_fragment
from .charts import build_weekly_trend_chart, render_month_strip

__all__ = [
    'shift_detail_fragment',
    'build_weekly_trend_chart',
    'render_month_strip',
]
