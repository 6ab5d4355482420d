# utils/shift_performance/overview/__init__.py
"""
Month Overview for Shift Performance.
"""

from .fragments import overview_fragment

from .charts import (
    render_kpi_cards,
    render_alerts,
    build_ytd_sparkline,
    render_ytd_section,
    render_rankings,
    build_goal_achievement_chart,
    render_goal_achievement,
    render_shift_summary_cards,
)

__all__ = [
    'overview_fragment',
    'render_kpi_cards',
    'render_alerts',
    'build_ytd_sparkline',
    'render_ytd_section',
    'render_rankings',
    'build_goal_achievement_chart',
    'render_goal_achievement',
    'render_shift_summary_cards',
]
