# utils/shift_performance/__init__.py
"""
Shift Performance Module

VERSION: 1.0.0
- Month → Shift → Category → Weekly trend drill-down
- Month Overview: KPIs, alerts, YTD, rankings, goal achievement
- Shift comparison (2-3 shifts)

The aggregation core (overview, YTD, rankings, comparison) is pure: it
takes the loaded datasets plus explicit month/shift arguments and never
touches Streamlit state.
"""

# Data
from .data_loader import (
    DatasetLoadError,
    parse_shift_metrics,
    load_shift_metrics,
    load_shift_metrics_cached,
    dataset_to_frame,
)
from .models import MetricRecord, ShiftDataset, MetricSnapshot, Trend

# Aggregation core
from .trend import calculate_trend, is_lower_better
from .months import (
    to_calendar_index,
    to_fiscal_index,
    fiscal_window,
    ytd_window,
    previous_fiscal_month,
    month_label,
)
from .extractor import (
    extract,
    extract_for_month,
    extract_with_trend,
    extract_month,
    extract_month_with_trend,
    iter_month_records,
    metric_history,
)
from .overview_aggregator import aggregate_overview, collect_shift_summaries, OverviewSnapshot
from .ytd_aggregator import aggregate_ytd, aggregate_shift_ytd, YTDSnapshot
from .ranking_engine import rank_shifts, RankingResult
from .comparison_engine import compare_shifts, ComparisonResult
from .goal_summary import summarize_goal_achievement, GoalAchievementSummary
from .weekly_trend import build_weekly_trend, WeeklyTrend

# Navigation & export
from .navigation import NavigationState, get_navigation, reset_navigation
from .export_utils import ShiftPerformanceExport

# View fragments
from .overview import overview_fragment
from .shift_detail import shift_detail_fragment
from .comparison import comparison_fragment

# Common
from .common.charts import empty_chart

# Constants
from .constants import (
    CALENDAR_MONTHS,
    FISCAL_MONTHS,
    SHIFT_IDS,
    CACHE_KEY_NAVIGATION,
    CACHE_KEY_TIMING,
    COLORS,
    CHART_WIDTH,
    CHART_HEIGHT,
    DEBUG_TIMING,
)

__all__ = [
    # Data
    'DatasetLoadError',
    'parse_shift_metrics',
    'load_shift_metrics',
    'load_shift_metrics_cached',
    'dataset_to_frame',
    'MetricRecord', 'ShiftDataset', 'MetricSnapshot', 'Trend',

    # Aggregation core
    'calculate_trend', 'is_lower_better',
    'to_calendar_index', 'to_fiscal_index', 'fiscal_window', 'ytd_window',
    'previous_fiscal_month', 'month_label',
    'extract', 'extract_for_month', 'extract_with_trend',
    'extract_month', 'extract_month_with_trend', 'metric_history',
    'iter_month_records',
    'aggregate_overview', 'collect_shift_summaries', 'OverviewSnapshot',
    'aggregate_ytd', 'aggregate_shift_ytd', 'YTDSnapshot',
    'rank_shifts', 'RankingResult',
    'compare_shifts', 'ComparisonResult',
    'summarize_goal_achievement', 'GoalAchievementSummary',
    'build_weekly_trend', 'WeeklyTrend',

    # Navigation & export
    'NavigationState', 'get_navigation', 'reset_navigation',
    'ShiftPerformanceExport',

    # View fragments
    'overview_fragment',
    'shift_detail_fragment',
    'comparison_fragment',
    'empty_chart',

    # Constants
    'CALENDAR_MONTHS', 'FISCAL_MONTHS', 'SHIFT_IDS',
    'CACHE_KEY_NAVIGATION', 'CACHE_KEY_TIMING',
    'COLORS', 'CHART_WIDTH', 'CHART_HEIGHT', 'DEBUG_TIMING',
]

__version__ = '1.0.0'
