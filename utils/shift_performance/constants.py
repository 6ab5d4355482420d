# utils/shift_performance/constants.py
"""
Constants for Shift Performance Module

VERSION: 1.0.0
- Month orderings (calendar + fiscal Feb-Jan)
- Known shifts, categories and metric → category lookup
- Goal thresholds used by overview, rankings and comparison
"""

import os as _os

# =============================================================================
# MONTH ORDERING
# =============================================================================

CALENDAR_MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

# Fiscal year starts in February, January closes it
FISCAL_MONTHS = [
    'February', 'March', 'April', 'May', 'June', 'July',
    'August', 'September', 'October', 'November', 'December', 'January',
]

MONTHS_PER_YEAR = 12

# Fiscal year of February..December. January belongs to FISCAL_YEAR + 1.
DEFAULT_FISCAL_YEAR = 2025

# =============================================================================
# SENTINELS & STATUS
# =============================================================================

NOT_AVAILABLE = 'N/A'

STATUS_GREEN = 'green'
STATUS_YELLOW = 'yellow'
STATUS_RED = 'red'
STATUSES = [STATUS_GREEN, STATUS_YELLOW, STATUS_RED]

GOAL_LOWER = 'lower'
GOAL_HIGHER = 'higher'

# =============================================================================
# SHIFTS
# =============================================================================

SHIFT_IDS = [
    'dry-1st', 'dry-2nd', 'dry-4th', 'dry-5th',
    'per-1st', 'per-2nd', 'per-4th', 'per-5th',
]

# =============================================================================
# CATEGORIES & METRICS
# =============================================================================

CATEGORY_QUALITY = 'Quality'
CATEGORY_SAFETY = 'Safety'
CATEGORY_COST = 'Cost'
CATEGORY_TRENDING = 'Trending'

CATEGORIES = [CATEGORY_QUALITY, CATEGORY_SAFETY, CATEGORY_COST, CATEGORY_TRENDING]

CATEGORY_ICONS = {
    CATEGORY_QUALITY: '📊',
    CATEGORY_SAFETY: '🛡️',
    CATEGORY_COST: '💰',
    CATEGORY_TRENDING: '📈',
}

METRIC_DPM = 'DPM'
METRIC_DPMO = 'DPMO'
METRIC_CHASE = 'Chase %'
METRIC_SAFETY_MEDICAL = 'Safety Medical'
METRIC_SAFETY_NON_MEDICAL = 'Safety Non-Medical'
METRIC_OVERTIME = 'Overtime'
METRIC_RECEIVING_CPH = 'Receiving CPH'
METRIC_SHIPPING_CPH = 'Shipping CPH'
METRIC_TURNOVER = 'Turnover %'
METRIC_FILL_RATE = 'Fill Rate %'

# Combined Medical + Non-Medical, only used by YTD and rankings
METRIC_SAFETY = 'Safety'

# Explicit lookup table: metric → category it lives under
METRIC_CATEGORIES = {
    METRIC_DPM: CATEGORY_QUALITY,
    METRIC_DPMO: CATEGORY_QUALITY,
    METRIC_CHASE: CATEGORY_QUALITY,
    METRIC_SAFETY_MEDICAL: CATEGORY_SAFETY,
    METRIC_SAFETY_NON_MEDICAL: CATEGORY_SAFETY,
    METRIC_OVERTIME: CATEGORY_COST,
    METRIC_TURNOVER: CATEGORY_COST,
    METRIC_RECEIVING_CPH: CATEGORY_COST,
    METRIC_SHIPPING_CPH: CATEGORY_COST,
    METRIC_FILL_RATE: CATEGORY_TRENDING,
}

SAFETY_METRICS = [METRIC_SAFETY_MEDICAL, METRIC_SAFETY_NON_MEDICAL]

# Decrease is good for these; every other metric is "higher is better"
LOWER_IS_BETTER_METRICS = frozenset([
    METRIC_DPM,
    METRIC_CHASE,
    METRIC_OVERTIME,
    METRIC_DPMO,
    METRIC_TURNOVER,
    METRIC_SAFETY_MEDICAL,
    METRIC_SAFETY_NON_MEDICAL,
])

# Goal text shown next to comparison rows
METRIC_GOAL_LABELS = {
    METRIC_DPM: '< 1,500',
    METRIC_SAFETY_MEDICAL: '= 0',
    METRIC_SAFETY_NON_MEDICAL: '= 0',
    METRIC_CHASE: '< 3%',
    METRIC_OVERTIME: '= 0',
    METRIC_TURNOVER: '< 10%',
    METRIC_RECEIVING_CPH: '> 1,100',
    METRIC_SHIPPING_CPH: '> 230',
    METRIC_FILL_RATE: '> 95%',
}

# Metrics in the goal-achievement breakdown (order = display order)
GOAL_SUMMARY_METRICS = [
    METRIC_SAFETY_MEDICAL,
    METRIC_SAFETY_NON_MEDICAL,
    METRIC_DPM,
    METRIC_CHASE,
    METRIC_OVERTIME,
    METRIC_RECEIVING_CPH,
    METRIC_SHIPPING_CPH,
    METRIC_DPMO,
    METRIC_TURNOVER,
]

# Key metrics on a shift summary card
SUMMARY_CARD_METRICS = [
    METRIC_DPM,
    METRIC_SAFETY_MEDICAL,
    METRIC_OVERTIME,
    METRIC_CHASE,
    METRIC_RECEIVING_CPH,
    METRIC_SHIPPING_CPH,
]
SUMMARY_CARD_MAX_METRICS = 6

# =============================================================================
# THRESHOLDS (domain constants, not configurable)
# =============================================================================

TREND_STABLE_PERCENT = 5
DPM_GOAL = 1500
OVERTIME_GOAL = 0
MAX_SUCCESS_ENTRIES = 5
RANKING_SIZE = 3
COMPARISON_MIN_SHIFTS = 2
COMPARISON_MAX_SHIFTS = 3
COMPARISON_WINNER_HIGHLIGHTS = 5

GOALS_MET_SUCCESS_PERCENT = 75
GOALS_MET_WARNING_PERCENT = 50

# =============================================================================
# YTD TRACKED METRICS
# (metric, category path, fold mode, better direction, integer rounding)
# =============================================================================

YTD_MODE_AVERAGE = 'average'
YTD_MODE_TOTAL = 'total'

YTD_TRACKED_METRICS = [
    # metric,              paths,                                              mode,             better,      rounded
    (METRIC_DPM,           [(CATEGORY_QUALITY, METRIC_DPM)],                   YTD_MODE_AVERAGE, GOAL_LOWER,  True),
    (METRIC_SAFETY,        [(CATEGORY_SAFETY, METRIC_SAFETY_MEDICAL),
                            (CATEGORY_SAFETY, METRIC_SAFETY_NON_MEDICAL)],     YTD_MODE_TOTAL,   GOAL_LOWER,  False),
    (METRIC_OVERTIME,      [(CATEGORY_COST, METRIC_OVERTIME)],                 YTD_MODE_TOTAL,   GOAL_LOWER,  False),
    (METRIC_CHASE,         [(CATEGORY_QUALITY, METRIC_CHASE)],                 YTD_MODE_AVERAGE, GOAL_LOWER,  False),
    (METRIC_RECEIVING_CPH, [(CATEGORY_COST, METRIC_RECEIVING_CPH)],            YTD_MODE_AVERAGE, GOAL_HIGHER, True),
    (METRIC_SHIPPING_CPH,  [(CATEGORY_COST, METRIC_SHIPPING_CPH)],             YTD_MODE_AVERAGE, GOAL_HIGHER, True),
    (METRIC_TURNOVER,      [(CATEGORY_COST, METRIC_TURNOVER)],                 YTD_MODE_AVERAGE, GOAL_LOWER,  False),
]

# =============================================================================
# TREND GLYPHS
# =============================================================================

TREND_UP = 'up'
TREND_DOWN = 'down'
TREND_STABLE = 'stable'

TREND_ARROWS = {
    TREND_UP: '↑',
    TREND_DOWN: '↓',
    TREND_STABLE: '→',
}

# =============================================================================
# COLOR SCHEME
# =============================================================================

COLORS = {
    "primary": "#0071ce",
    "neutral": "#95a5a6",
    "goal_met": "#28a745",
    "goal_missed": "#dc3545",
    "goal_met_fill": "rgba(40, 167, 69, 0.1)",
    "goal_missed_fill": "rgba(220, 53, 69, 0.1)",
    "best": "#27ae60",
    "worst": "#e74c3c",
    "warning": "#ffc107",
    "trend_green": "#28a745",
    "trend_red": "#dc3545",
    "trend_gray": "#808080",
    "text_light": "#999999",
    "grid": "#e0e0e0",
}

STATUS_ICONS = {
    STATUS_GREEN: '✅',
    STATUS_RED: '❌',
    STATUS_YELLOW: '⚠️',
}

# =============================================================================
# CHART DIMENSIONS
# =============================================================================

CHART_WIDTH = 'container'
CHART_HEIGHT = 300
SPARKLINE_HEIGHT = 80

# =============================================================================
# SESSION STATE KEYS (prefixed _sp_)
# =============================================================================

CACHE_KEY_NAVIGATION = '_sp_navigation'
CACHE_KEY_TIMING = '_sp_timing_data'

# =============================================================================
# EXPORT SETTINGS
# =============================================================================

EXCEL_STYLES = {
    "header_fill_color": "0071ce",
    "header_font_color": "FFFFFF",
    "number_format": '#,##0',
    "decimal_format": '#,##0.0',
    "percent_format": '0%',
}

# =============================================================================
# DEBUG SETTINGS
# Use environment variables to enable: SP_DEBUG_TIMING=true
# =============================================================================
DEBUG_TIMING = _os.getenv('SP_DEBUG_TIMING', 'false').lower() == 'true'
