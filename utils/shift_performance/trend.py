# utils/shift_performance/trend.py
"""
Month-over-month trend classification.

calculate_trend() answers "did this metric move, which way, and is that
good?" for any pair of values. Used by the overview cards, the shift
summary cards and the overview headline trends.
"""

import logging
from typing import Any

from .constants import (
    LOWER_IS_BETTER_METRICS,
    TREND_ARROWS,
    TREND_DOWN,
    TREND_STABLE,
    TREND_STABLE_PERCENT,
    TREND_UP,
)
from .models import Trend
from .parsing import coerce_or_zero

logger = logging.getLogger(__name__)


def is_lower_better(metric_name: str) -> bool:
    return metric_name in LOWER_IS_BETTER_METRICS


def calculate_trend(metric_name: str, previous_value: Any, current_value: Any) -> Trend:
    """
    Compare previous vs current value of a metric.

    - Both zero (or unparsable) → stable, 0%
    - From zero to anything → up 100%, flagged red
    - Change under 5% either way → stable
    - Otherwise up/down, green when the move is in the metric's good direction

    Never raises: unparsable inputs count as 0.
    """
    prev = coerce_or_zero(previous_value, signed=True)
    curr = coerce_or_zero(current_value, signed=True)

    if prev == 0 and curr == 0:
        return Trend(TREND_STABLE, TREND_ARROWS[TREND_STABLE], 'gray', 0.0)

    if prev == 0:
        return Trend(TREND_UP, TREND_ARROWS[TREND_UP], 'red', 100.0)

    percent_change = (curr - prev) / prev * 100

    if abs(percent_change) < TREND_STABLE_PERCENT:
        return Trend(TREND_STABLE, TREND_ARROWS[TREND_STABLE], 'gray', percent_change)

    if is_lower_better(metric_name):
        is_good = curr < prev
    else:
        is_good = curr > prev

    direction = TREND_UP if curr > prev else TREND_DOWN
    return Trend(
        direction=direction,
        arrow=TREND_ARROWS[direction],
        color='green' if is_good else 'red',
        percent=percent_change,
    )
