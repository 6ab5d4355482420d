# utils/shift_performance/weekly_trend.py
"""
Weekly series for a metric month.

Builds the chart-ready data behind the drill-down line chart: week labels,
values, per-week goal flags, monthly average and goal line.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from .constants import COLORS, DEFAULT_FISCAL_YEAR, GOAL_LOWER, STATUS_GREEN
from .models import MetricRecord
from .months import month_label
from .parsing import parse_domain_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyTrend:
    metric: str
    month: str
    title: str
    labels: List[str]
    values: List[float]
    # None per week when the record carries no goal/direction
    goal_met: List[Optional[bool]] = field(default_factory=list)
    average: float = 0.0
    goal: Optional[float] = None
    goal_direction: Optional[str] = None
    monthly_value: str = ''
    status: Optional[str] = None

    @property
    def line_color(self) -> str:
        return COLORS['goal_met'] if self.status == STATUS_GREEN else COLORS['goal_missed']

    @property
    def fill_color(self) -> str:
        return COLORS['goal_met_fill'] if self.status == STATUS_GREEN else COLORS['goal_missed_fill']

    @property
    def point_colors(self) -> List[str]:
        colors = []
        for met in self.goal_met:
            if met is None:
                colors.append(self.line_color)
            else:
                colors.append(COLORS['goal_met'] if met else COLORS['goal_missed'])
        return colors

    @property
    def weeks_met(self) -> int:
        return sum(1 for met in self.goal_met if met)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            'week': self.labels,
            'value': self.values,
            'goal_met': self.goal_met,
            'color': self.point_colors,
        })

    def to_dict(self) -> Dict:
        return {
            'metric': self.metric,
            'month': self.month,
            'average': self.average,
            'goal': self.goal,
            'weeks': len(self.values),
            'weeks_met': self.weeks_met,
        }


def week_labels(record: MetricRecord) -> List[str]:
    """
    'Week <n>' from the fiscal week numbers, else 1-based position.

    Week numbers that don't line up one-to-one with the values are ignored.
    """
    if record.week_numbers and len(record.week_numbers) == len(record.weekly_raw):
        return [f"Week {number}" for number in record.week_numbers]
    return [f"Week {index + 1}" for index in range(len(record.weekly_raw))]


def weekly_points(record: MetricRecord) -> List[Tuple[str, float]]:
    """(label, value) pairs; weeks whose value can't be read are dropped."""
    points = []
    for label, raw in zip(week_labels(record), record.weekly_raw):
        value = parse_domain_value(raw)
        if value is None:
            logger.debug(f"[Weekly] {record.month}: skipping unreadable value {raw!r} ({label})")
            continue
        points.append((label, value))
    return points


def weekly_goal_flags(record: MetricRecord) -> List[Optional[bool]]:
    values = np.asarray([value for _, value in weekly_points(record)], dtype=float)
    if record.goal is None or record.goal_direction is None:
        return [None] * len(values)

    if record.goal_direction == GOAL_LOWER:
        met = values <= record.goal
    else:
        met = values >= record.goal
    return [bool(flag) for flag in met]


def build_weekly_trend(
    metric_name: str,
    record: MetricRecord,
    fiscal_year: int = DEFAULT_FISCAL_YEAR,
) -> Optional[WeeklyTrend]:
    """
    Weekly series for one metric month.

    Returns:
        WeeklyTrend, or None when the record has no readable weekly values
    """
    points = weekly_points(record)
    if not points:
        return None

    values = np.asarray([value for _, value in points], dtype=float)

    return WeeklyTrend(
        metric=metric_name,
        month=record.month,
        title=f"{metric_name} - {month_label(record.month, fiscal_year)}",
        labels=[label for label, _ in points],
        values=values.tolist(),
        goal_met=weekly_goal_flags(record),
        average=float(np.mean(values)),
        goal=record.goal,
        goal_direction=record.goal_direction,
        monthly_value=str(record.value),
        status=record.status,
    )
