# utils/shift_performance/goal_summary.py
"""
Goal Achievement Summary for the Month Overview.

Per metric: how many shifts met / missed the goal (yellow or missing counts
as n/a). Per shift: goal percentage, badge and metric names by status.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .constants import GOAL_SUMMARY_METRICS, STATUS_GREEN, STATUS_RED, STATUS_YELLOW
from .overview_aggregator import ShiftMonthSummary
from .parsing import percent_of


@dataclass(frozen=True)
class MetricAchievement:
    metric: str
    met: int
    missed: int
    not_available: int

    @property
    def measured(self) -> int:
        return self.met + self.missed

    @property
    def met_percent(self) -> int:
        return percent_of(self.met, self.measured)

    @property
    def missed_percent(self) -> int:
        return 100 - self.met_percent

    @property
    def status_class(self) -> str:
        percent = self.met_percent
        if percent == 100:
            return 'excellent'
        if percent >= 75:
            return 'good'
        if percent >= 50:
            return 'warning'
        return 'poor'

    def to_dict(self) -> Dict:
        return {
            'metric': self.metric,
            'met': self.met,
            'missed': self.missed,
            'n/a': self.not_available,
            'met_percent': self.met_percent,
            'status': self.status_class,
        }


@dataclass(frozen=True)
class ShiftAchievement:
    shift_id: str
    shift_name: str
    goal_percent: int
    badge: str
    goals_met: int
    total_metrics: int
    green: List[str] = field(default_factory=list)
    yellow: List[str] = field(default_factory=list)
    red: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'shift': self.shift_name,
            'badge': self.badge,
            'goal_percent': self.goal_percent,
            'goals_met': self.goals_met,
            'total_metrics': self.total_metrics,
            'missed_metrics': ', '.join(self.red),
        }


@dataclass(frozen=True)
class GoalAchievementSummary:
    metrics: List[MetricAchievement] = field(default_factory=list)
    shifts: List[ShiftAchievement] = field(default_factory=list)


def goal_badge(percent: int) -> str:
    if percent == 100:
        return '🏆'
    if percent >= 90:
        return '⭐⭐⭐'
    if percent >= 75:
        return '⭐⭐'
    if percent >= 50:
        return '⭐'
    return '⚠️'


def summarize_goal_achievement(summaries: List[ShiftMonthSummary]) -> GoalAchievementSummary:
    counters = {name: {'met': 0, 'missed': 0, 'na': 0} for name in GOAL_SUMMARY_METRICS}

    for summary in summaries:
        for metric_name in GOAL_SUMMARY_METRICS:
            snapshot = summary.get(metric_name)
            status = snapshot.status if snapshot is not None else None
            if status == STATUS_GREEN:
                counters[metric_name]['met'] += 1
            elif status == STATUS_RED:
                counters[metric_name]['missed'] += 1
            else:
                counters[metric_name]['na'] += 1

    # Metrics nobody measured are left out
    metrics = [
        MetricAchievement(name, c['met'], c['missed'], c['na'])
        for name, c in counters.items()
        if c['met'] + c['missed'] > 0
    ]

    shifts = []
    for summary in summaries:
        by_status = {STATUS_GREEN: [], STATUS_YELLOW: [], STATUS_RED: []}
        for metric_name, snapshot in summary.metrics.items():
            if snapshot.status in by_status:
                by_status[snapshot.status].append(metric_name)

        shifts.append(ShiftAchievement(
            shift_id=summary.id,
            shift_name=summary.name,
            goal_percent=summary.goal_percent,
            badge=goal_badge(summary.goal_percent),
            goals_met=summary.goals_met_count,
            total_metrics=summary.total_metrics,
            green=by_status[STATUS_GREEN],
            yellow=by_status[STATUS_YELLOW],
            red=by_status[STATUS_RED],
        ))

    return GoalAchievementSummary(metrics=metrics, shifts=shifts)
