# utils/shift_performance/ranking_engine.py
"""
Shift rankings for the Month Overview.

- Shifts ordered by goal-achievement ratio (stable: ties keep input order)
- Top 3 / bottom 3
- Metric leaders: lowest DPM & Overtime, highest Receiving/Shipping CPH,
  and every shift with zero safety incidents
- Areas of concern: worst DPM above goal, worst Overtime above zero
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .constants import (
    DPM_GOAL,
    METRIC_DPM,
    METRIC_OVERTIME,
    METRIC_RECEIVING_CPH,
    METRIC_SAFETY_MEDICAL,
    METRIC_SAFETY_NON_MEDICAL,
    METRIC_SHIPPING_CPH,
    OVERTIME_GOAL,
    RANKING_SIZE,
)
from .models import MetricValue
from .overview_aggregator import ShiftMonthSummary
from .parsing import coerce_or_zero, parse_domain_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderInfo:
    """A shift holding the best/worst value of a metric."""
    shift_id: str
    shift_name: str
    value: MetricValue
    numeric_value: float


@dataclass(frozen=True)
class MetricLeaders:
    best: Optional[LeaderInfo] = None
    worst: Optional[LeaderInfo] = None


@dataclass(frozen=True)
class RankedShift:
    rank: int
    summary: ShiftMonthSummary

    @property
    def label(self) -> str:
        return f"#{self.rank}"


@dataclass(frozen=True)
class RankingResult:
    ranked: List[ShiftMonthSummary] = field(default_factory=list)
    top: List[RankedShift] = field(default_factory=list)
    bottom: List[RankedShift] = field(default_factory=list)
    leaders: Dict[str, MetricLeaders] = field(default_factory=dict)
    zero_safety_shifts: List[str] = field(default_factory=list)
    concerns: Dict[str, LeaderInfo] = field(default_factory=dict)

    @property
    def has_concerns(self) -> bool:
        return bool(self.concerns)


class _Tracker:
    """Running min/max with strict comparison (first occurrence wins ties)."""

    def __init__(self):
        self.best: Optional[LeaderInfo] = None
        self.worst: Optional[LeaderInfo] = None

    def offer_min_best(self, info: LeaderInfo):
        if self.best is None or info.numeric_value < self.best.numeric_value:
            self.best = info
        if self.worst is None or info.numeric_value > self.worst.numeric_value:
            self.worst = info

    def offer_max_best(self, info: LeaderInfo):
        if self.best is None or info.numeric_value > self.best.numeric_value:
            self.best = info

    def result(self) -> MetricLeaders:
        return MetricLeaders(best=self.best, worst=self.worst)


def _leader_info(summary: ShiftMonthSummary, metric_name: str) -> Optional[LeaderInfo]:
    snapshot = summary.get(metric_name)
    if snapshot is None or snapshot.record.is_not_available:
        return None
    numeric = parse_domain_value(snapshot.value)
    if numeric is None:
        return None
    return LeaderInfo(summary.id, summary.name, snapshot.value, numeric)


def _safety_total(summary: ShiftMonthSummary) -> float:
    total = 0.0
    for metric_name in (METRIC_SAFETY_MEDICAL, METRIC_SAFETY_NON_MEDICAL):
        snapshot = summary.get(metric_name)
        if snapshot is not None and not snapshot.record.is_not_available:
            total += coerce_or_zero(snapshot.value)
    return total


def sort_by_goal_ratio(summaries: List[ShiftMonthSummary]) -> List[ShiftMonthSummary]:
    """Descending goal ratio; sorted() is stable so ties keep input order."""
    return sorted(summaries, key=lambda summary: -summary.goal_ratio)


def rank_shifts(summaries: List[ShiftMonthSummary]) -> RankingResult:
    """Compute rankings and metric leaders from a month's shift summaries."""
    if not summaries:
        return RankingResult()

    ranked = sort_by_goal_ratio(summaries)
    shift_count = len(ranked)

    top = [RankedShift(rank=index + 1, summary=summary) for index, summary in enumerate(ranked[:RANKING_SIZE])]
    bottom_slice = ranked[-RANKING_SIZE:][::-1]
    bottom = [RankedShift(rank=shift_count - index, summary=summary) for index, summary in enumerate(bottom_slice)]

    dpm = _Tracker()
    overtime = _Tracker()
    receiving = _Tracker()
    shipping = _Tracker()
    zero_safety = []

    for summary in summaries:
        info = _leader_info(summary, METRIC_DPM)
        if info is not None:
            dpm.offer_min_best(info)

        if _safety_total(summary) == 0:
            zero_safety.append(summary.name)

        info = _leader_info(summary, METRIC_OVERTIME)
        if info is not None:
            overtime.offer_min_best(info)

        info = _leader_info(summary, METRIC_RECEIVING_CPH)
        if info is not None:
            receiving.offer_max_best(info)

        info = _leader_info(summary, METRIC_SHIPPING_CPH)
        if info is not None:
            shipping.offer_max_best(info)

    leaders = {
        METRIC_DPM: dpm.result(),
        METRIC_OVERTIME: overtime.result(),
        METRIC_RECEIVING_CPH: receiving.result(),
        METRIC_SHIPPING_CPH: shipping.result(),
    }

    concerns = {}
    if dpm.worst is not None and dpm.worst.numeric_value > DPM_GOAL:
        concerns[METRIC_DPM] = dpm.worst
    if overtime.worst is not None and overtime.worst.numeric_value > OVERTIME_GOAL:
        concerns[METRIC_OVERTIME] = overtime.worst

    logger.debug(
        f"[Rankings] {shift_count} shifts, leader={ranked[0].id}, "
        f"zero safety={len(zero_safety)}, concerns={list(concerns)}"
    )

    return RankingResult(
        ranked=ranked,
        top=top,
        bottom=bottom,
        leaders=leaders,
        zero_safety_shifts=zero_safety,
        concerns=concerns,
    )
