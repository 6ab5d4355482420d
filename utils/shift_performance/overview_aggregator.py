# utils/shift_performance/overview_aggregator.py
"""
Month Overview aggregation across all shifts.

Folds every shift's records for one month into fleet-wide figures:
- Safety incidents (Medical + Non-Medical), with one alert per shift/type
- Average DPM across shifts with a measurement, plus "met goal" successes
- Total overtime, with one alert per shift that logged any
- Goals met (green statuses) over all metrics that carry a status
- Trends of each figure against the preceding fiscal month

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import (
    DPM_GOAL,
    GOALS_MET_SUCCESS_PERCENT,
    GOALS_MET_WARNING_PERCENT,
    MAX_SUCCESS_ENTRIES,
    METRIC_DPM,
    METRIC_OVERTIME,
    METRIC_SAFETY_MEDICAL,
    METRIC_SAFETY_NON_MEDICAL,
    OVERTIME_GOAL,
    SHIFT_IDS,
    STATUS_GREEN,
    SUMMARY_CARD_MAX_METRICS,
    SUMMARY_CARD_METRICS,
)
from .extractor import extract_month_with_trend, iter_month_records
from .models import MetricSnapshot, ShiftDataset, Trend
from .months import NOT_FOUND, previous_fiscal_month, to_calendar_index, to_fiscal_index
from .parsing import coerce_or_zero, parse_domain_value, percent_of, round_half_up
from .trend import calculate_trend

logger = logging.getLogger(__name__)

# Trend labels for the fleet-level figures. Goals Met is "higher is better".
_GOALS_MET_TREND_NAME = 'Goals Met'


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class Alert:
    """One line in the "Issues Requiring Attention" / successes lists."""
    text: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {'text': self.text, 'value': self.value}


@dataclass(frozen=True)
class ShiftMonthSummary:
    """One shift's records for a month, with goal counters."""
    id: str
    name: str
    metrics: Dict[str, MetricSnapshot]
    goals_met_count: int
    total_metrics: int
    # same counters for the preceding fiscal month (0/0 when there is none)
    prev_goals_met_count: int = 0
    prev_total_metrics: int = 0

    @property
    def goal_ratio(self) -> float:
        if self.total_metrics == 0:
            return 0.0
        return self.goals_met_count / self.total_metrics

    @property
    def goal_percent(self) -> int:
        return percent_of(self.goals_met_count, self.total_metrics)

    @property
    def score_class(self) -> str:
        percent = self.goal_percent
        if percent >= 90:
            return 'excellent'
        if percent >= 75:
            return 'good'
        if percent >= 50:
            return 'needs-improvement'
        return 'poor'

    def get(self, metric_name: str) -> Optional[MetricSnapshot]:
        return self.metrics.get(metric_name)

    def key_metrics(self) -> List[tuple]:
        """(metric, snapshot) pairs for the summary card, max 6."""
        present = [(name, self.metrics[name]) for name in SUMMARY_CARD_METRICS if name in self.metrics]
        return present[:SUMMARY_CARD_MAX_METRICS]

    def to_dict(self) -> Dict:
        return {
            'shift_id': self.id,
            'shift': self.name,
            'goals_met': self.goals_met_count,
            'total_metrics': self.total_metrics,
            'goal_percent': self.goal_percent,
            'score_class': self.score_class,
        }


@dataclass(frozen=True)
class OverviewTrends:
    safety: Optional[Trend] = None
    dpm: Optional[Trend] = None
    overtime: Optional[Trend] = None
    goals_met: Optional[Trend] = None


@dataclass(frozen=True)
class OverviewSnapshot:
    """Fleet-wide figures for one month. Built fresh per request."""
    month: str
    shifts: List[ShiftMonthSummary] = field(default_factory=list)
    safety_incidents: float = 0.0
    avg_dpm: int = 0
    dpm_count: int = 0
    overtime_hours: float = 0.0
    goals_met_total: int = 0
    total_goals: int = 0
    goals_met_percent: int = 0
    alerts: List[Alert] = field(default_factory=list)
    successes: List[Alert] = field(default_factory=list)
    trends: OverviewTrends = field(default_factory=OverviewTrends)

    # Card tiers consumed by the presentation layer
    @property
    def safety_status(self) -> str:
        return 'success' if self.safety_incidents == 0 else 'alert'

    @property
    def dpm_status(self) -> str:
        return 'success' if self.avg_dpm <= DPM_GOAL else 'warning'

    @property
    def overtime_status(self) -> str:
        return 'success' if self.overtime_hours == OVERTIME_GOAL else 'alert'

    @property
    def goals_met_status(self) -> str:
        return goals_met_tier(self.goals_met_percent)

    def shift_table(self) -> List[Dict]:
        return [summary.to_dict() for summary in self.shifts]


def goals_met_tier(percent: int) -> str:
    if percent >= GOALS_MET_SUCCESS_PERCENT:
        return 'success'
    if percent >= GOALS_MET_WARNING_PERCENT:
        return 'warning'
    return 'alert'


# =============================================================================
# FORMATTING HELPERS (alert text only - presentation formats the rest)
# =============================================================================

def _fmt_number(value: float) -> str:
    """1234.0 → '1,234'; 12.5 → '12.5'"""
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,}"


def _incident_text(count: float) -> str:
    return f"{_fmt_number(count)} incident{'s' if count > 1 else ''}"


# =============================================================================
# PER-SHIFT SUMMARY
# =============================================================================

def count_goals_met(shift: ShiftDataset, month: str) -> Tuple[int, int]:
    """
    (goals met, records with a status) for a shift's month.

    Counts every (category, metric) slot, so a metric name that appears in
    two categories counts twice. Padding slots the loader inserted for
    missing months carry no status and are left out.
    """
    goals_met = 0
    total = 0
    for _, _, record in iter_month_records(shift, month):
        if not record.has_status:
            continue
        total += 1
        if record.status == STATUS_GREEN:
            goals_met += 1
    return goals_met, total


def summarize_shift(shift: ShiftDataset, month: str) -> ShiftMonthSummary:
    """Collect a shift's month records (with trends) and count goals met."""
    goals_met, total = count_goals_met(shift, month)
    prev_goals_met, prev_total = 0, 0
    prev_month = previous_fiscal_month(month)
    if prev_month is not None:
        prev_goals_met, prev_total = count_goals_met(shift, prev_month)

    return ShiftMonthSummary(
        id=shift.id,
        name=shift.name,
        metrics=extract_month_with_trend(shift, month),
        goals_met_count=goals_met,
        total_metrics=total,
        prev_goals_met_count=prev_goals_met,
        prev_total_metrics=prev_total,
    )


def collect_shift_summaries(
    shifts: Mapping[str, ShiftDataset],
    month: str,
    shift_ids: Sequence[str] = None,
) -> List[ShiftMonthSummary]:
    """Summaries for every known shift id, in shift_ids order. Unknown ids are skipped."""
    summaries = []
    for shift_id in (SHIFT_IDS if shift_ids is None else shift_ids):
        shift = shifts.get(shift_id)
        if shift is None:
            logger.debug(f"[Overview] Skipping unknown shift: {shift_id}")
            continue
        summaries.append(summarize_shift(shift, month))
    return summaries


# =============================================================================
# FLEET AGGREGATION
# =============================================================================

def aggregate_overview(
    shifts: Mapping[str, ShiftDataset],
    month: str,
    shift_ids: Sequence[str] = None,
) -> OverviewSnapshot:
    """
    Build the Month Overview snapshot.

    Args:
        shifts: shift id → dataset
        month: Month name (e.g. 'March')
        shift_ids: Shift order; defaults to the 8 known shifts

    Returns:
        OverviewSnapshot. An unknown month gives an empty snapshot.
    """
    if to_calendar_index(month) == NOT_FOUND:
        logger.warning(f"[Overview] Unknown month: {month}")
        return OverviewSnapshot(month=month)

    summaries = collect_shift_summaries(shifts, month, shift_ids)
    return aggregate_summaries(summaries, month)


def aggregate_summaries(summaries: List[ShiftMonthSummary], month: str) -> OverviewSnapshot:
    """Fold already-collected shift summaries into an OverviewSnapshot."""
    total_safety = 0.0
    total_dpm = 0.0
    dpm_count = 0
    total_overtime = 0.0
    goals_met_total = 0
    total_goals = 0
    alerts: List[Alert] = []
    successes: List[Alert] = []

    for summary in summaries:
        # Safety incidents
        for metric_name, label in (
            (METRIC_SAFETY_MEDICAL, 'Medical Incident'),
            (METRIC_SAFETY_NON_MEDICAL, 'Non-Medical Incident'),
        ):
            snapshot = summary.get(metric_name)
            if snapshot is None:
                continue
            value = coerce_or_zero(snapshot.value)
            total_safety += value
            if value > 0:
                alerts.append(Alert(f"{summary.name} - {label}", _incident_text(value)))

        # DPM
        dpm = summary.get(METRIC_DPM)
        if dpm is not None and not dpm.record.is_not_available:
            dpm_value = parse_domain_value(dpm.value)
            if dpm_value is not None:
                total_dpm += dpm_value
                dpm_count += 1
                if 0 < dpm_value <= DPM_GOAL:
                    successes.append(Alert(
                        f"{summary.name} - DPM",
                        f"{_fmt_number(dpm_value)} (Met goal!)",
                    ))

        # Overtime
        overtime = summary.get(METRIC_OVERTIME)
        if overtime is not None and not overtime.record.is_not_available:
            ot_value = parse_domain_value(overtime.value)
            if ot_value is not None:
                total_overtime += ot_value
                if ot_value > 0:
                    alerts.append(Alert(f"{summary.name} - Overtime", f"{ot_value:.1f} hours"))

        goals_met_total += summary.goals_met_count
        total_goals += summary.total_metrics

    avg_dpm = round_half_up(total_dpm / dpm_count) if dpm_count > 0 else 0
    goals_met_percent = percent_of(goals_met_total, total_goals)

    trends = OverviewTrends()
    if to_fiscal_index(month) != NOT_FOUND:
        trends = _calculate_trends(
            summaries,
            current_safety=total_safety,
            current_dpm=avg_dpm,
            current_overtime=total_overtime,
            current_goals_percent=goals_met_percent,
        )

    logger.debug(
        f"[Overview] {month}: {len(summaries)} shifts, safety={total_safety}, "
        f"avg_dpm={avg_dpm}, overtime={total_overtime}, goals={goals_met_total}/{total_goals}"
    )

    return OverviewSnapshot(
        month=month,
        shifts=summaries,
        safety_incidents=total_safety,
        avg_dpm=avg_dpm,
        dpm_count=dpm_count,
        overtime_hours=total_overtime,
        goals_met_total=goals_met_total,
        total_goals=total_goals,
        goals_met_percent=goals_met_percent,
        alerts=alerts,
        successes=successes[:MAX_SUCCESS_ENTRIES],
        trends=trends,
    )


def _calculate_trends(
    summaries: List[ShiftMonthSummary],
    current_safety: float,
    current_dpm: int,
    current_overtime: float,
    current_goals_percent: int,
) -> OverviewTrends:
    """
    Diff this month's fleet figures against the preceding fiscal month.

    Prior figures come from the previous-month records attached by
    extract_with_trend(); prior goal counts come from the summaries. A figure
    with no prior contributors gets no trend.
    """
    prev_safety = 0.0
    safety_contributors = 0
    prev_dpm_total = 0.0
    prev_dpm_count = 0
    prev_overtime = 0.0
    overtime_contributors = 0
    prev_goals_met = 0
    prev_total_goals = 0

    for summary in summaries:
        for metric_name in (METRIC_SAFETY_MEDICAL, METRIC_SAFETY_NON_MEDICAL):
            snapshot = summary.get(metric_name)
            if snapshot is not None and snapshot.previous_value is not None:
                prev_safety += coerce_or_zero(snapshot.previous_value)
                safety_contributors += 1

        dpm = summary.get(METRIC_DPM)
        if dpm is not None and dpm.previous_value is not None:
            prev_dpm = parse_domain_value(dpm.previous_value)
            if prev_dpm is not None:
                prev_dpm_total += prev_dpm
                prev_dpm_count += 1

        overtime = summary.get(METRIC_OVERTIME)
        if overtime is not None and overtime.previous_value is not None:
            prev_ot = parse_domain_value(overtime.previous_value)
            if prev_ot is not None:
                prev_overtime += prev_ot
                overtime_contributors += 1

        prev_goals_met += summary.prev_goals_met_count
        prev_total_goals += summary.prev_total_metrics

    safety_trend = None
    if safety_contributors > 0:
        safety_trend = calculate_trend(METRIC_SAFETY_MEDICAL, prev_safety, current_safety)

    dpm_trend = None
    if prev_dpm_count > 0:
        prev_avg_dpm = round_half_up(prev_dpm_total / prev_dpm_count)
        dpm_trend = calculate_trend(METRIC_DPM, prev_avg_dpm, current_dpm)

    overtime_trend = None
    if overtime_contributors > 0:
        overtime_trend = calculate_trend(METRIC_OVERTIME, prev_overtime, current_overtime)

    goals_trend = None
    if prev_total_goals > 0:
        prev_goals_percent = percent_of(prev_goals_met, prev_total_goals)
        goals_trend = calculate_trend(_GOALS_MET_TREND_NAME, prev_goals_percent, current_goals_percent)

    return OverviewTrends(
        safety=safety_trend,
        dpm=dpm_trend,
        overtime=overtime_trend,
        goals_met=goals_trend,
    )
