# utils/shift_performance/ytd_aggregator.py
"""
Year-to-Date tracking (fiscal year February → selected month).

Two fold modes:
- total   (Safety, Overtime): every month contributes, zeros included.
          average = total / months in window
- average (DPM, Chase %, CPH, Turnover %): months without a measurement
          are skipped. average = sum / included months

Fleet-wide averages are averages of monthly averages: each month's figure
is first averaged across the shifts that reported that month, then those
monthly figures are averaged over the window.

Best/worst months are picked with a strict comparison while scanning in
fiscal order, so the earliest month keeps the title on ties.

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import (
    GOAL_LOWER,
    SHIFT_IDS,
    YTD_MODE_TOTAL,
    YTD_TRACKED_METRICS,
)
from .extractor import extract_for_month
from .models import ShiftDataset
from .months import fiscal_progress, ytd_window
from .parsing import coerce_or_zero, parse_domain_value, round_half_up

logger = logging.getLogger(__name__)

FLEET_SCOPE = 'fleet'


# =============================================================================
# TYPES
# =============================================================================

@dataclass(frozen=True)
class YTDMetricSpec:
    """How one tracked metric is read and folded."""
    metric: str
    paths: Tuple[Tuple[str, str], ...]
    mode: str
    better: str
    rounded: bool

    @property
    def lower_is_better(self) -> bool:
        return self.better == GOAL_LOWER


YTD_SPECS = [
    YTDMetricSpec(metric, tuple(paths), mode, better, rounded)
    for metric, paths, mode, better, rounded in YTD_TRACKED_METRICS
]


@dataclass(frozen=True)
class MonthValue:
    month: str
    value: float


@dataclass(frozen=True)
class YTDMetricStats:
    """Rollup of one metric across the YTD window."""
    metric: str
    mode: str
    total: float = 0.0
    average: float = 0.0
    best: Optional[float] = None
    worst: Optional[float] = None
    best_month: str = ''
    worst_month: str = ''
    trend: float = 0.0
    series: Tuple[MonthValue, ...] = ()

    @property
    def has_data(self) -> bool:
        return len(self.series) > 0

    @property
    def included_count(self) -> int:
        return len(self.series)

    def to_dict(self) -> Dict:
        return {
            'metric': self.metric,
            'total': self.total if self.mode == YTD_MODE_TOTAL else None,
            'average': self.average,
            'best': self.best,
            'best_month': self.best_month,
            'worst': self.worst,
            'worst_month': self.worst_month,
            'trend_since_start': self.trend,
            'months_with_data': self.included_count,
        }


@dataclass(frozen=True)
class YTDSnapshot:
    """YTD rollup for the fleet or for a single shift."""
    scope: str
    name: str
    upto_month: str
    months: List[str] = field(default_factory=list)
    metrics: Dict[str, YTDMetricStats] = field(default_factory=dict)

    @property
    def start_month(self) -> str:
        return self.months[0] if self.months else ''

    @property
    def end_month(self) -> str:
        return self.months[-1] if self.months else ''

    @property
    def month_count(self) -> int:
        return len(self.months)

    @property
    def progress(self) -> float:
        return fiscal_progress(self.month_count)

    @property
    def progress_percent(self) -> int:
        return round_half_up(self.progress * 100)

    def get(self, metric: str) -> Optional[YTDMetricStats]:
        return self.metrics.get(metric)

    def to_rows(self) -> List[Dict]:
        return [stats.to_dict() for stats in self.metrics.values()]


# =============================================================================
# MONTHLY READINGS
# =============================================================================

def _shift_month_value(shift: ShiftDataset, spec: YTDMetricSpec, month: str) -> Optional[float]:
    """
    One shift's figure for a month.

    total mode: sum of every path, "N/A"/missing counting as 0 (never None).
    average mode: the single path's value, None when not measured.
    """
    if spec.mode == YTD_MODE_TOTAL:
        month_total = 0.0
        for path in spec.paths:
            record = extract_for_month(shift, path, month)
            if record is not None and not record.is_not_available:
                month_total += coerce_or_zero(record.value)
        return month_total

    record = extract_for_month(shift, spec.paths[0], month)
    if record is None or record.is_not_available:
        return None
    return parse_domain_value(record.value)


def _fleet_month_value(
    shifts: Sequence[ShiftDataset],
    spec: YTDMetricSpec,
    month: str,
) -> Optional[float]:
    """Sum (total mode) or cross-shift average (average mode) for a month."""
    values = [_shift_month_value(shift, spec, month) for shift in shifts]

    if spec.mode == YTD_MODE_TOTAL:
        return sum(value for value in values if value is not None)

    reported = [value for value in values if value is not None]
    if not reported:
        return None
    month_avg = sum(reported) / len(reported)
    return float(round_half_up(month_avg)) if spec.rounded else month_avg


# =============================================================================
# FOLD
# =============================================================================

def fold_metric(
    spec: YTDMetricSpec,
    monthly: List[Tuple[str, Optional[float]]],
    window_length: int,
) -> YTDMetricStats:
    """
    Fold (month, value) readings in fiscal order into YTDMetricStats.

    None readings are skipped; they never reach the series.
    """
    series = tuple(MonthValue(month, value) for month, value in monthly if value is not None)
    if not series:
        return YTDMetricStats(metric=spec.metric, mode=spec.mode)

    total = sum(point.value for point in series)

    if spec.mode == YTD_MODE_TOTAL:
        average = total / window_length if window_length else 0.0
    else:
        average = total / len(series)
        if spec.rounded:
            average = float(round_half_up(average))

    best = worst = series[0]
    for point in series[1:]:
        if spec.lower_is_better:
            if point.value < best.value:
                best = point
            if point.value > worst.value:
                worst = point
        else:
            if point.value > best.value:
                best = point
            if point.value < worst.value:
                worst = point

    trend = series[-1].value - series[0].value if len(series) >= 2 else 0.0

    return YTDMetricStats(
        metric=spec.metric,
        mode=spec.mode,
        total=total,
        average=average,
        best=best.value,
        worst=worst.value,
        best_month=best.month,
        worst_month=worst.month,
        trend=trend,
        series=series,
    )


# =============================================================================
# ENTRY POINTS
# =============================================================================

def aggregate_ytd(
    shifts: Mapping[str, ShiftDataset],
    upto_month: str,
    shift_ids: Sequence[str] = None,
) -> Optional[YTDSnapshot]:
    """
    Fleet-wide YTD rollup through upto_month.

    Returns None when there is no YTD window (February, unknown month).
    """
    months = ytd_window(upto_month)
    if not months:
        return None

    selected = [shifts[shift_id] for shift_id in (SHIFT_IDS if shift_ids is None else shift_ids) if shift_id in shifts]

    metrics = {}
    for spec in YTD_SPECS:
        monthly = [(month, _fleet_month_value(selected, spec, month)) for month in months]
        metrics[spec.metric] = fold_metric(spec, monthly, len(months))

    logger.debug(f"[YTD] fleet through {upto_month}: {len(selected)} shifts, {len(months)} months")

    return YTDSnapshot(
        scope=FLEET_SCOPE,
        name='All Shifts',
        upto_month=upto_month,
        months=months,
        metrics=metrics,
    )


def aggregate_shift_ytd(shift: ShiftDataset, upto_month: str) -> Optional[YTDSnapshot]:
    """Single-shift YTD rollup through upto_month (None without a window)."""
    months = ytd_window(upto_month)
    if not months:
        return None

    metrics = {}
    for spec in YTD_SPECS:
        monthly = [(month, _shift_month_value(shift, spec, month)) for month in months]
        metrics[spec.metric] = fold_metric(spec, monthly, len(months))

    return YTDSnapshot(
        scope=shift.id,
        name=shift.name,
        upto_month=upto_month,
        months=months,
        metrics=metrics,
    )
