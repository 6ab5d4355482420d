# utils/shift_performance/extractor.py
"""
Metric extraction from a ShiftDataset.

Lookups never raise: a metric the shift does not carry, an unknown month or
an out-of-range index all come back as None and callers skip the entry.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import FISCAL_MONTHS
from .models import MetricPath, MetricRecord, MetricSnapshot, ShiftDataset
from .months import NOT_FOUND, previous_fiscal_month, to_calendar_index
from .trend import calculate_trend

logger = logging.getLogger(__name__)


def _metric_name(path: MetricPath) -> str:
    return path[1] if isinstance(path, tuple) else path


def extract(shift: ShiftDataset, path: MetricPath, calendar_index: int) -> Optional[MetricRecord]:
    """
    Get one month's record for a metric.

    Args:
        shift: Shift to read from
        path: Metric name (searched across categories) or (category, metric)
        calendar_index: January = 0 .. December = 11

    Returns:
        MetricRecord, or None when the metric/month does not exist
    """
    if calendar_index < 0:
        return None
    records = shift.get_records(path)
    if not records or calendar_index >= len(records):
        return None
    return records[calendar_index]


def extract_for_month(shift: ShiftDataset, path: MetricPath, month: str) -> Optional[MetricRecord]:
    """extract() addressed by month name."""
    return extract(shift, path, to_calendar_index(month))


def extract_with_trend(shift: ShiftDataset, path: MetricPath, month: str) -> Optional[MetricSnapshot]:
    """
    Get a month's record together with the preceding fiscal month.

    The trend is only attached when both months carry a measurement
    (neither value is the "N/A" sentinel).
    """
    record = extract_for_month(shift, path, month)
    if record is None:
        return None

    previous = None
    prev_month = previous_fiscal_month(month)
    if prev_month is not None:
        previous = extract_for_month(shift, path, prev_month)

    trend = None
    if previous is not None and not previous.is_not_available and not record.is_not_available:
        trend = calculate_trend(_metric_name(path), previous.value, record.value)

    return MetricSnapshot(record=record, previous=previous, trend=trend)


def iter_month_records(shift: ShiftDataset, month: str) -> Iterator[Tuple[str, str, MetricRecord]]:
    """
    Yield (category, metric, record) for every metric the shift carries.

    Unlike extract_month(), a metric name repeated across categories is
    yielded once per category.
    """
    calendar_index = to_calendar_index(month)
    if calendar_index == NOT_FOUND:
        return
    for category, metric_name, records in shift.iter_metrics():
        if calendar_index < len(records):
            yield category, metric_name, records[calendar_index]


def extract_month(shift: ShiftDataset, month: str) -> Dict[str, MetricRecord]:
    """Flat metric → record mapping of every metric the shift has for a month."""
    return {metric_name: record for _, metric_name, record in iter_month_records(shift, month)}


def extract_month_with_trend(shift: ShiftDataset, month: str) -> Dict[str, MetricSnapshot]:
    """Like extract_month() but each entry carries previous month + trend."""
    if to_calendar_index(month) == NOT_FOUND:
        return {}

    month_data = {}
    for category, metric_name, _ in shift.iter_metrics():
        snapshot = extract_with_trend(shift, (category, metric_name), month)
        if snapshot is not None:
            month_data[metric_name] = snapshot
    return month_data


def metric_history(shift: ShiftDataset, path: MetricPath) -> List[MetricRecord]:
    """The metric's 12 records re-ordered February → January."""
    records = shift.get_records(path)
    if not records:
        return []

    history = []
    for month in FISCAL_MONTHS:
        record = extract_for_month(shift, path, month)
        if record is not None:
            history.append(record)
    return history
