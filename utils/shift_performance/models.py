# utils/shift_performance/models.py
"""
Value objects for Shift Performance.

ShiftDataset / MetricRecord mirror the externally supplied metrics file.
Everything else in the package is derived from them and never mutated.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .constants import CALENDAR_MONTHS, NOT_AVAILABLE
from .parsing import is_not_available

MetricValue = Union[str, int, float]
MetricPath = Union[str, Tuple[str, str]]


@dataclass(frozen=True)
class MetricRecord:
    """One metric's value for one calendar month."""
    month: str
    value: MetricValue
    status: Optional[str] = None
    goal: Optional[float] = None
    goal_direction: Optional[str] = None
    weekly_raw: Tuple[float, ...] = ()
    week_numbers: Tuple[int, ...] = ()

    @property
    def is_not_available(self) -> bool:
        return is_not_available(self.value)

    @property
    def has_status(self) -> bool:
        return bool(self.status)

    @classmethod
    def placeholder(cls, month: str) -> 'MetricRecord':
        """Sentinel slot for a month the source file has no record for."""
        return cls(month=month, value=NOT_AVAILABLE)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], month: str = None) -> 'MetricRecord':
        """Build from the camelCase record shape used by the metrics file."""
        goal = raw.get('goal')
        return cls(
            month=raw.get('month') or month,
            value=raw.get('value', NOT_AVAILABLE),
            status=raw.get('status') or None,
            goal=float(goal) if isinstance(goal, (int, float)) and not isinstance(goal, bool) else None,
            goal_direction=raw.get('goalDirection'),
            weekly_raw=tuple(raw.get('weeklyRaw') or ()),
            week_numbers=tuple(raw.get('weekNumbers') or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'month': self.month,
            'value': self.value,
            'status': self.status,
            'goal': self.goal,
            'goalDirection': self.goal_direction,
            'weeklyRaw': list(self.weekly_raw),
            'weekNumbers': list(self.week_numbers),
        }


@dataclass(frozen=True)
class ShiftDataset:
    """
    One shift's full metric tree.

    categories: category → metric → 12 records indexed by calendar month
    (January = 0). The loader guarantees exactly 12 slots per metric.
    """
    id: str
    name: str
    categories: Dict[str, Dict[str, Tuple[MetricRecord, ...]]] = field(default_factory=dict)

    def iter_metrics(self) -> Iterator[Tuple[str, str, Tuple[MetricRecord, ...]]]:
        """Yield (category, metric, records) in dataset order."""
        for category, metrics in self.categories.items():
            for metric_name, records in metrics.items():
                yield category, metric_name, records

    def metric_names(self) -> List[str]:
        return [name for _, name, _ in self.iter_metrics()]

    def get_records(self, path: MetricPath) -> Optional[Tuple[MetricRecord, ...]]:
        """
        Resolve a metric path to its 12 records.

        path is either a metric name (first category containing it wins) or
        an explicit (category, metric) pair.
        """
        if isinstance(path, tuple):
            category, metric_name = path
            return self.categories.get(category, {}).get(metric_name)

        for metrics in self.categories.values():
            if path in metrics:
                return metrics[path]
        return None


@dataclass(frozen=True)
class Trend:
    """Direction/goodness of a change between two values."""
    direction: str
    arrow: str
    color: str
    percent: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'direction': self.direction,
            'arrow': self.arrow,
            'color': self.color,
            'percent': self.percent,
        }


@dataclass(frozen=True)
class MetricSnapshot:
    """
    A month's record plus, when both months have a measurement, the
    preceding fiscal month's value and the trend between them.
    """
    record: MetricRecord
    previous: Optional[MetricRecord] = None
    trend: Optional[Trend] = None

    @property
    def value(self) -> MetricValue:
        return self.record.value

    @property
    def status(self) -> Optional[str]:
        return self.record.status

    @property
    def previous_value(self) -> Optional[MetricValue]:
        """Raw previous value, only set alongside a trend."""
        if self.trend is None or self.previous is None:
            return None
        return self.previous.value


def empty_metric_slots() -> List[MetricRecord]:
    return [MetricRecord.placeholder(month) for month in CALENDAR_MONTHS]
