# utils/shift_performance/comparison_engine.py
"""
Side-by-side comparison of 2-3 shifts for one month.

Winner rules:
- Per metric: the first green shift (input order) wins, but only when at
  least one shift is green and not every shift is. All green or none green
  means no winner for that metric.
- Overall: the shift with most metric wins; ties go to the first shift
  reaching the max in input order.
- Best performer: highest goal percentage, strict > (first wins ties).

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import (
    CATEGORIES,
    CATEGORY_ICONS,
    COMPARISON_WINNER_HIGHLIGHTS,
    METRIC_CATEGORIES,
    METRIC_GOAL_LABELS,
    STATUS_GREEN,
)
from .extractor import extract_month
from .models import MetricRecord, ShiftDataset
from .overview_aggregator import count_goals_met
from .parsing import percent_of

logger = logging.getLogger(__name__)

OTHER_GROUP = 'Other'


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class ComparedShift:
    """One selected shift's month records and goal counters."""
    id: str
    name: str
    records: Dict[str, MetricRecord]
    goals_met_count: int
    total_metrics: int

    @property
    def goal_percent(self) -> int:
        return percent_of(self.goals_met_count, self.total_metrics)


@dataclass(frozen=True)
class ComparisonCell:
    shift_id: str
    shift_name: str
    record: Optional[MetricRecord]
    is_winner: bool = False

    @property
    def status(self) -> Optional[str]:
        return self.record.status if self.record is not None else None


@dataclass(frozen=True)
class ComparisonRow:
    metric: str
    goal_label: str
    cells: List[ComparisonCell]
    winner_id: Optional[str] = None
    winner_name: Optional[str] = None

    @property
    def has_winner(self) -> bool:
        return self.winner_id is not None


@dataclass(frozen=True)
class ComparisonResult:
    month: str
    shifts: List[ComparedShift] = field(default_factory=list)
    rows: List[ComparisonRow] = field(default_factory=list)
    win_counts: Dict[str, int] = field(default_factory=dict)
    overall_winner_id: Optional[str] = None
    best_performer_id: Optional[str] = None

    @property
    def title(self) -> str:
        return f"{self.month} - {' vs '.join(shift.name for shift in self.shifts)}"

    def get_shift(self, shift_id: str) -> Optional[ComparedShift]:
        for shift in self.shifts:
            if shift.id == shift_id:
                return shift
        return None

    @property
    def overall_winner(self) -> Optional[ComparedShift]:
        return self.get_shift(self.overall_winner_id) if self.overall_winner_id else None

    @property
    def best_performer(self) -> Optional[ComparedShift]:
        return self.get_shift(self.best_performer_id) if self.best_performer_id else None

    def winner_rows(self) -> List[ComparisonRow]:
        return [row for row in self.rows if row.has_winner]

    def winner_highlights(self) -> Tuple[List[ComparisonRow], int]:
        """First few decided rows plus how many more were left out."""
        decided = self.winner_rows()
        shown = decided[:COMPARISON_WINNER_HIGHLIGHTS]
        return shown, len(decided) - len(shown)

    def grouped_rows(self) -> List[Tuple[str, List[ComparisonRow]]]:
        """
        Rows grouped under '<icon> <category>' headers in category order.
        Metrics without a known category end up under 'Other'.
        """
        groups: Dict[str, List[ComparisonRow]] = {category: [] for category in CATEGORIES}
        leftovers = []
        for row in self.rows:
            category = METRIC_CATEGORIES.get(row.metric)
            if category in groups:
                groups[category].append(row)
            else:
                leftovers.append(row)

        grouped = [
            (f"{CATEGORY_ICONS[category]} {category}", rows)
            for category, rows in groups.items()
            if rows
        ]
        if leftovers:
            grouped.append((OTHER_GROUP, leftovers))
        return grouped

    def to_rows(self) -> List[Dict]:
        """Flat table: one line per metric, one column per shift."""
        table = []
        for row in self.rows:
            line = {'Metric': row.metric, 'Goal': row.goal_label}
            for cell in row.cells:
                line[cell.shift_name] = cell.record.value if cell.record is not None else 'N/A'
            line['Winner'] = row.winner_name or ''
            table.append(line)
        return table


# =============================================================================
# ENGINE
# =============================================================================

def _compared_shift(shift: ShiftDataset, month: str) -> ComparedShift:
    goals_met, total = count_goals_met(shift, month)
    return ComparedShift(
        id=shift.id,
        name=shift.name,
        records=extract_month(shift, month),
        goals_met_count=goals_met,
        total_metrics=total,
    )


def _metric_union(compared: List[ComparedShift]) -> List[str]:
    seen = {}
    for shift in compared:
        for metric_name in shift.records:
            seen.setdefault(metric_name, None)
    return list(seen)


def pick_metric_winner(cells: List[ComparisonCell]) -> Optional[ComparisonCell]:
    """First green cell, unless nobody or everybody is green."""
    green = [cell for cell in cells if cell.status == STATUS_GREEN]
    if green and len(green) < len(cells):
        return green[0]
    return None


def compare_shifts(
    shifts: Mapping[str, ShiftDataset],
    shift_ids: Sequence[str],
    month: str,
) -> ComparisonResult:
    """
    Compare the selected shifts for a month.

    Args:
        shifts: shift id → dataset
        shift_ids: 2-3 ids in selection order (count is enforced by the caller)
        month: Month name

    Returns:
        ComparisonResult. Unknown ids are skipped.
    """
    compared = []
    for shift_id in shift_ids:
        shift = shifts.get(shift_id)
        if shift is None:
            logger.warning(f"[Comparison] Skipping unknown shift: {shift_id}")
            continue
        compared.append(_compared_shift(shift, month))

    rows = []
    win_counts = {shift.id: 0 for shift in compared}

    for metric_name in _metric_union(compared):
        cells = [
            ComparisonCell(shift.id, shift.name, shift.records.get(metric_name))
            for shift in compared
        ]
        winner = pick_metric_winner(cells)
        if winner is not None:
            win_counts[winner.shift_id] += 1
            cells = [
                ComparisonCell(cell.shift_id, cell.shift_name, cell.record, cell is winner)
                for cell in cells
            ]

        rows.append(ComparisonRow(
            metric=metric_name,
            goal_label=METRIC_GOAL_LABELS.get(metric_name, ''),
            cells=cells,
            winner_id=winner.shift_id if winner else None,
            winner_name=winner.shift_name if winner else None,
        ))

    overall_winner_id = None
    top_wins = 0
    for shift in compared:
        if win_counts[shift.id] > top_wins:
            top_wins = win_counts[shift.id]
            overall_winner_id = shift.id

    best_performer_id = None
    if compared:
        best = compared[0]
        for shift in compared[1:]:
            if shift.goal_percent > best.goal_percent:
                best = shift
        best_performer_id = best.id

    logger.debug(
        f"[Comparison] {month}: {[s.id for s in compared]}, {len(rows)} metrics, "
        f"overall winner={overall_winner_id}"
    )

    return ComparisonResult(
        month=month,
        shifts=compared,
        rows=rows,
        win_counts=win_counts,
        overall_winner_id=overall_winner_id,
        best_performer_id=best_performer_id,
    )
