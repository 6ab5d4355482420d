# utils/shift_performance/data_loader.py
"""
Data Loader for Shift Performance

VERSION: 1.0.0
- Reads the pre-computed metrics file (JSON) once per TTL window
- Places each record in its calendar-month slot, padding missing months
  with status-less "N/A" placeholders so every metric has 12 slots
- Long-format DataFrame view for exports and debugging

Expected file shape:
    {
      "<shift id>": {
        "name": "Dry 1st Shift",
        "categories": {
          "<category>": {
            "<metric>": [{"month": "March", "value": "1,234", "status": "green", ...}, ...]
          }
        }
      }
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd
import streamlit as st

from ..config import config
from .constants import FISCAL_MONTHS
from .models import MetricRecord, ShiftDataset, empty_metric_slots
from .months import NOT_FOUND, to_calendar_index, to_fiscal_index

logger = logging.getLogger(__name__)

ShiftMap = Dict[str, ShiftDataset]


class DatasetLoadError(ValueError):
    """The metrics file is missing, unreadable or has the wrong shape."""


# =============================================================================
# PARSING
# =============================================================================

def _parse_metric_records(shift_id: str, metric_name: str, raw_records: Any) -> tuple:
    if not isinstance(raw_records, list):
        raise DatasetLoadError(
            f"{shift_id}/{metric_name}: expected a list of monthly records, got {type(raw_records).__name__}"
        )

    slots = empty_metric_slots()
    for raw in raw_records:
        if not isinstance(raw, dict):
            raise DatasetLoadError(f"{shift_id}/{metric_name}: record is not an object: {raw!r}")

        month = raw.get('month')
        for key in ('weeklyRaw', 'weekNumbers'):
            if raw.get(key) is not None and not isinstance(raw[key], list):
                raise DatasetLoadError(
                    f"{shift_id}/{metric_name}/{month}: '{key}' must be a list, got {type(raw[key]).__name__}"
                )

        calendar_index = to_calendar_index(month)
        if calendar_index == NOT_FOUND:
            logger.warning(f"[Loader] {shift_id}/{metric_name}: skipping record with unknown month {month!r}")
            continue
        slots[calendar_index] = MetricRecord.from_dict(raw, month=month)

    return tuple(slots)


def parse_shift_metrics(raw: Dict[str, Any]) -> ShiftMap:
    """
    Convert the raw metrics mapping into ShiftDataset objects.

    Raises:
        DatasetLoadError: when a shift, category or metric has the wrong shape
    """
    if not isinstance(raw, dict):
        raise DatasetLoadError(f"Top level must be an object of shifts, got {type(raw).__name__}")

    shifts = {}
    for shift_id, shift_raw in raw.items():
        if not isinstance(shift_raw, dict):
            raise DatasetLoadError(f"{shift_id}: shift entry must be an object")

        categories_raw = shift_raw.get('categories', {})
        if not isinstance(categories_raw, dict):
            raise DatasetLoadError(f"{shift_id}: 'categories' must be an object")

        categories = {}
        for category, metrics_raw in categories_raw.items():
            if not isinstance(metrics_raw, dict):
                raise DatasetLoadError(f"{shift_id}/{category}: category must map metric → records")
            categories[category] = {
                metric_name: _parse_metric_records(shift_id, metric_name, records)
                for metric_name, records in metrics_raw.items()
            }

        shifts[shift_id] = ShiftDataset(
            id=shift_id,
            name=shift_raw.get('name') or shift_id,
            categories=categories,
        )

    logger.info(f"[Loader] Parsed {len(shifts)} shifts")
    return shifts


# =============================================================================
# FILE LOADING
# =============================================================================

def load_shift_metrics(path: Union[str, Path]) -> ShiftMap:
    """
    Read and parse the metrics file.

    Raises:
        DatasetLoadError: missing file, invalid JSON or wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise DatasetLoadError(f"Metrics file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Metrics file is not valid JSON ({path}): {e}") from e

    return parse_shift_metrics(raw)


@st.cache_data(ttl=config.get_app_setting("CACHE_TTL_SECONDS", 300), show_spinner="Loading shift metrics...")
def load_shift_metrics_cached(path: str) -> ShiftMap:
    """load_shift_metrics() cached per path for CACHE_TTL_SECONDS."""
    return load_shift_metrics(path)


# =============================================================================
# DATAFRAME VIEW
# =============================================================================

def dataset_to_frame(shifts: ShiftMap) -> pd.DataFrame:
    """
    Long-format table: one row per shift / category / metric / month.
    Rows are ordered by fiscal month within each metric.
    """
    rows: List[Dict] = []
    for shift in shifts.values():
        for category, metric_name, records in shift.iter_metrics():
            for record in records:
                rows.append({
                    'shift_id': shift.id,
                    'shift': shift.name,
                    'category': category,
                    'metric': metric_name,
                    'month': record.month,
                    'fiscal_index': to_fiscal_index(record.month),
                    'value': record.value,
                    'status': record.status,
                    'goal': record.goal,
                })

    columns = ['shift_id', 'shift', 'category', 'metric', 'month', 'fiscal_index', 'value', 'status', 'goal']
    if not rows:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame(rows, columns=columns)
    df = df.sort_values(['shift_id', 'category', 'metric', 'fiscal_index'], kind='stable').reset_index(drop=True)
    df['month'] = pd.Categorical(df['month'], categories=FISCAL_MONTHS, ordered=True)
    return df
