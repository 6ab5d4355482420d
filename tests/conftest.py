"""Shared pytest fixtures for the Shift Performance test suite.

Provides:
- make_shifts: factory building ShiftDatasets from a compact
  {shift id: {(category, metric): {month: (value, status)}}} mapping
- fleet: three shifts with February-April data used across modules
"""

from typing import Dict, Optional, Tuple

import pytest

from utils.shift_performance.constants import (
    CATEGORY_COST,
    CATEGORY_QUALITY,
    CATEGORY_SAFETY,
    METRIC_CHASE,
    METRIC_DPM,
    METRIC_OVERTIME,
    METRIC_RECEIVING_CPH,
    METRIC_SAFETY_MEDICAL,
    METRIC_SAFETY_NON_MEDICAL,
)
from utils.shift_performance.data_loader import parse_shift_metrics

DPM = (CATEGORY_QUALITY, METRIC_DPM)
CHASE = (CATEGORY_QUALITY, METRIC_CHASE)
MEDICAL = (CATEGORY_SAFETY, METRIC_SAFETY_MEDICAL)
NON_MEDICAL = (CATEGORY_SAFETY, METRIC_SAFETY_NON_MEDICAL)
OVERTIME = (CATEGORY_COST, METRIC_OVERTIME)
RECEIVING = (CATEGORY_COST, METRIC_RECEIVING_CPH)

MonthValues = Dict[str, Tuple[object, Optional[str]]]


def _raw_records(months: MonthValues) -> list:
    records = []
    for month, (value, status) in months.items():
        raw = {'month': month, 'value': value}
        if status:
            raw['status'] = status
        records.append(raw)
    return records


def build_raw(spec: dict, names: dict = None) -> dict:
    """Compact spec → the JSON-shaped mapping the loader reads."""
    names = names or {}
    raw = {}
    for shift_id, metrics in spec.items():
        categories: dict = {}
        for (category, metric_name), months in metrics.items():
            categories.setdefault(category, {})[metric_name] = _raw_records(months)
        raw[shift_id] = {'name': names.get(shift_id, shift_id), 'categories': categories}
    return raw


@pytest.fixture
def make_shifts():
    """Factory: make_shifts(spec, names=None) → {shift id: ShiftDataset}."""
    def _make(spec: dict, names: dict = None):
        return parse_shift_metrics(build_raw(spec, names))
    return _make


FLEET_NAMES = {
    'dry-1st': 'Dry 1st',
    'dry-2nd': 'Dry 2nd',
    'per-1st': 'Perishable 1st',
}

FLEET_SPEC = {
    'dry-1st': {
        DPM: {'February': ('1,400', 'green'), 'March': ('1,200', 'green'), 'April': ('1,600', 'red')},
        CHASE: {'February': ('2.5%', 'green'), 'March': ('3.5%', 'red'), 'April': ('2.0%', 'green')},
        MEDICAL: {'February': (0, 'green'), 'March': (1, 'red'), 'April': (0, 'green')},
        NON_MEDICAL: {'February': (0, 'green'), 'March': (0, 'green'), 'April': (1, 'red')},
        OVERTIME: {'February': ('0', 'green'), 'March': ('0', 'green'), 'April': ('0', 'green')},
        RECEIVING: {'February': ('1,150', 'green'), 'March': ('1,050', 'red'), 'April': ('1,200', 'green')},
    },
    'dry-2nd': {
        DPM: {'February': ('1,800', 'red'), 'March': ('N/A', None), 'April': ('1,300', 'green')},
        CHASE: {'February': ('4.0%', 'red'), 'March': ('2.0%', 'green'), 'April': ('3.0%', 'red')},
        MEDICAL: {'February': (0, 'green'), 'March': (0, 'green'), 'April': (0, 'green')},
        NON_MEDICAL: {'February': (0, 'green'), 'March': (0, 'green'), 'April': (0, 'green')},
        OVERTIME: {'February': ('12.5', 'red'), 'March': ('0', 'green'), 'April': ('4', 'red')},
        RECEIVING: {'February': ('1,100', 'green'), 'March': ('1,100', 'green'), 'April': ('1,000', 'red')},
    },
    'per-1st': {
        DPM: {'February': ('2,000', 'red'), 'March': ('1,500', 'green'), 'April': ('1,500', 'green')},
        MEDICAL: {'February': (2, 'red'), 'March': (0, 'green'), 'April': ('N/A', None)},
        NON_MEDICAL: {'February': (0, 'green'), 'March': (1, 'red'), 'April': (0, 'green')},
        OVERTIME: {'February': ('0', 'green'), 'March': ('0', 'green'), 'April': ('0', 'green')},
        RECEIVING: {'February': ('900', 'red'), 'March': ('1,250', 'green'), 'April': ('1,250', 'green')},
    },
}


@pytest.fixture
def fleet_raw() -> dict:
    return build_raw(FLEET_SPEC, FLEET_NAMES)


@pytest.fixture
def fleet(make_shifts):
    """Three shifts (two dry, one perishable) with February-April data."""
    return make_shifts(FLEET_SPEC, FLEET_NAMES)
