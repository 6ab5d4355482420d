# utils/shift_performance/parsing.py
"""
Domain value parsing for Shift Performance.

Every component that needs a number out of a metric value goes through
parse_domain_value(), so the fallback policy is the same everywhere:

- Real numbers pass through (NaN is treated as unparsable).
- Strings are stripped of everything except digits and '.' (plus '-' when
  signed=True), then the leading numeric part is read: "1,234" → 1234.0,
  "2.5 hrs" → 2.5, "3.1%" → 3.1.
- The "N/A" sentinel, None, booleans and strings without a number give None.

Callers pick what None means: coerce_or_zero() for trend/safety math,
skip-the-month for counted averages.
"""

import math
import re
from typing import Any, Optional

from .constants import NOT_AVAILABLE

_SIGNED_STRIP = re.compile(r'[^0-9.\-]')
_UNSIGNED_STRIP = re.compile(r'[^0-9.]')
_LEADING_NUMBER = re.compile(r'^-?(\d+(\.\d*)?|\.\d+)')


def is_not_available(value: Any) -> bool:
    """True for the "N/A" sentinel (and None, which the loader never emits)."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == NOT_AVAILABLE


def parse_domain_value(value: Any, signed: bool = False) -> Optional[float]:
    """
    Parse a metric value into a float.

    Args:
        value: Raw value from the dataset (number or display string)
        signed: Keep '-' characters when stripping (trend comparison does,
                value aggregation does not)

    Returns:
        float, or None when nothing numeric can be read
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number

    if is_not_available(value):
        return None

    pattern = _SIGNED_STRIP if signed else _UNSIGNED_STRIP
    cleaned = pattern.sub('', str(value))
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    return float(match.group(0))


def coerce_or_zero(value: Any, signed: bool = False) -> float:
    """parse_domain_value() with 0 as the fallback."""
    number = parse_domain_value(value, signed=signed)
    return 0.0 if number is None else number


def round_half_up(value: float) -> int:
    """Round .5 away from zero on the positive side (2.5 → 3, -2.5 → -2)."""
    return int(math.floor(value + 0.5))


def percent_of(part: float, whole: float) -> int:
    """Rounded percentage, 0 when whole is 0."""
    if not whole:
        return 0
    return round_half_up(part / whole * 100)
