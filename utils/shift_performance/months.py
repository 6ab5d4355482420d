# utils/shift_performance/months.py
"""
Calendar ↔ fiscal month resolution.

The dataset is indexed by calendar month (January = 0) while the business
runs a February-January fiscal year. Unknown month names resolve to -1 /
empty windows; callers treat that as "no section", not as an error.
"""

from typing import List, Optional

from .constants import CALENDAR_MONTHS, DEFAULT_FISCAL_YEAR, FISCAL_MONTHS, MONTHS_PER_YEAR

NOT_FOUND = -1


def to_calendar_index(month: str) -> int:
    """January = 0 .. December = 11, -1 if unknown."""
    try:
        return CALENDAR_MONTHS.index(month)
    except ValueError:
        return NOT_FOUND


def to_fiscal_index(month: str) -> int:
    """February = 0 .. January = 11, -1 if unknown."""
    try:
        return FISCAL_MONTHS.index(month)
    except ValueError:
        return NOT_FOUND


def fiscal_window(upto_month: str) -> List[str]:
    """Months from February through upto_month inclusive."""
    fiscal_index = to_fiscal_index(upto_month)
    if fiscal_index == NOT_FOUND:
        return []
    return FISCAL_MONTHS[:fiscal_index + 1]


def ytd_window(upto_month: str) -> List[str]:
    """
    Fiscal window eligible for a YTD section.

    February has no prior month to roll up, so its window is empty just
    like an unknown month's.
    """
    if to_fiscal_index(upto_month) <= 0:
        return []
    return fiscal_window(upto_month)


def previous_fiscal_month(month: str) -> Optional[str]:
    fiscal_index = to_fiscal_index(month)
    if fiscal_index <= 0:
        return None
    return FISCAL_MONTHS[fiscal_index - 1]


def display_year(month: str, fiscal_year: int = DEFAULT_FISCAL_YEAR) -> int:
    """Calendar year a fiscal month falls in (January rolls into the next year)."""
    if month == FISCAL_MONTHS[-1]:
        return fiscal_year + 1
    return fiscal_year


def month_label(month: str, fiscal_year: int = DEFAULT_FISCAL_YEAR) -> str:
    """'March 2025', 'January 2026'."""
    return f"{month} {display_year(month, fiscal_year)}"


def fiscal_progress(month_count: int) -> float:
    """Share of the fiscal year covered, 0..1."""
    return month_count / MONTHS_PER_YEAR
