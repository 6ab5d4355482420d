# utils/shift_performance/comparison/__init__.py
"""Shift comparison fragments for Shift Performance."""

from .fragments import (
    comparison_fragment,
    render_summary_cards,
    render_winner_section,
    render_metric_rows,
)

__all__ = [
    'comparison_fragment',
    'render_summary_cards',
    'render_winner_section',
    'render_metric_rows',
]
