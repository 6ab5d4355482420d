# utils/__init__.py
"""
Shared Utilities Package for Streamlit Apps

This package contains common utilities shared across all pages:
- config: Configuration management (local + Streamlit Cloud)
- shift_performance: Shift metrics loading, aggregation and views

Usage:
    from utils.config import config
    from utils.shift_performance import load_shift_metrics_cached, aggregate_overview

    # Or import commonly used items directly
    from utils import config
"""

# Configuration
from .config import (
    config,
    Config,
    DatasetConfig,
    IS_RUNNING_ON_CLOUD,
    DATASET_CONFIG,
    APP_CONFIG,
)

__all__ = [
    # Config
    'config',
    'Config',
    'DatasetConfig',
    'IS_RUNNING_ON_CLOUD',
    'DATASET_CONFIG',
    'APP_CONFIG',
]

__version__ = '2.1.0'
