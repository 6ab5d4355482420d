# utils/config.py
"""
Centralized Configuration Management

Version: 2.1.0
Features:
- Support both local (.env) and Streamlit Cloud (secrets.toml)
- Singleton pattern for efficiency
- Type-safe getters with defaults
- Environment detection
- Missing settings fall back to defaults (logged, never raised)
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any
from dataclasses import dataclass

# Initialize logger
logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = "data/shift_metrics.json"
DEFAULT_FISCAL_YEAR = 2025


def is_running_on_streamlit_cloud() -> bool:
    """Detect if running on Streamlit Cloud"""
    try:
        import streamlit as st
        return hasattr(st, 'secrets') and len(st.secrets) > 0
    except Exception:
        return False


def _to_int(raw: Any, default: int, name: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Invalid {name}={raw!r}, using default {default}")
        return default


@dataclass
class DatasetConfig:
    """Metrics dataset configuration container"""
    path: str = DEFAULT_DATASET_PATH
    fiscal_year: int = DEFAULT_FISCAL_YEAR

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'fiscal_year': self.fiscal_year,
        }

    def exists(self) -> bool:
        return Path(self.path).exists()


class Config:
    """
    Centralized configuration management

    Usage:
        from utils.config import config

        # Get dataset config
        dataset = config.get_dataset_config()

        # Get app settings
        ttl = config.get_app_setting("CACHE_TTL_SECONDS", 300)

        # Check feature flags
        if config.is_feature_enabled("EXPORT"):
            ...
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.is_cloud = is_running_on_streamlit_cloud()
        self._load_config()
        self._initialized = True

    def _load_config(self):
        """Load configuration based on environment"""
        if self.is_cloud:
            self._load_cloud_config()
        else:
            self._load_local_config()

        self._load_app_config()
        self._log_config_status()

    def _load_cloud_config(self):
        """Load configuration from Streamlit Cloud secrets"""
        import streamlit as st

        dataset_secrets = st.secrets.get("DATASET", {})
        self._dataset_config = DatasetConfig(
            path=dataset_secrets.get("PATH", DEFAULT_DATASET_PATH),
            fiscal_year=_to_int(dataset_secrets.get("FISCAL_YEAR", DEFAULT_FISCAL_YEAR), DEFAULT_FISCAL_YEAR, "FISCAL_YEAR"),
        )

        logger.info("☁️ Running in STREAMLIT CLOUD")

    def _load_local_config(self):
        """Load configuration from local .env file"""
        # Find and load .env file
        env_paths = [
            Path.cwd() / ".env",
            Path(__file__).parent.parent / ".env",
        ]

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded .env from: {env_path}")
                break

        self._dataset_config = DatasetConfig(
            path=os.getenv("SHIFT_METRICS_PATH", DEFAULT_DATASET_PATH),
            fiscal_year=_to_int(os.getenv("FISCAL_YEAR", DEFAULT_FISCAL_YEAR), DEFAULT_FISCAL_YEAR, "FISCAL_YEAR"),
        )

        logger.info("💻 Running in LOCAL environment")

    def _load_app_config(self):
        """Load application-specific settings"""
        self._app_config = {
            # Cache
            "CACHE_TTL_SECONDS": _to_int(os.getenv("CACHE_TTL_SECONDS", "300"), 300, "CACHE_TTL_SECONDS"),

            # Logging
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),

            # Feature flags
            "ENABLE_DEBUG_MODE": os.getenv("ENABLE_DEBUG_MODE", "false").lower() == "true",
            "ENABLE_EXPORT": os.getenv("ENABLE_EXPORT", "true").lower() == "true",
        }

    def _log_config_status(self):
        """Log configuration status"""
        if self._dataset_config.exists():
            logger.info(f"✅ Dataset: {self._dataset_config.path} (FY{self._dataset_config.fiscal_year})")
        else:
            logger.warning(f"⚠️ Dataset not found at {self._dataset_config.path}")

    # ==================== PUBLIC GETTERS ====================

    def get_dataset_config(self) -> DatasetConfig:
        """Get dataset configuration"""
        return self._dataset_config

    def get_app_setting(self, key: str, default: Any = None) -> Any:
        """Get application setting with default"""
        return self._app_config.get(key, default)

    def is_feature_enabled(self, feature: str) -> bool:
        """Check if feature is enabled"""
        key = f"ENABLE_{feature.upper()}"
        return self._app_config.get(key, True)

    # ==================== PROPERTIES ====================

    @property
    def dataset_config(self) -> Dict[str, Any]:
        return self._dataset_config.to_dict()

    @property
    def app_config(self) -> Dict[str, Any]:
        return self._app_config.copy()


# ==================== SINGLETON INSTANCE ====================

config = Config()

# ==================== MODULE EXPORTS ====================

IS_RUNNING_ON_CLOUD = config.is_cloud
DATASET_CONFIG = config.dataset_config
APP_CONFIG = config.app_config

__all__ = [
    'config',
    'Config',
    'DatasetConfig',
    'IS_RUNNING_ON_CLOUD',
    'DATASET_CONFIG',
    'APP_CONFIG',
]
