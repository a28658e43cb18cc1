"""Configuration and logging for InsightLens."""

from insightlens.config.logging_config import get_logger, setup_logging
from insightlens.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
]
