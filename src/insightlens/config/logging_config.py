"""
Logging configuration for InsightLens.

Provides structured logging with customizable formats and handlers.
"""

import logging
import sys

from insightlens.config.settings import get_settings


def setup_logging(
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up application logging.

    Args:
        level: Logging level (defaults to settings.log_level)
        format_string: Custom log format string

    Returns:
        Logger: Configured root logger for InsightLens
    """
    settings = get_settings()
    log_level = (level or settings.log_level).upper()

    default_format = (
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
    )
    log_format = format_string or default_format

    logging.basicConfig(
        level=getattr(logging, log_level),
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    logger = logging.getLogger("insightlens")
    logger.setLevel(getattr(logging, log_level))

    # pandas emits its own warnings through the warnings module, keep its logger quiet
    logging.getLogger("pandas").setLevel(logging.WARNING)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the InsightLens namespace.

    Args:
        name: Logger name (will be prefixed with 'insightlens.')

    Returns:
        Logger: Configured logger instance
    """
    return logging.getLogger(f"insightlens.{name}")
