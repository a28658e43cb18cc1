"""
Application settings using pydantic-settings for type-safe environment variables.

This module provides centralized configuration management for InsightLens,
loading settings from environment variables with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from insightlens.models.column import SCATTER_MAX_POINTS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level for the application
        preview_max_rows: Default row cap for insight previews
        suggestion_limit: Default number of chart suggestions returned
        suggestion_seed: Default seed for suggestion shuffling
        scatter_max_points: Row count above which scatter becomes a density plot
        analysis_cache_size: Maximum number of cached table analyses
        analysis_cache_ttl_seconds: Optional TTL for cached table analyses
    """

    model_config = SettingsConfigDict(
        env_prefix="INSIGHTLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    preview_max_rows: int = Field(
        default=50,
        ge=0,
        le=100_000,
        description="Rows kept in an insight preview",
    )

    suggestion_limit: int = Field(
        default=3,
        ge=1,
        le=50,
        description="Chart suggestions returned per request",
    )

    suggestion_seed: int = Field(
        default=0,
        ge=0,
        description="Seed for reproducible suggestion variety",
    )

    scatter_max_points: int = Field(
        default=SCATTER_MAX_POINTS,
        ge=1,
        description="Above this row count scatter plots become density plots",
    )

    analysis_cache_size: int = Field(
        default=128,
        ge=1,
        le=10_000,
        description="Maximum number of cached table analyses",
    )

    analysis_cache_ttl_seconds: int | None = Field(
        default=None,
        ge=1,
        description="TTL for cached table analyses (no expiry when unset)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """
    Get fresh application settings (not cached).

    Useful for testing when settings need to be reloaded.

    Returns:
        Settings: Fresh application settings instance
    """
    return Settings()
