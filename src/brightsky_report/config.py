"""
Application settings.

Values come from environment variables prefixed with ``BRIGHTSKY_REPORT_``
(or a local ``.env`` file), e.g. ``BRIGHTSKY_REPORT_DEBUG=1``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from brightsky_report.renderers.report import DEFAULT_DATE_FORMAT

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime configuration for the report CLI."""

    model_config = SettingsConfigDict(
        env_prefix="BRIGHTSKY_REPORT_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "brightsky-report"
    app_env: str = "development"
    debug: bool = False
    log_level: LogLevel = "WARNING"
    date_format: str = DEFAULT_DATE_FORMAT

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
