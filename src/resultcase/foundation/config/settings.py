"""Environment-based configuration using pydantic-settings.

Result values themselves are not configurable. Settings only steer the
diagnostics around them: how the package logger is set up and whether
of_callable reports the exceptions it captures.

Example:
    >>> from resultcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.capture.log_exceptions
    True

    # Or with environment variables:
    # RESULTCASE_LOG_LEVEL=DEBUG
    # RESULTCASE_CAPTURE_LOG_EXCEPTIONS=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class CaptureSettings(BaseSettings):
    """Diagnostics for exceptions captured by of_callable."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_CAPTURE_",
        extra="ignore",
    )

    log_exceptions: bool = Field(default=True, description="Log each captured exception")
    log_level: LogLevel = Field(default="DEBUG", description="Level of the capture log record")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class ResultcaseSettings(BaseSettings):
    """Root settings, loaded from RESULTCASE_* environment variables.

    Example environment variables:
        RESULTCASE_LOG_LEVEL=DEBUG
        RESULTCASE_LOG_FORMAT=json
        RESULTCASE_CAPTURE_LOG_LEVEL=INFO
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultcaseSettings:
    """Get the global settings instance (cached)."""
    return ResultcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
