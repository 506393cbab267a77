"""Foundation: configuration, logging and library exceptions."""

from .config import (
    CaptureSettings,
    LoggingSettings,
    ResultcaseSettings,
    clear_settings_cache,
    get_settings,
)
from .errors import EmptyOptionError, ErrorCode, InvalidVariantError, ResultcaseError, UnwrapError
from .logging import configure_logging, get_logger

__all__ = [
    # Config
    "CaptureSettings", "LoggingSettings", "ResultcaseSettings", "clear_settings_cache", "get_settings",
    # Errors
    "ErrorCode", "ResultcaseError", "UnwrapError", "EmptyOptionError", "InvalidVariantError",
    # Logging
    "configure_logging", "get_logger",
]
