"""Library exceptions and error codes."""

from .errors import EmptyOptionError, ErrorCode, InvalidVariantError, ResultcaseError, UnwrapError

__all__ = ["ErrorCode", "ResultcaseError", "UnwrapError", "EmptyOptionError", "InvalidVariantError"]
