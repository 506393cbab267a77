"""Exceptions raised by resultcase itself.

Represented failures travel as Failure values. These exceptions are reserved
for the few escape hatches that leave the Result railway on purpose.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable codes for library exceptions."""
    UNWRAP_FAILURE = "UNWRAP_FAILURE"
    EMPTY_OPTION = "EMPTY_OPTION"
    INVALID_VARIANT = "INVALID_VARIANT"


class ResultcaseError(Exception):
    """Base exception carrying an ErrorCode.

    Attributes:
        message: Human-readable description
        code: Machine-readable classification
    """

    code: ErrorCode = ErrorCode.INVALID_VARIANT

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class UnwrapError(ResultcaseError):
    """Raised when a success value is demanded from a Failure."""

    code = ErrorCode.UNWRAP_FAILURE

    def __init__(self, error: object) -> None:
        super().__init__(f"expected Success, got Failure({error!r})")
        self.error = error


class EmptyOptionError(ResultcaseError):
    """Raised by Option.get() on Nothing."""

    code = ErrorCode.EMPTY_OPTION

    def __init__(self, message: str = "get() on Nothing") -> None:
        super().__init__(message)


class InvalidVariantError(ResultcaseError, TypeError):
    """Raised when the abstract Result base is instantiated directly."""

    code = ErrorCode.INVALID_VARIANT
