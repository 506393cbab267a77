"""Resultcase - explicit success/failure values for Python.

A Result is either Success(value) or Failure(error). Instead of raising,
functions return a Result, and callers chain combinators that act on one side
and pass the other side through untouched.

Quick Start:
    >>> from resultcase import failure, of_nullable, success
    >>>
    >>> success("HELLO").map_success(len).or_else(0)
    5
    >>> of_nullable(None, 404)
    Failure(404)
    >>> failure(1024).or_else_map(lambda x: "HI" if x > 0 else "LO")
    'HI'

Capturing exceptions:
    >>> from resultcase import of_callable
    >>> of_callable(lambda: int("oops")).map_failure(type).get_failure()
    Some(<class 'ValueError'>)

Chaining steps that can fail:
    >>> from resultcase import Result
    >>> def connect(ok: bool) -> Result[str, str]:
    ...     return success("server") if ok else failure("Connection error")
    >>> connect(False).if_failure(print).map_success(len).or_else(-1)
    Connection error
    -1
"""

from __future__ import annotations

__version__ = "0.1.0"

from .foundation import (
    EmptyOptionError,
    ErrorCode,
    InvalidVariantError,
    ResultcaseError,
    UnwrapError,
    configure_logging,
    get_settings,
)
from .monads import (
    Failure,
    Nothing,
    Option,
    Result,
    Some,
    Success,
    catching,
    collect_results,
    failure,
    of_callable,
    of_nullable,
    of_optional,
    partition,
    sequence,
    success,
    traverse,
)

__all__ = [
    "__version__",
    # Core types
    "Result", "Success", "Failure", "Option", "Some", "Nothing",
    # Construction
    "success", "failure", "of_nullable", "of_optional", "of_callable", "catching",
    # Collection operations
    "sequence", "traverse", "collect_results", "partition",
    # Errors
    "ErrorCode", "ResultcaseError", "UnwrapError", "EmptyOptionError", "InvalidVariantError",
    # Configuration & logging
    "get_settings", "configure_logging",
]
