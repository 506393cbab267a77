"""Functions that lift plain values, Options and fallible calls into Results."""

from __future__ import annotations

import logging
from functools import partial, wraps
from typing import Callable, ParamSpec, TypeVar, overload

from pydantic import ValidationError

from ..foundation.config import CaptureSettings, get_settings
from ..foundation.logging import get_logger
from .option import Option
from .result import Failure, Result, Success

S = TypeVar("S")
F = TypeVar("F")
P = ParamSpec("P")

ExceptionTypes = type[BaseException] | tuple[type[BaseException], ...]

logger = get_logger("monads")


def success(value: S) -> Result[S, F]:
    """Success(value), also for None or other falsy values."""
    return Success(value)


def failure(error: F) -> Result[S, F]:
    """Failure(error)."""
    return Failure(error)


def of_nullable(value: S | None, error_if_null: F) -> Result[S, F]:
    """Success(value) unless value is None, else Failure(error_if_null).

    Example:
        >>> of_nullable(None, 404)
        Failure(404)
    """
    return Failure(error_if_null) if value is None else Success(value)


def of_optional(option: Option[S], error_if_empty: F) -> Result[S, F]:
    """Success of the present value, else Failure(error_if_empty).

    A present None stays a success: of_optional(Some(None), e) == Success(None).
    """
    return Success(option.get()) if option.is_present() else Failure(error_if_empty)


def of_callable(fn: Callable[[], S], *, catch: ExceptionTypes = Exception) -> Result[S, BaseException]:
    """Run ``fn`` once and capture the outcome.

    Args:
        fn: Zero-argument computation
        catch: Exception type(s) converted into Failure. Anything else
            propagates, as do BaseException-only signals such as
            KeyboardInterrupt under the default.

    Returns:
        Success(fn()) if it returned, Failure(exc) if it raised ``catch``

    Example:
        >>> of_callable(lambda: int("42"))
        Success(42)
        >>> of_callable(lambda: int("x")).has_failure()
        True
    """
    return _attempt(fn, catch, getattr(fn, "__qualname__", repr(fn)))


def _attempt(fn: Callable[[], S], catch: ExceptionTypes, label: str) -> Result[S, BaseException]:
    try:
        value = fn()
    except catch as exc:
        _log_capture(label, exc)
        return Failure(exc)
    return Success(value)


def _capture_settings() -> CaptureSettings:
    try:
        return get_settings().capture
    except ValidationError:
        # Bad RESULTCASE_* values must not turn a captured exception into a raised one
        return CaptureSettings.model_construct()


def _log_capture(label: str, exc: BaseException) -> None:
    capture = _capture_settings()
    if not capture.log_exceptions:
        return
    level = getattr(logging, capture.log_level, logging.DEBUG)
    if logger.isEnabledFor(level):
        logger.log(level, "[%s] captured %s: %s", label, type(exc).__name__, exc)


@overload
def catching(fn: Callable[P, S]) -> Callable[P, Result[S, BaseException]]: ...

@overload
def catching(
    *,
    catch: ExceptionTypes = Exception,
) -> Callable[[Callable[P, S]], Callable[P, Result[S, BaseException]]]: ...


def catching(
    fn: Callable[P, S] | None = None,
    *,
    catch: ExceptionTypes = Exception,
) -> Callable[P, Result[S, BaseException]] | Callable[[Callable[P, S]], Callable[P, Result[S, BaseException]]]:
    """Decorator making a function return a Result instead of raising.

    Each call is captured exactly like of_callable, with the same ``catch`` policy.

    Example:
        >>> @catching(catch=ValueError)
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("7")
        Success(7)
    """
    def decorator(func: Callable[P, S]) -> Callable[P, Result[S, BaseException]]:
        label = getattr(func, "__qualname__", repr(func))

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[S, BaseException]:
            return _attempt(partial(func, *args, **kwargs), catch, label)
        return wrapper

    return decorator(fn) if fn is not None else decorator
