"""Operations over many Results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from .result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Iterable

S = TypeVar("S")
F = TypeVar("F")
T = TypeVar("T")


def sequence(results: Iterable[Result[S, F]]) -> Result[list[S], F]:
    """Iterable[Result[S,F]] → Result[list[S], F]. Fail-fast on first Failure.

    Example:
        >>> sequence([Success(1), Success(2)])
        Success([1, 2])
        >>> sequence([Success(1), Failure("fail"), Failure("later")])
        Failure('fail')
    """
    values: list[S] = []
    for r in results:
        if r.has_failure():
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Success(values)


def traverse(items: Iterable[T], f: Callable[[T], Result[S, F]]) -> Result[list[S], F]:
    """Map f over items and sequence. Items after the first Failure are not visited."""
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[Result[S, F]]) -> Result[list[S], list[F]]:
    """Collect every Result, accumulating ALL failures (not fail-fast)."""
    values, errors = partition(results)
    return Failure(errors) if errors else Success(values)


def partition(results: Iterable[Result[S, F]]) -> tuple[list[S], list[F]]:
    """Split into (success values, failure values), order preserved."""
    values: list[S] = []
    errors: list[F] = []
    for r in results:
        (values if r.has_success() else errors).append(r._value)  # type: ignore[arg-type]
    return values, errors
