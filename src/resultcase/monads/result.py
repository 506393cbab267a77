"""Result type for explicit, composable success/failure handling.

A Result is exactly one of two variants:
- Success(value): the operation produced ``value``
- Failure(error): the operation failed with diagnostic ``error``

Both variants share one combinator surface (railway-oriented programming):
- Query: has_success, has_failure, get_success, get_failure
- Transform: map_success, map_failure, map, flat_map_success, flat_map_failure, flat_map
- Screen: filter (Success -> Failure), recover (Failure -> Success)
- Consume: if_success, if_failure, if_success_or_else, or_else, or_else_map,
  stream_success, stream_failure

A combinator aimed at one side returns ``self`` untouched on the other side.
Exceptions raised by caller-supplied functions are never caught here; only
of_callable converts exceptions into Failure values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..foundation.errors import InvalidVariantError, UnwrapError
from .option import Nothing, Option, Some

if TYPE_CHECKING:
    from collections.abc import Iterator

S = TypeVar("S")  # Success type
F = TypeVar("F")  # Failure type
S2 = TypeVar("S2")  # Mapped success type
F2 = TypeVar("F2")  # Mapped failure type


class Result(Generic[S, F]):
    """Outcome of an operation: Success(value) or Failure(error).

    Construct through Success/Failure or the factory functions
    (success, failure, of_nullable, of_optional, of_callable). The payload
    decides nothing: Success(None) is still a success.

    Examples:
        >>> Success("HELLO").map_success(len).or_else(0)
        5
        >>> Failure(1024).or_else_map(lambda x: "HI" if x > 0 else "LO")
        'HI'
        >>> Success(3).filter(lambda x: x % 2 == 0, lambda x: f"{x} is odd")
        Failure('3 is odd')
        >>> Failure("OK").recover(lambda e: e == "OK", len)
        Success(2)

        Pattern matching:
        >>> match Success(42):
        ...     case Success(value):
        ...         print(value)
        ...     case Failure(error):
        ...         print("failed", error)
        42

    Notes:
        - Immutable: attributes cannot be reassigned
        - Equal iff same variant and equal payloads
        - Hashable when the payload is hashable
    """

    __slots__ = ("_value",)

    def __init__(self, value: S | F) -> None:
        if type(self) is Result:
            raise InvalidVariantError("Result is abstract; use Success(...) or Failure(...)")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type, tuple[object]]:
        return (type(self), (self._value,))

    # ─── Variant Core ────────────────────────────────────────────────

    def has_success(self) -> bool:
        """True iff this is a Success."""
        raise NotImplementedError

    def has_failure(self) -> bool:
        """True iff this is a Failure. Always the negation of has_success()."""
        return not self.has_success()

    def get_success(self) -> Option[S]:
        """Some(value) on Success, Nothing on Failure."""
        return Some(self._value) if self.has_success() else Nothing  # type: ignore[arg-type]

    def get_failure(self) -> Option[F]:
        """Some(error) on Failure, Nothing on Success."""
        return Nothing if self.has_success() else Some(self._value)  # type: ignore[arg-type]

    # ─── Transformation ──────────────────────────────────────────────

    def map_success(self, f: Callable[[S], S2]) -> Result[S2, F]:
        """Success(v) -> Success(f(v)). Failure passes through."""
        return Success(f(self._value)) if self.has_success() else self  # type: ignore[arg-type,return-value]

    def map_failure(self, f: Callable[[F], F2]) -> Result[S, F2]:
        """Failure(e) -> Failure(f(e)). Success passes through."""
        return self if self.has_success() else Failure(f(self._value))  # type: ignore[arg-type,return-value]

    def map(self, success_fn: Callable[[S], S2], failure_fn: Callable[[F], F2]) -> Result[S2, F2]:
        """Transform whichever payload is present. Only one function runs."""
        if self.has_success():
            return Success(success_fn(self._value))  # type: ignore[arg-type]
        return Failure(failure_fn(self._value))  # type: ignore[arg-type]

    def flat_map_success(self, f: Callable[[S], Result[S2, F]]) -> Result[S2, F]:
        """Chain a step that can fail itself.

        ``f`` returns a Result, which is handed back as is. A Failure is
        returned without calling ``f``.

        Example:
            >>> def find(pet_id: int) -> Result[str, str]:
            ...     return Success("Rocky") if pet_id == 1 else Failure("NOT_FOUND")
            >>> Success(100).flat_map_success(find)
            Failure('NOT_FOUND')
        """
        return f(self._value) if self.has_success() else self  # type: ignore[arg-type,return-value]

    def flat_map_failure(self, f: Callable[[F], Result[S, F2]]) -> Result[S, F2]:
        """Recover with a strategy that can fail itself. Success passes through."""
        return self if self.has_success() else f(self._value)  # type: ignore[arg-type,return-value]

    def flat_map(
        self,
        success_fn: Callable[[S], Result[S2, F2]],
        failure_fn: Callable[[F], Result[S2, F2]],
    ) -> Result[S2, F2]:
        """Hand the active payload to its Result-returning function."""
        if self.has_success():
            return success_fn(self._value)  # type: ignore[arg-type]
        return failure_fn(self._value)  # type: ignore[arg-type]

    # ─── Screening ───────────────────────────────────────────────────

    def filter(self, predicate: Callable[[S], bool], error_fn: Callable[[S], F]) -> Result[S, F]:
        """Turn a Success whose value fails ``predicate`` into Failure(error_fn(value))."""
        if self.has_success() and not predicate(self._value):  # type: ignore[arg-type]
            return Failure(error_fn(self._value))  # type: ignore[arg-type]
        return self

    def recover(self, predicate: Callable[[F], bool], recovery_fn: Callable[[F], S]) -> Result[S, F]:
        """Turn a Failure whose error satisfies ``predicate`` into Success(recovery_fn(error)).

        Unrecognized failures keep propagating unchanged.
        """
        if self.has_failure() and predicate(self._value):  # type: ignore[arg-type]
            return Success(recovery_fn(self._value))  # type: ignore[arg-type]
        return self

    # ─── Conditional Actions ─────────────────────────────────────────

    def if_success(self, consumer: Callable[[S], object]) -> Result[S, F]:
        """Call consumer with the success value for side effects, return self."""
        if self.has_success():
            consumer(self._value)  # type: ignore[arg-type]
        return self

    def if_failure(self, consumer: Callable[[F], object]) -> Result[S, F]:
        """Call consumer with the failure value for side effects, return self."""
        if self.has_failure():
            consumer(self._value)  # type: ignore[arg-type]
        return self

    def if_success_or_else(
        self,
        success_consumer: Callable[[S], object],
        failure_consumer: Callable[[F], object],
    ) -> Result[S, F]:
        """Call exactly one consumer, matching the variant. Returns self."""
        if self.has_success():
            success_consumer(self._value)  # type: ignore[arg-type]
        else:
            failure_consumer(self._value)  # type: ignore[arg-type]
        return self

    # ─── Unwrapping ──────────────────────────────────────────────────

    def or_else(self, default: S) -> S:
        """Success value, or ``default`` (evaluated eagerly by the caller)."""
        return self._value if self.has_success() else default  # type: ignore[return-value]

    def or_else_map(self, f: Callable[[F], S]) -> S:
        """Success value, or ``f(error)`` computed only on Failure."""
        return self._value if self.has_success() else f(self._value)  # type: ignore[return-value,arg-type]

    def or_else_raise(self, exception_fn: Callable[[F], BaseException] | None = None) -> S:
        """Success value, or raise.

        Leaves the railway on purpose, e.g. at a framework boundary that
        expects exceptions.

        Raises:
            exception_fn(error) if given, else UnwrapError carrying the error
        """
        if self.has_success():
            return self._value  # type: ignore[return-value]
        if exception_fn is not None:
            raise exception_fn(self._value)  # type: ignore[arg-type]
        cause = self._value if isinstance(self._value, BaseException) else None
        raise UnwrapError(self._value) from cause

    def stream_success(self) -> Iterator[S]:
        """Lazy iterator over the success value: one element or none."""
        if self.has_success():
            yield self._value  # type: ignore[misc]

    def stream_failure(self) -> Iterator[F]:
        """Lazy iterator over the failure value: one element or none."""
        if self.has_failure():
            yield self._value  # type: ignore[misc]

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[S]:
        return self.stream_success()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.has_success() == other.has_success() and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.has_success(), self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Success(Result[S, F]):
    """Success variant holding ``value``."""

    __slots__ = ()
    __match_args__ = ("value",)

    @property
    def value(self) -> S:
        return self._value  # type: ignore[return-value]

    def has_success(self) -> bool:
        return True


class Failure(Result[S, F]):
    """Failure variant holding ``error``."""

    __slots__ = ()
    __match_args__ = ("error",)

    @property
    def error(self) -> F:
        return self._value  # type: ignore[return-value]

    def has_success(self) -> bool:
        return False
