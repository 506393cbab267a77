"""Option type: a value that is either present (Some) or absent (Nothing).

Python's ``T | None`` cannot tell "absent" from "present and None". Results
may legitimately carry None, so Result.get_success()/get_failure() answer with
an Option instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..foundation.errors import EmptyOptionError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Either Some(value) or Nothing.

    Examples:
        >>> Some(3).map(lambda x: x + 1)
        Some(4)
        >>> Nothing.or_else(0)
        0
        >>> Option.of_nullable(None)
        Nothing
    """

    __slots__ = ()

    def is_present(self) -> bool:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """Present value. Raises EmptyOptionError on Nothing."""
        raise NotImplementedError

    def or_else(self, default: T) -> T:
        return self.get() if self.is_present() else default

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Some(f(self.get())) if self.is_present() else Nothing

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self.get()

    @staticmethod
    def of_nullable(value: T | None) -> Option[T]:
        """Some(value) unless value is None."""
        return Nothing if value is None else Some(value)


class Some(Option[T]):
    """Present variant. The value may itself be None."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type, tuple[object]]:
        return (Some, (self._value,))

    @property
    def value(self) -> T:
        return self._value

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return self._value == other._value if isinstance(other, Some) else NotImplemented

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class _Nothing(Option[T]):
    """Absent variant. Use the Nothing singleton."""

    __slots__ = ()
    _instance: _Nothing | None = None

    def __new__(cls) -> _Nothing:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __reduce__(self) -> str:
        return "Nothing"

    def is_present(self) -> bool:
        return False

    def get(self) -> T:
        raise EmptyOptionError()

    def __repr__(self) -> str:
        return "Nothing"


Nothing: Option = _Nothing()
