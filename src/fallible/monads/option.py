"""Option type: a value that is either present (Some) or absent (Nothing).

Example:
    >>> def find(users: dict[str, int], name: str) -> Option[int]:
    ...     return Some(users[name]) if name in users else Nothing
    >>> find({"ada": 36}, "ada").unwrap()
    36
    >>> find({"ada": 36}, "bob").unwrap_or(0)
    0
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from fallible.errors import InvalidUnwrap

from .utils import iter_inner

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Discriminated union of Some(value) and the shared Nothing instance.

    Built only through Some(); Nothing is a module-level singleton.
    """

    __slots__ = ("_value", "_is_some")

    def __init__(self, value: T | None, is_some: bool) -> None:
        """Private constructor. Use Some() or Nothing instead."""
        self._value = value
        self._is_some = is_some

    def is_some(self) -> bool:
        """Check if Option is Some variant."""
        return self._is_some

    def is_none(self) -> bool:
        """Check if Option is Nothing."""
        return not self._is_some

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if Some and predicate(value) holds. predicate is not called on Nothing."""
        return self._is_some and predicate(cast(T, self._value))

    def expect(self, msg: str) -> T:
        """Extract value, or raise InvalidUnwrap with exactly msg."""
        if self._is_some:
            return cast(T, self._value)
        raise InvalidUnwrap(msg)

    def unwrap(self) -> T:
        """Extract Some value. Raises InvalidUnwrap on Nothing."""
        if self._is_some:
            return cast(T, self._value)
        raise InvalidUnwrap("Tried to unwrap None")

    def unwrap_or(self, default: U) -> T | U:
        """Extract Some value or return default verbatim."""
        return cast(T, self._value) if self._is_some else default

    def unwrap_or_else(self, f: Callable[[], U]) -> T | U:
        """Extract Some value or compute a fallback via f()."""
        return cast(T, self._value) if self._is_some else f()

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to Some value. Nothing passes through."""
        if self._is_some:
            return Option(f(cast(T, self._value)), True)
        return cast(Option[U], self)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep Some only if predicate(value) holds."""
        if self._is_some and predicate(cast(T, self._value)):
            return self
        return cast(Option[T], Nothing)

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that may produce Nothing."""
        if self._is_some:
            return f(cast(T, self._value))
        return cast(Option[U], self)

    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if Some, otherwise other."""
        return self if self._is_some else other

    def __bool__(self) -> bool:
        """True if Some."""
        return self._is_some

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "Nothing"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._is_some == other._is_some and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_some, self._value))

    def __iter__(self) -> Iterator[object]:
        """Iterate the elements of an iterable Some value, text included; Nothing yields nothing."""
        if self._is_some:
            yield from iter_inner(self._value, include_text=True)

    # Nothing stays a singleton through copy, deepcopy and pickle

    def __copy__(self) -> Option[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Option[T]:
        if not self._is_some:
            return self
        return Option(copy.deepcopy(self._value, memo), True)

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (Some, (self._value,)) if self._is_some else "Nothing"


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct Some variant (present)."""
    return Option(value, True)


Nothing: Option = Option(None, False)
