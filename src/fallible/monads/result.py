"""Result type for explicit, type-tracked error handling.

Implements a discriminated union for success/failure:
- Inspection: is_ok, is_err, is_ok_and, is_err_and, ok, err
- Transformation: map, map_or, map_or_else, map_err, inspect, inspect_err
- Chaining: and_, and_then, or_, or_else
- Extraction: expect, unwrap, unwrap_or, unwrap_or_else, expect_err, unwrap_err
- Copying: cloned

Err values carry the call stack captured when they were built, and that trace
is appended to the message when an Err is forced open with unwrap()/expect().
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from fallible.errors import UnwrapOnErr, UnwrapOnOk

from .trace import capture_origin, mark_internal
from .utils import iter_inner, stringify

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type

# Discriminant values
_OK = True
_ERR = False

logger = logging.getLogger("fallible.result")

mark_internal(__file__)


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Combinators switch on the variant flag and never raise on their own
    account; only the unwrap/expect family turns an Err into an exception.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> Ok(5).and_then(lambda x: Ok(x * 2) if x > 0 else Err("neg")).unwrap()
        10

    Notes:
        - Built only through Ok() and Err()
        - Immutable: every transformation returns a new Result or self
        - Err equality ignores the captured trace
    """

    __slots__ = ("_value", "_is_ok", "_trace")

    def __init__(self, value: T | E, is_ok: bool, trace: str = "") -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value = value
        self._is_ok = is_ok
        self._trace = trace

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if Ok and predicate(value) holds. predicate is not called on Err."""
        return self._is_ok and predicate(cast(T, self._value))

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """True if Err and predicate(error) holds. predicate is not called on Ok."""
        return not self._is_ok and predicate(cast(E, self._value))

    def ok(self) -> T | None:
        """Ok value, or None if Err."""
        return cast(T, self._value) if self._is_ok else None

    def err(self) -> E | None:
        """Err value, or None if Ok."""
        return cast(E, self._value) if not self._is_ok else None

    @property
    def trace(self) -> str:
        """Call stack captured when the Err was built (empty for Ok)."""
        return self._trace

    # ─── Transformation ──────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]

        An Err is returned as-is; f is never called.
        """
        if self._is_ok:
            return Result(f(cast(T, self._value)), _OK)
        return cast(Result[U, E], self)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """f(value) if Ok, else default (f is not called)."""
        return f(cast(T, self._value)) if self._is_ok else default

    def map_or_else(self, default_fn: Callable[[E], U], f: Callable[[T], U]) -> U:
        """f(value) if Ok, else default_fn(error)."""
        if self._is_ok:
            return f(cast(T, self._value))
        return default_fn(cast(E, self._value))

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]

        The new Err records the trace of the map_err call site.
        """
        if not self._is_ok:
            return Err(f(cast(E, self._value)))
        return cast(Result[T, F], self)

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with Ok value for side effects, return self."""
        if self._is_ok:
            f(cast(T, self._value))
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with Err value for side effects, return self."""
        if not self._is_ok:
            f(cast(E, self._value))
        return self

    # ─── Value Extraction ────────────────────────────────────────────

    def _err_message(self, prefix: str) -> str:
        body = f"{prefix}: {stringify(self._value)}"
        return f"{body}\n{self._trace}" if self._trace else body

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom panic message.

        Raises:
            UnwrapOnErr: "{msg}: {error}" followed by the origin trace
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapOnErr(self._err_message(msg), self._value, self._trace)

    def unwrap(self) -> T:
        """Extract Ok value, panic on Err.

        Raises:
            UnwrapOnErr: "Tried to unwrap Error: {error}" followed by the origin trace
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapOnErr(self._err_message("Tried to unwrap Error"), self._value, self._trace)

    def unwrap_or(self, default: U) -> T | U:
        """Extract Ok value or return default verbatim."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[E], U]) -> T | U:
        """Extract Ok value or compute from error via f."""
        return cast(T, self._value) if self._is_ok else f(cast(E, self._value))

    def expect_err(self, msg: str) -> E:
        """Extract Err value with custom panic message.

        Raises:
            UnwrapOnOk: "{msg}: {value}"
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapOnOk(f"{msg}: {stringify(self._value)}", self._value)

    def unwrap_err(self) -> E:
        """Extract Err value, panic on Ok.

        Raises:
            UnwrapOnOk: "Tried to unwrap Ok value: {value}"
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapOnOk(f"Tried to unwrap Ok value: {stringify(self._value)}", self._value)

    # ─── Chaining ────────────────────────────────────────────────────

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return other if self is Ok, otherwise self.

        Short-circuit AND. other is already built, so anything done while
        building it has happened regardless.
        """
        return other if self._is_ok else cast(Result[U, E], self)

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain operations that can fail.

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     return Ok(int(s)) if s.isdigit() else Err(f"invalid int: {s}")
            >>> Ok("42").and_then(parse_int).unwrap()
            42
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast(Result[U, E], self)

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for and_then."""
        return self.and_then(f)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return self if Ok, otherwise other. Short-circuit OR for fallbacks."""
        return cast(Result[T, F], self) if self._is_ok else other

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Chain alternative on Err. If Ok, passes through."""
        if not self._is_ok:
            return f(cast(E, self._value))
        return cast(Result[T, F], self)

    def flatten(self: Result[Result[U, E], E]) -> Result[U, E]:
        """Flatten nested Result: Result[Result[T, E], E] -> Result[T, E]"""
        if self._is_ok:
            return cast(Result[U, E], self._value)
        return cast(Result[U, E], self)

    # ─── Copying ─────────────────────────────────────────────────────

    def cloned(self) -> Result[T, E]:
        """Deep-copy the Ok value into a new Ok. Err is returned unchanged.

        Best effort: if the value cannot be deep-copied (locks, open files,
        generators) a warning is logged and self is returned.
        """
        if not self._is_ok:
            return self
        try:
            value = copy.deepcopy(self._value)
        except Exception as e:  # noqa: BLE001 - __deepcopy__ hooks may raise anything
            logger.warning("Failed to deep-copy Ok value %r: %s", self._value, e)
            return self
        return Result(value, _OK)

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(E, self._value))

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Ok."""
        return self._is_ok

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality on variant and payload."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[object]:
        """Iterate the elements of an iterable Ok value.

        Ok([1, 2]) yields 1 then 2; Ok(123) and any Err yield nothing. Text is
        treated as a single value, so Ok("ab") yields nothing either.
        """
        if self._is_ok:
            yield from iter_inner(self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure), capturing the caller's stack."""
    return Result(error, _ERR, capture_origin())


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: list[Result[T, E]]) -> Result[list[T], E]:
    """Convert list of Results to Result of list. Fails fast on first Err.

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)]).unwrap()
        [1, 2, 3]
        >>> sequence([Ok(1), Err("fail"), Ok(3)]).unwrap_err()
        'fail'
    """
    values: list[T] = []
    for result in results:
        if not result._is_ok:
            return cast(Result[list[T], E], result)
        values.append(cast(T, result._value))
    return Result(values, _OK)


def traverse(items: list[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items and collect into Result of list, stopping at the first Err."""
    values: list[U] = []
    for item in items:
        result = f(item)
        if not result._is_ok:
            return cast(Result[list[U], E], result)
        values.append(cast(U, result._value))
    return Result(values, _OK)


def collect_results(results: list[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating every error instead of failing fast."""
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if result._is_ok:
            values.append(cast(T, result._value))
        else:
            errors.append(cast(E, result._value))
    return Result(values, _OK) if not errors else Err(errors)
