"""Adapter turning exception-raising callables into Result-returning ones."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar, overload

from .result import Err, Ok, Result
from .trace import mark_internal

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")

mark_internal(__file__)


def _default_error(exc: Exception) -> object:
    """Exception message if it carries one, else the exception itself."""
    message = getattr(exc, "message", None)
    if isinstance(message, str):
        return message
    return str(exc) if exc.args else exc


@overload
def wrap(func: Callable[P, T], error_transform: Callable[[Exception], E] | None = None) -> Callable[P, Result[T, Any]]: ...

@overload
def wrap(
    func: None = None,
    error_transform: Callable[[Exception], E] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]: ...


def wrap(
    func: Callable[P, T] | None = None,
    error_transform: Callable[[Exception], E] | None = None,
) -> Callable[P, Result[T, Any]] | Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]:
    """Wrap func so it returns Ok(return_value) or Err(failure) instead of raising.

    Without error_transform, a raised exception becomes Err(message) when it
    carries a message, even an empty one, and Err(exception) when raised
    without arguments. KeyboardInterrupt, SystemExit and other
    non-Exception BaseExceptions propagate.

    Example:
        >>> safe_int = wrap(int)
        >>> safe_int("42")
        Ok(42)
        >>> safe_int("x").err()
        "invalid literal for int() with base 10: 'x'"

        >>> @wrap(error_transform=type)
        ... def parse(s: str) -> float:
        ...     return float(s)
        >>> parse("nan?").err()
        <class 'ValueError'>
    """
    def decorator(fn: Callable[P, T]) -> Callable[P, Result[T, Any]]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Any]:
            try:
                value = fn(*args, **kwargs)
            except Exception as e:
                return Err(error_transform(e) if error_transform else _default_error(e))
            return Ok(value)
        return wrapper

    return decorator(func) if func is not None else decorator
