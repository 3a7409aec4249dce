"""Helpers shared by Option and Result: message formatting and inner iteration."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

# Text is iterable in Python; Result treats it as a single value
_SCALAR_TEXT: tuple[type, ...] = (str, bytes, bytearray)
_PLAIN: tuple[type, ...] = (bool, int, float, complex)


def stringify(value: object) -> str:
    """Render a payload for an unwrap failure message. Never raises."""
    if isinstance(value, str):
        return value
    try:
        if value is None or isinstance(value, _PLAIN):
            return str(value)
        if isinstance(value, BaseException):
            message = getattr(value, "message", None)
            if isinstance(message, str):
                return message
            return str(value) or type(value).__name__
        if type(value).__str__ is not object.__str__:
            return str(value)
        return repr(value)
    except Exception:  # noqa: BLE001
        return f"<{type(value).__name__} object>"


def iter_inner(value: object, *, include_text: bool = False) -> Iterator[object]:
    """Iterate the elements of value if it is iterable, else nothing.

    Text counts as a single value unless include_text is set.
    """
    if not isinstance(value, Iterable):
        return
    if not include_text and isinstance(value, _SCALAR_TEXT):
        return
    yield from value
