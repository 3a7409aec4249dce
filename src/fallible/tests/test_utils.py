"""Tests for payload formatting and inner iteration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pytest

from fallible.monads.utils import iter_inner, stringify


class Color(Enum):
    RED = "red"


@dataclass
class Point:
    x: int
    y: int


class BrokenRepr:
    def __repr__(self) -> str:
        raise RuntimeError("no repr for you")


class BrokenInt(int):
    def __str__(self) -> str:
        raise RuntimeError("no str for you")


class MessageError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message, 500)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        (42, "42"),
        (1.5, "1.5"),
        (True, "True"),
        (None, "None"),
        (ValueError("bad input"), "bad input"),
        (ValueError(), "ValueError"),
        (MessageError("explicit"), "explicit"),
        ([1, "a"], "[1, 'a']"),
        ({"k": 1}, "{'k': 1}"),
        (Point(1, 2), "Point(x=1, y=2)"),
        (Color.RED, "Color.RED"),
    ],
)
def test_stringify(value: object, expected: str) -> None:
    assert stringify(value) == expected


def test_stringify_never_raises() -> None:
    assert stringify(BrokenRepr()) == "<BrokenRepr object>"
    assert stringify(BrokenInt(3)) == "<BrokenInt object>"


def test_iter_inner() -> None:
    assert list(iter_inner([1, 2])) == [1, 2]
    assert list(iter_inner({1})) == [1]
    assert list(iter_inner(5)) == []
    assert list(iter_inner("ab")) == []
    assert list(iter_inner(b"ab")) == []
    assert list(iter_inner(None)) == []


def test_iter_inner_include_text() -> None:
    assert list(iter_inner("ab", include_text=True)) == ["a", "b"]
    assert list(iter_inner(5, include_text=True)) == []
