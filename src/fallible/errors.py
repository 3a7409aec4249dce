"""Failures raised when a container is forced open on the wrong variant.

Combinators never raise on their own account. These exceptions are the only
way an Option or Result turns back into exception-based control flow, and
only when the caller explicitly asks for it via unwrap()/expect().
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Standard codes for unwrap failures."""
    INVALID_UNWRAP = "INVALID_UNWRAP"
    UNWRAP_ON_ERR = "UNWRAP_ON_ERR"
    UNWRAP_ON_OK = "UNWRAP_ON_OK"


class UnwrapError(RuntimeError):
    """Base for all unwrap failures. Subclasses RuntimeError so plain panics still match."""

    code: ErrorCode


class InvalidUnwrap(UnwrapError):
    """Option.unwrap() or Option.expect() called on Nothing."""

    code = ErrorCode.INVALID_UNWRAP


class UnwrapOnErr(UnwrapError):
    """Result.unwrap() or Result.expect() called on Err.

    The message already embeds the origin trace; `error` and `trace` are kept
    for callers that want them separately.
    """

    __slots__ = ("error", "trace")
    code = ErrorCode.UNWRAP_ON_ERR

    def __init__(self, message: str, error: object, trace: str = "") -> None:
        self.error = error
        self.trace = trace
        super().__init__(message)


class UnwrapOnOk(UnwrapError):
    """Result.unwrap_err() or Result.expect_err() called on Ok."""

    __slots__ = ("value",)
    code = ErrorCode.UNWRAP_ON_OK

    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)
