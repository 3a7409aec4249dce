"""Origin-trace capture for Err values.

An Err records where it was created, not where it was unwrapped. The trace is
taken once at construction, with the library's own frames stripped so the
first line always names the code that produced the failure.
"""

from __future__ import annotations

import os
import traceback

from fallible.config import get_settings

# Files whose frames belong to construction machinery; populated by mark_internal()
_INTERNAL_FILES: set[str] = set()


def mark_internal(path: str) -> None:
    """Register a module file whose innermost frames are dropped from traces."""
    _INTERNAL_FILES.add(os.path.normcase(os.path.abspath(path)))


mark_internal(__file__)


def _is_internal(frame: traceback.FrameSummary) -> bool:
    return os.path.normcase(os.path.abspath(frame.filename)) in _INTERNAL_FILES


def capture_origin() -> str:
    """Snapshot the caller's stack as text, most recent call first.

    Returns an empty string when capture is disabled via FALLIBLE_TRACE_ENABLED.
    """
    settings = get_settings().trace
    if not settings.enabled:
        return ""

    frames = traceback.extract_stack()
    end = len(frames)
    while end and _is_internal(frames[end - 1]):
        end -= 1

    caller_first = frames[:end][::-1]
    if settings.limit is not None:
        caller_first = caller_first[: settings.limit]
    return "".join(traceback.format_list(caller_first)).rstrip("\n")
