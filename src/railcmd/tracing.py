"""Source locations for outcomes, taken from exception tracebacks."""

from __future__ import annotations

import inspect
import traceback
from typing import Any, Callable, Optional


def _format(filename: str, lineno: Optional[int], name: str) -> str:
    return f"{filename}:{lineno}:in {name}"


def frame_at(error: BaseException, depth: int = 0) -> Optional[str]:
    """
    Location of the traceback frame `depth` levels out from where `error` was raised.

    depth=0 is the raise site, depth=1 its caller, and so on.
    Returns None when the traceback is shorter than that.
    """
    frames = traceback.extract_tb(error.__traceback__)
    if len(frames) <= depth:
        return None
    frame = frames[-1 - depth]
    return _format(frame.filename, frame.lineno, frame.name)


def innermost_frame(error: BaseException) -> Optional[str]:
    return frame_at(error, 0)


def calling_location(depth: int = 1) -> Optional[str]:
    """Location of the caller `depth` frames above the function calling this one."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return _format(frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name)
    finally:
        del frame


def frame_running(error: BaseException, func: Callable[..., Any]) -> Optional[str]:
    """Innermost traceback frame of `error` that was executing `func`."""
    code = getattr(func, "__code__", None)
    location = None
    for frame, lineno in traceback.walk_tb(error.__traceback__):
        if frame.f_code is code:
            location = _format(code.co_filename, lineno, code.co_name)
    return location


def definition_location(func: Callable[..., Any]) -> Optional[str]:
    """Where `func` is defined, as `<file>:<first line>:in <name>`."""
    code = getattr(func, "__code__", None)
    if code is None:
        return None
    return _format(code.co_filename, code.co_firstlineno, code.co_name)
