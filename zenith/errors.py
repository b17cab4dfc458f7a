"""Engine errors that carry the stack at which they were raised."""

from __future__ import annotations

import traceback

__all__ = ["ZenithError", "AssertionFailure", "zth_assert"]


class ZenithError(RuntimeError):
    """Runtime error remembering the call stack at its creation.

    ``skip`` leaves out that many of the innermost caller frames.
    """

    def __init__(self, message: str, skip: int = 0):
        super().__init__(message)
        frames = traceback.extract_stack()
        drop = 1 + max(0, skip)
        self._frames = frames[:-drop] if drop < len(frames) else []

    def stacktrace(self) -> str:
        """Return the recorded call stack as text."""
        return "".join(traceback.format_list(self._frames))


class AssertionFailure(ZenithError, AssertionError):
    """Raised when an engine assertion does not hold."""


def zth_assert(condition, expression: str = "") -> None:
    """Raise :class:`AssertionFailure` naming ``expression`` if ``condition`` is false."""
    if condition:
        return
    caller = traceback.extract_stack(limit=2)[0]
    message = (
        f"{caller.filename}({caller.lineno}) `{caller.name}`:\n"
        f"Assertion failed: ({expression})"
    )
    raise AssertionFailure(message, skip=1)