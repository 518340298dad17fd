"""Call stack capture for failure reports."""

from __future__ import annotations

import inspect
import linecache
import logging
from collections.abc import Callable, Sequence

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Frames belonging to the assertion machinery at the top of a captured
# stack: the collaborator, ``capture`` and the predicate dispatcher (or
# ``Chain.test`` when it captures for itself).
STACK_OFFSET = 3


class StackFrame(BaseModel):
    """A single captured call frame.

    Attributes
    ----------
    filename
        Path of the source file.
    lineno
        Line number being executed.
    function
        Name of the function owning the frame.
    line
        Source text of the line, empty when unavailable.
    """

    filename: str
    lineno: int
    function: str
    line: str = ""

    def __str__(self) -> str:
        text = f'  File "{self.filename}", line {self.lineno}, in {self.function}'
        if self.line:
            text += f"\n    {self.line}"
        return text


StackCapture = Callable[[], Sequence[StackFrame]]


def frame_stack() -> list[StackFrame]:
    """Capture the current call stack, innermost frame first.

    The first frame is this function's own frame.
    """
    frame = inspect.currentframe()

    if frame is None:
        logger.warning("No frame found, failure will carry an empty stack")
        return []

    frames: list[StackFrame] = []
    while frame:
        code = frame.f_code
        frames.append(
            StackFrame(
                filename=code.co_filename,
                lineno=frame.f_lineno,
                function=code.co_name,
                line=linecache.getline(code.co_filename, frame.f_lineno).strip(),
            )
        )
        frame = frame.f_back
    return frames


_capture: StackCapture = frame_stack


def capture() -> list[StackFrame]:
    """Capture the stack with the installed collaborator.

    Collaborators return frames innermost first, starting with their own
    frame, which keeps the result aligned with :data:`STACK_OFFSET`.
    """
    return list(_capture())


def set_stack_capture(fn: StackCapture | None) -> StackCapture:
    """Replace the stack-capture function, ``None`` restores the default.

    Returns the previously installed function.
    """
    global _capture
    previous = _capture
    _capture = fn if fn is not None else frame_stack
    return previous


def trim(stack: Sequence[StackFrame], offset: int = STACK_OFFSET) -> list[StackFrame]:
    """Drop the leading machinery frames; short stacks trim to empty."""
    return list(stack[offset:])
