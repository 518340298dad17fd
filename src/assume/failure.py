"""Failure objects raised by the assertion chain."""

from __future__ import annotations

import difflib
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from rich.pretty import pretty_repr

from assume.stack import StackFrame
from assume.types import undefined


DEFAULT_MESSAGE = "Assertion failed"


def build_diff(expected: Any, actual: Any) -> list[str]:
    """Line diff between the pretty renderings of ``expected`` and ``actual``."""
    expected_lines = pretty_repr(expected).splitlines()
    actual_lines = pretty_repr(actual).splitlines()
    return list(
        difflib.unified_diff(
            expected_lines,
            actual_lines,
            fromfile="expected",
            tofile="actual",
            lineterm="",
        )
    )


class Failure(BaseModel):
    """Structured description of a violated predicate.

    Attributes
    ----------
    message
        Caller supplied message, or the predicate's default message.
    stack
        Captured frames with the assertion machinery removed, innermost first.
    expectation
        Optional label describing what the predicate expected.
    stacktrace
        Whether the stack should be rendered with the message.
    actual
        The subject under test, present when diff data is enabled.
    expected
        The value the predicate compared against, when it has one.
    diff
        Unified diff lines of ``expected`` against ``actual``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    message: str = DEFAULT_MESSAGE
    stack: list[StackFrame] = Field(default_factory=list)
    expectation: str | None = None
    stacktrace: bool = True
    actual: Any = undefined
    expected: Any = undefined
    diff: list[str] | None = None

    @field_serializer("actual", "expected")
    def _repr_value(self, v: Any) -> str | None:
        return None if v is undefined else pretty_repr(v)

    @property
    def has_diff(self) -> bool:
        return self.expected is not undefined and self.actual is not undefined

    def render(self) -> str:
        """Plain text rendering used for the exception message."""
        parts = [self.message]
        if self.expectation and self.expectation != self.message:
            parts.append(f"Expectation: {self.expectation}")
        if self.stacktrace and self.stack:
            parts.append("Stack (most recent call first):")
            parts.extend(str(frame) for frame in self.stack)
        if self.diff:
            parts.extend(self.diff)
        return "\n".join(parts)


class AssertionFailure(AssertionError):
    """AssertionError with an attached :class:`Failure`."""

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__(failure.render())

    @property
    def message(self) -> str:
        return self.failure.message

    @property
    def stack(self) -> list[StackFrame]:
        return self.failure.stack

    @property
    def expectation(self) -> str | None:
        return self.failure.expectation

    @property
    def stacktrace(self) -> bool:
        return self.failure.stacktrace
