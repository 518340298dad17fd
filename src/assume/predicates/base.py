"""Verdicts and the predicate registration decorator."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict
from rich.pretty import pretty_repr

from assume.registry import PredicateFn, register
from assume.types import undefined

if TYPE_CHECKING:
    from assume.chain import Chain


class Verdict(BaseModel):
    """Raw outcome of a predicate, before negation is applied.

    Attributes
    ----------
    passed
        Boolean outcome of the check.
    message
        Default failure message, used when the caller gives none.
    expectation
        Short label of what was expected (``"to be above 5"``).
    expected
        Value the subject was compared against, used for diff data.

    Notes
    -----
    ``bool(verdict)`` is equivalent to ``verdict.passed``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    passed: bool
    message: str | None = None
    expectation: str | None = None
    expected: Any = undefined

    def __bool__(self) -> bool:
        return self.passed


def describe(value: Any, max_length: int = 60) -> str:
    """Short single-line repr of a value for messages."""
    text = pretty_repr(value, max_width=10_000)
    text = " ".join(text.split())
    return text if len(text) <= max_length else text[:max_length] + "..."


def verdict(chain: Chain, passed: Any, phrase: str, expected: Any = undefined) -> Verdict:
    """Build a verdict whose messages read ``Expected <subject> to [not] <phrase>``."""
    negated = bool(chain.flags.get("negate"))
    expectation = f"to not {phrase}" if negated else f"to {phrase}"
    # the subject is only rendered when the check is going to fail
    failing = bool(passed) is negated
    return Verdict(
        passed=bool(passed),
        message=f"Expected {describe(chain.subject)} {expectation}" if failing else None,
        expectation=expectation,
        expected=expected,
    )


def predicate(names: str | Iterable[str]) -> Callable[[PredicateFn], PredicateFn]:
    """Decorator registering a function as a chain predicate.

    Example:
        >>> @predicate("even, is_even")
        >>> def even(chain):
        >>>     return chain.subject % 2 == 0
        >>>
        >>> expect(4).to.be.even()
    """

    def decorator(fn: PredicateFn) -> PredicateFn:
        register(names, fn)
        return fn

    return decorator
