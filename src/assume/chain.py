"""Assertion chains.

A chain carries a subject and a set of modifier flags. Attribute access
resolves against the registries: modifier aliases (``not_``, ``deep``) give a
chain with the flag set, linking words (``to``, ``be``) give an unchanged
continuation and predicate names give methods that check the subject.

Example:
    >>> expect([1, 2, 3]).to.include(2)
    >>> expect(5).to.not_.be.above(10)
    >>> expect({"a": [1]}).to.deep.equal({"a": [1]})
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextvars import ContextVar
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from assume import config, registry
from assume.failure import DEFAULT_MESSAGE, AssertionFailure, Failure, build_diff
from assume.predicates.base import Verdict
from assume.stack import StackFrame, capture, trim
from assume.types import undefined

logger = logging.getLogger(__name__)


@dataclass
class PredicateCall:
    """State of the predicate call currently being dispatched.

    Attributes
    ----------
    stack
        Stack captured by the dispatcher before the predicate ran.
    msg
        Caller supplied failure message, if any.
    resolved
        Set once the predicate judged its own verdict through ``Chain.test``.
    """

    stack: list[StackFrame]
    msg: str | None = None
    resolved: bool = False


PREDICATE_CALL: ContextVar[PredicateCall | None] = ContextVar("predicate_call", default=None)


def _normalize_flags(flags: Mapping[str, Any] | None) -> MappingProxyType:
    merged = {name: False for name in registry.modifier_names()}
    if flags:
        merged.update({name: bool(value) for name, value in flags.items()})
    return MappingProxyType(merged)


class Chain:
    """Immutable assertion object for a single subject.

    Attributes
    ----------
    subject
        The value under test.
    flags
        Read-only mapping of modifier name to bool (``negate``, ``deep``, ...).
    include_stack
        Whether failures attach a rendered stack trace.
    include_diff
        Whether failures attach expected/actual diff data.
    raises
        ``False`` for quiet chains, whose predicates return a bool instead of
        raising.
    """

    __slots__ = ("subject", "flags", "include_stack", "include_diff", "raises", "_modifiers", "_methods")

    def __init__(
        self,
        subject: Any,
        flags: Mapping[str, Any] | None = None,
        *,
        include_stack: bool | None = None,
        include_diff: bool | None = None,
        raises: bool = True,
    ) -> None:
        settings = config.get_settings()
        _set = object.__setattr__
        _set(self, "subject", subject)
        _set(self, "flags", _normalize_flags(flags))
        _set(self, "include_stack", settings.include_stack if include_stack is None else bool(include_stack))
        _set(self, "include_diff", settings.include_diff if include_diff is None else bool(include_diff))
        _set(self, "raises", bool(raises))
        # accessor caches; keyed by canonical modifier name and predicate alias
        _set(self, "_modifiers", {})
        _set(self, "_methods", {})

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Chain is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Chain is immutable, cannot delete {name!r}")

    def __repr__(self) -> str:
        active = ", ".join(name for name, value in self.flags.items() if value)
        return f"<Chain subject={self.subject!r} flags=[{active}]>"

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | registry.get_registry().names())

    def __getattr__(self, name: str) -> Any:
        # private and dunder lookups never resolve against the registries
        if name.startswith("_"):
            raise AttributeError(name)

        modifier = registry.get_modifier(name)
        if modifier is not None:
            return self._modified(modifier)

        if registry.is_linking_word(name):
            return self._derive(self.flags)

        defn = registry.get_predicate(name)
        if defn is not None:
            method = self._methods.get(name)
            if method is None or method.definition is not defn:
                method = self._bind(defn)
                self._methods[name] = method
            return method

        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    @property
    def quietly(self) -> Chain:
        """Continuation whose predicates return ``True``/``False`` instead of raising."""
        return self._derive(self.flags, raises=False)

    def _derive(self, flags: Mapping[str, Any], *, raises: bool | None = None) -> Chain:
        return Chain(
            self.subject,
            flags,
            include_stack=self.include_stack,
            include_diff=self.include_diff,
            raises=self.raises if raises is None else raises,
        )

    def _modified(self, modifier: registry.ModifierDef) -> Chain:
        cached = self._modifiers.get(modifier.name)
        if cached is not None:
            return cached

        if self.flags.get(modifier.name) and not modifier.involutive:
            target = self
        else:
            target = self._derive({**self.flags, modifier.name: not self.flags.get(modifier.name)})
            logger.debug("Synthesized %r chain for %r", modifier.name, self.subject)
            if modifier.involutive:
                # repeating the modifier leads straight back here
                target._modifiers[modifier.name] = self

        self._modifiers[modifier.name] = target
        return target

    def _bind(self, defn: registry.PredicateDef) -> Callable[..., Any]:
        chain = self

        def dispatch(*args: Any, msg: str | None = None, **kwargs: Any) -> Any:
            if defn.arity is not None and len(args) == defn.arity + 1:
                *args, msg = args
            call = PredicateCall(stack=capture(), msg=msg)
            token = PREDICATE_CALL.set(call)
            try:
                result = defn.fn(chain, *args, **kwargs)
            finally:
                PREDICATE_CALL.reset(token)
            # predicates that called ``test`` themselves already hold the outcome
            if call.resolved or isinstance(result, Chain):
                return result
            return chain._resolve(result, msg, call.stack)

        dispatch.__name__ = defn.name
        dispatch.__qualname__ = f"Chain.{defn.name}"
        dispatch.__doc__ = defn.fn.__doc__
        dispatch.definition = defn  # type: ignore[attr-defined]
        return dispatch

    def _resolve(self, result: Any, msg: str | None, stack: list[StackFrame]) -> Any:
        if isinstance(result, Verdict):
            return self._judge(
                result.passed,
                msg or result.message,
                result.expectation,
                stack,
                expected=result.expected,
            )
        return self._judge(bool(result), msg, None, stack)

    def test(
        self,
        passed: bool,
        msg: str | None = None,
        expectation: str | None = None,
        stack: list[StackFrame] | None = None,
        *,
        expected: Any = undefined,
    ) -> Any:
        """Apply the chain's flags to a raw verdict.

        Parameters
        ----------
        passed : bool
            Raw outcome of the predicate.
        msg : str or None
            Failure message; defaults to the expectation label.
        expectation : str or None
            What the predicate expected, attached to the failure.
        stack : list[StackFrame] or None
            Stack to attach on failure. Inside a predicate it defaults to the
            stack captured by the dispatcher, elsewhere it is captured here.
        expected : Any
            Value compared against, used for diff data.

        Returns
        -------
        Chain or bool
            The chain itself on success, or a bool for quiet chains.

        Raises
        ------
        AssertionFailure
            If the (possibly negated) verdict is false.
        """
        call = PREDICATE_CALL.get()
        if call is not None:
            call.resolved = True
            msg = call.msg or msg
            if stack is None:
                stack = call.stack
        elif stack is None:
            stack = capture()
        return self._judge(passed, msg, expectation, stack, expected=expected)

    def _judge(
        self,
        passed: bool,
        msg: str | None,
        expectation: str | None,
        stack: list[StackFrame],
        *,
        expected: Any = undefined,
    ) -> Any:
        negated = bool(self.flags.get("negate"))
        if negated:
            passed = not passed
        if passed:
            return self if self.raises else True
        if not self.raises:
            return False

        diff: dict[str, Any] = {}
        if self.include_diff and expected is not undefined and not negated:
            diff = {
                "actual": self.subject,
                "expected": expected,
                "diff": build_diff(expected, self.subject),
            }

        raise AssertionFailure(
            Failure(
                message=msg or expectation or DEFAULT_MESSAGE,
                stack=trim(stack),
                expectation=expectation,
                stacktrace=self.include_stack,
                **diff,
            )
        )


def new_chain(
    subject: Any,
    flags: Mapping[str, Any] | None = None,
    *,
    include_stack: bool | None = None,
    include_diff: bool | None = None,
    **modifiers: Any,
) -> Chain:
    """Create a root chain for ``subject``.

    Modifier flags may be given as a mapping, as keywords, or both
    (``new_chain(x, negate=True)``); values are coerced with ``bool``.
    """
    merged = {**(flags or {}), **modifiers}
    # chain options may ride along in the flags mapping
    stack_option = merged.pop("include_stack", None)
    diff_option = merged.pop("include_diff", None)
    return Chain(
        subject,
        merged,
        include_stack=stack_option if include_stack is None else include_stack,
        include_diff=diff_option if include_diff is None else include_diff,
    )


def holds(subject: Any, flags: Mapping[str, Any] | None = None, **modifiers: Any) -> Chain:
    """Create a quiet chain: predicates return ``True``/``False`` instead of raising."""
    return new_chain(subject, flags, **modifiers).quietly
