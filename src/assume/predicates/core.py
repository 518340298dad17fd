"""Built-in predicates.

Every predicate receives the chain first and returns a :class:`Verdict`;
negation, messages and raising are handled by ``Chain.test``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from assume import deep
from assume.predicates.base import Verdict, describe, predicate, verdict
from assume.types import ordered_amount, size, strict_equal, type_name, undefined

if TYPE_CHECKING:
    from assume.chain import Chain


def _article(name: str) -> str:
    return "an" if name[:1].lower() in "aeiou" else "a"


def _has_key(mapping: Mapping, key: Any) -> bool:
    try:
        return key in mapping
    except TypeError:
        # unhashable keys can never be present
        return False


def _slot_names(cls: type) -> set[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        names.update((slots,) if isinstance(slots, str) else slots)
    return names


@predicate("a, an")
def typecheck(chain: Chain, of: str) -> Verdict:
    """Assert the normalized type name of the subject."""
    return verdict(chain, type_name(chain.subject) == of, f"be {_article(of)} {of}")


@predicate("instance_of, instanceof, inherits, inherit")
def instance_of(chain: Chain, cls: type | tuple[type, ...]) -> Verdict:
    """Assert the subject is an instance of ``cls``."""
    label = cls.__name__ if isinstance(cls, type) else describe(cls)
    return verdict(chain, isinstance(chain.subject, cls), f"be an instance of {label}")


@predicate("include, includes, contain, contains")
def contain(chain: Chain, val: Any) -> Verdict:
    """Assert the subject contains ``val``.

    Lists and tuples are scanned for a strictly equal element, mappings are
    checked for the key, strings and bytes for the substring. Any other
    subject does not contain anything.
    """
    value = chain.subject
    kind = type_name(value)

    if kind in ("array", "tuple"):
        includes = any(strict_equal(val, item) for item in value)
    elif isinstance(value, Mapping):
        includes = _has_key(value, val)
    elif kind == "string":
        includes = isinstance(val, str) and val in value
    elif kind in ("bytes", "bytearray"):
        includes = isinstance(val, (bytes, bytearray, int)) and val in value
    else:
        includes = False

    return verdict(chain, includes, f"include {describe(val)}")


@predicate("ok, truthy, truly")
def ok(chain: Chain) -> Verdict:
    return verdict(chain, bool(chain.subject), "be truthy")


@predicate("true")
def is_true(chain: Chain) -> Verdict:
    return verdict(chain, chain.subject is True, "be True")


@predicate("false")
def is_false(chain: Chain) -> Verdict:
    return verdict(chain, chain.subject is False, "be False")


@predicate("falsely, falsey, falsy")
def falsy(chain: Chain) -> Verdict:
    return verdict(chain, not chain.subject, "be falsy")


@predicate("exists")
def exists(chain: Chain) -> Verdict:
    """Assert the subject is neither None nor undefined."""
    return verdict(chain, chain.subject is not None and chain.subject is not undefined, "exist")


@predicate("empty")
def empty(chain: Chain) -> Verdict:
    """Assert the subject has no items, keys or characters."""
    return verdict(chain, size(chain.subject) == 0, "be empty")


@predicate("above, gt, greater, greater_than")
def above(chain: Chain, value: float) -> Verdict:
    current = ordered_amount(chain.subject)
    return verdict(chain, current is not None and current > value, f"be above {value!r}")


@predicate("least, gte")
def least(chain: Chain, value: float) -> Verdict:
    current = ordered_amount(chain.subject)
    return verdict(chain, current is not None and current >= value, f"be at least {value!r}")


@predicate("below, lt, less, less_than")
def below(chain: Chain, value: float) -> Verdict:
    current = ordered_amount(chain.subject)
    return verdict(chain, current is not None and current < value, f"be below {value!r}")


@predicate("most, lte")
def most(chain: Chain, value: float) -> Verdict:
    current = ordered_amount(chain.subject)
    return verdict(chain, current is not None and current <= value, f"be at most {value!r}")


@predicate("within, between")
def within(chain: Chain, start: float, finish: float) -> Verdict:
    """Assert ``start <= subject <= finish``, using the size of non-numbers."""
    current = ordered_amount(chain.subject)
    return verdict(chain, current is not None and start <= current <= finish, f"be within {start!r}..{finish!r}")


@predicate("has_own, own, own_property, have_own_property")
def has_own(chain: Chain, prop: Any) -> Verdict:
    """Assert the subject holds ``prop`` itself.

    Mappings are checked for the key; other objects for an instance
    attribute (``__dict__`` entry or assigned slot), not a class attribute.
    """
    value = chain.subject
    if isinstance(value, Mapping):
        owned = _has_key(value, prop)
    elif not isinstance(prop, str):
        owned = False
    elif prop in getattr(value, "__dict__", {}):
        owned = True
    else:
        owned = prop in _slot_names(type(value)) and hasattr(value, prop)
    return verdict(chain, owned, f"have own property {prop!r}")


@predicate("equal, equals, eq")
def equal(chain: Chain, thing: Any) -> Verdict:
    """Assert strict equality, or deep equality on a ``deep`` chain.

    Strict equality is identity, except for scalars (numbers, strings,
    bytes, booleans, None) of the same kind, which compare by value.
    """
    if chain.flags.get("deep"):
        return verdict(chain, deep.equal(chain.subject, thing), f"deeply equal {describe(thing)}", thing)
    return verdict(chain, strict_equal(chain.subject, thing), f"equal {describe(thing)}", thing)


@predicate("eql, eqls")
def eql(chain: Chain, thing: Any) -> Verdict:
    """Assert deep equality regardless of the ``deep`` flag."""
    return verdict(chain, deep.equal(chain.subject, thing), f"deeply equal {describe(thing)}", thing)


@predicate("length, lengthof, size")
def length(chain: Chain, expected: int) -> Verdict:
    """Assert the size of the subject (keys for mappings)."""
    return verdict(chain, size(chain.subject) == expected, f"have a size of {expected!r}")


@predicate("match, matches")
def match(chain: Chain, pattern: str | re.Pattern) -> Verdict:
    """Assert a string subject matches ``pattern`` anywhere."""
    value = chain.subject
    matched = isinstance(value, str) and re.search(pattern, value) is not None
    source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
    return verdict(chain, matched, f"match /{source}/")


@predicate("approximately, close_to")
def approximately(chain: Chain, expected: float, delta: float) -> Verdict:
    """Assert a number lies within ``delta`` of ``expected``."""
    value = chain.subject
    close = type_name(value) == "number" and not isinstance(value, complex) and math.isclose(value, expected, rel_tol=0.0, abs_tol=delta)
    return verdict(chain, close, f"be within {delta!r} of {expected!r}")


@predicate("throw, throws, raises")
def throws(chain: Chain, expected: Any = None) -> Verdict:
    """Assert that calling the subject raises.

    ``expected`` narrows the check: an exception class must match with
    ``isinstance``, a string must appear in the message, a compiled pattern
    must match the message.
    """
    fn = chain.subject
    if not callable(fn):
        return verdict(chain, False, "be a callable that raises")

    try:
        fn()
    except Exception as exc:
        if expected is None:
            passed = True
        elif isinstance(expected, type):
            passed = isinstance(exc, expected)
        elif isinstance(expected, re.Pattern):
            passed = expected.search(str(exc)) is not None
        else:
            passed = str(expected) in str(exc)
    else:
        passed = False

    label = "raise" if expected is None else f"raise {getattr(expected, '__name__', None) or describe(expected)}"
    return verdict(chain, passed, label)
