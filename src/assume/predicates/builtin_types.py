"""One type predicate per built-in kind (``expect([]).to.be.an.array()``).

The names are taken from ``type_name`` applied to a sample of each kind, so
the predicate family always agrees with ``a``/``an``.
"""

from __future__ import annotations

import array
import concurrent.futures
import datetime
import keyword
import re
import types
from typing import TYPE_CHECKING, Any

from assume.predicates.base import Verdict, predicate, verdict
from assume.types import type_name, undefined

if TYPE_CHECKING:
    from assume.chain import Chain


def _samples() -> list[Any]:
    return [
        "",
        0,
        True,
        [],
        (),
        {},
        types.MappingProxyType({}),
        set(),
        frozenset(),
        datetime.date(2000, 1, 1),
        datetime.datetime(2000, 1, 1),
        datetime.timedelta(),
        re.compile(""),
        Exception(),
        len,
        lambda: None,
        concurrent.futures.Future(),
        b"",
        bytearray(),
        memoryview(b""),
        *(array.array(code) for code in "bBhHiIlLqQfd"),
        None,
        undefined,
        object,
        types,
        object(),
    ]


# extra spellings for names that read badly as Python attributes
EXTRA_ALIASES: dict[str, tuple[str, ...]] = {
    "null": ("none",),
}


def builtin_type_names() -> list[str]:
    """Normalized names of every built-in kind, in registration order."""
    return list(dict.fromkeys(type_name(sample) for sample in _samples()))


def _make_typecheck(name: str):
    def typecheck(chain: Chain) -> Verdict:
        return verdict(chain, type_name(chain.subject) == name, f"be of type {name}")

    typecheck.__name__ = name
    typecheck.__doc__ = f"Assert the subject's normalized type is {name!r}."
    return typecheck


for _name in builtin_type_names():
    _aliases = [_name, *EXTRA_ALIASES.get(_name, ())]
    if keyword.iskeyword(_name):
        _aliases.append(f"{_name}_")
    predicate(_aliases)(_make_typecheck(_name))
