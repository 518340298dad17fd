"""Runtime type normalization shared by the predicates.

``type_name`` maps a value onto a small vocabulary of names so that
containers, dates, patterns and typed arrays are distinguishable instead of
collapsing to a generic "object".
"""

from __future__ import annotations

import array
import asyncio
import concurrent.futures
import datetime
import inspect
import numbers
import re
import types
from collections.abc import Mapping, Set
from typing import Any


# Kinds compared by value in strict equality. Everything else is compared by identity.
SCALAR_TYPES = frozenset({"number", "string", "boolean", "bytes", "null", "undefined"})

_ARRAY_FLOAT_NAMES = {"f": "float32array", "d": "float64array"}


class Undefined:
    """Sentinel for a value that was never provided."""

    _instance: "Undefined | None" = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "Undefined":
        return self

    def __reduce__(self) -> str:
        return "undefined"


undefined = Undefined()


def _typed_array_name(value: array.array) -> str:
    if value.typecode in _ARRAY_FLOAT_NAMES:
        return _ARRAY_FLOAT_NAMES[value.typecode]
    if value.typecode == "u":
        return "unicodearray"
    signed = value.typecode.islower()
    bits = value.itemsize * 8
    return f"{'' if signed else 'u'}int{bits}array"


def type_name(value: Any) -> str:
    """Return the normalized type name of ``value``."""
    if value is None:
        return "null"
    if value is undefined:
        return "undefined"
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bytes):
        return "bytes"
    if isinstance(value, bytearray):
        return "bytearray"
    if isinstance(value, memoryview):
        return "memoryview"
    if isinstance(value, array.array):
        return _typed_array_name(value)
    if isinstance(value, list):
        return "array"
    if isinstance(value, tuple):
        return "tuple"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, frozenset):
        return "frozenset"
    if isinstance(value, Set):
        return "set"
    # datetime before date: datetime is a date subclass
    if isinstance(value, datetime.datetime):
        return "datetime"
    if isinstance(value, datetime.date):
        return "date"
    if isinstance(value, datetime.timedelta):
        return "timedelta"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, BaseException):
        return "error"
    if isinstance(value, (asyncio.Future, concurrent.futures.Future)) or inspect.isawaitable(value):
        return "promise"
    if isinstance(value, type):
        return "class"
    if isinstance(value, (types.FunctionType, types.BuiltinFunctionType, types.MethodType)):
        return "function"
    if isinstance(value, types.ModuleType):
        return "module"
    return "instance"


def size(value: Any) -> int:
    """Return the size used by the numeric predicates for non-numbers.

    Mappings count their keys, sized values use ``len()``, anything else
    falls back to a numeric ``length`` attribute and finally to 0.
    """
    if isinstance(value, Mapping):
        return len(value.keys())
    try:
        return len(value)
    except TypeError:
        pass
    length = getattr(value, "length", None)
    if isinstance(length, bool) or not isinstance(length, (int, float)):
        return 0
    return int(length)


def amount(value: Any) -> Any:
    """The numeric view of ``value``: itself for numbers, its size otherwise."""
    return value if type_name(value) == "number" else size(value)


def ordered_amount(value: Any) -> Any:
    """Like :func:`amount`, but ``None`` for numbers without an ordering (complex)."""
    current = amount(value)
    if isinstance(current, numbers.Complex) and not isinstance(current, numbers.Real):
        return None
    return current


def strict_equal(a: Any, b: Any) -> bool:
    """Identity for containers and objects, value equality for scalars of one kind."""
    if a is b:
        return True
    kind = type_name(a)
    if kind != type_name(b) or kind not in SCALAR_TYPES:
        return False
    return bool(a == b)
