"""Structural equality collaborator.

``equal(a, b)`` is the verdict used by ``eql`` and ``deep.equal``. The
function in use can be replaced with :func:`set_deep_equal`.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable, Mapping, Set
from typing import Any

from pydantic import BaseModel

from assume.types import type_name


DeepEqual = Callable[[Any, Any], bool]


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _as_structure(value: Any) -> Any:
    """Unwrap models and dataclass instances into plain mappings."""
    if isinstance(value, BaseModel):
        return type(value), value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return type(value), {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return None


def structural_equal(a: Any, b: Any, _seen: set[tuple[int, int]] | None = None) -> bool:
    """Compare two values by structure.

    NaN equals NaN, containers are compared element-wise and must have the
    same normalized kind, models and dataclasses must share a class.
    Reference cycles are treated as equal once both sides revisit a pair.
    """
    if a is b:
        return True
    if _is_nan(a) and _is_nan(b):
        return True

    kind = type_name(a)
    if kind != type_name(b):
        return False

    seen = _seen if _seen is not None else set()
    key = (id(a), id(b))
    if key in seen:
        return True

    wrapped_a, wrapped_b = _as_structure(a), _as_structure(b)
    if wrapped_a is not None or wrapped_b is not None:
        if wrapped_a is None or wrapped_b is None or wrapped_a[0] is not wrapped_b[0]:
            return False
        seen.add(key)
        return structural_equal(wrapped_a[1], wrapped_b[1], seen)

    if isinstance(a, Mapping):
        if a.keys() != b.keys():
            return False
        seen.add(key)
        return all(structural_equal(a[k], b[k], seen) for k in a)

    if isinstance(a, Set):
        return a == b

    if isinstance(a, (list, tuple)) or kind.endswith("array"):
        if len(a) != len(b):
            return False
        seen.add(key)
        return all(structural_equal(x, y, seen) for x, y in zip(a, b))

    if kind == "error":
        return type(a) is type(b) and a.args == b.args

    return bool(a == b)


_deep_equal: DeepEqual = structural_equal


def equal(a: Any, b: Any) -> bool:
    """Return the deep-equality verdict for ``a`` and ``b``."""
    return bool(_deep_equal(a, b))


def set_deep_equal(fn: DeepEqual | None) -> DeepEqual:
    """Replace the deep-equality function, ``None`` restores the default.

    Returns the previously installed function.
    """
    global _deep_equal
    previous = _deep_equal
    _deep_equal = fn if fn is not None else structural_equal
    return previous
