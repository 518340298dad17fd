"""Predicates available on every chain.

Importing this package registers the built-in predicates.
"""

from assume.predicates import builtin_types, core
from assume.predicates.base import Verdict, describe, predicate, verdict
from assume.predicates.builtin_types import builtin_type_names

__all__ = [
    "Verdict",
    "builtin_type_names",
    "builtin_types",
    "core",
    "describe",
    "predicate",
    "verdict",
]
