"""Process-wide registries of predicates, modifiers and linking words.

The registries are filled at import time by the built-in predicates and may
be extended afterwards. Nothing is ever removed; registering a name again
replaces the previous entry.
"""

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

_SPLIT = re.compile(r"[\s,|]+")

PredicateFn = Callable[..., Any]


def split_aliases(names: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize ``"a, an"`` style alias lists into a tuple of names."""
    if isinstance(names, str):
        names = _SPLIT.split(names)
    return tuple(name for name in (n.strip() for n in names) if name)


def _positional_arity(fn: PredicateFn) -> int | None:
    """Number of positional arguments ``fn`` takes after the chain.

    ``None`` when it accepts ``*args``.
    """
    params = list(inspect.signature(fn).parameters.values())[1:]
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return None
    return sum(
        1
        for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    )


@dataclass(frozen=True)
class PredicateDef:
    """Definition of a registered predicate."""

    name: str
    fn: PredicateFn
    aliases: tuple[str, ...]
    arity: int | None


@dataclass(frozen=True)
class ModifierDef:
    """Definition of a registered modifier flag.

    Involutive modifiers cancel when repeated (``not_.not_``), the others are
    idempotent (``deep.deep``).
    """

    name: str
    aliases: tuple[str, ...]
    involutive: bool = False


@dataclass
class Registry:
    """Lookup tables consulted by every chain."""

    predicates: dict[str, PredicateDef] = field(default_factory=dict)
    modifiers: dict[str, ModifierDef] = field(default_factory=dict)
    modifier_aliases: dict[str, str] = field(default_factory=dict)
    linking_words: set[str] = field(default_factory=set)

    def names(self) -> set[str]:
        return set(self.predicates) | set(self.modifier_aliases) | self.linking_words


_registry = Registry()


def get_registry() -> Registry:
    """Get the global registry."""
    return _registry


def snapshot_registry() -> Registry:
    """Copy the current registry tables."""
    return Registry(
        predicates=dict(_registry.predicates),
        modifiers=dict(_registry.modifiers),
        modifier_aliases=dict(_registry.modifier_aliases),
        linking_words=set(_registry.linking_words),
    )


def restore_registry(snapshot: Registry) -> None:
    """Reset the registry tables to a snapshot taken earlier."""
    for table in ("predicates", "modifiers", "modifier_aliases", "linking_words"):
        current = getattr(_registry, table)
        current.clear()
        current.update(getattr(snapshot, table))


def register(names: str | Iterable[str], fn: PredicateFn) -> PredicateDef:
    """Register ``fn`` as a predicate under every name in ``names``.

    ``fn`` is called as ``fn(chain, *args)`` and returns a verdict: a bool or
    a :class:`~assume.predicates.base.Verdict`.
    """
    aliases = split_aliases(names)
    if not aliases:
        raise ValueError("At least one predicate name is required")

    defn = PredicateDef(name=aliases[0], fn=fn, aliases=aliases, arity=_positional_arity(fn))
    for alias in aliases:
        if alias in _registry.predicates:
            logger.debug("Predicate %r re-registered, replacing %r", alias, _registry.predicates[alias].name)
        _registry.predicates[alias] = defn
    return defn


def get_predicate(name: str) -> PredicateDef | None:
    return _registry.predicates.get(name)


def register_modifier(name: str, aliases: str | Iterable[str], *, involutive: bool = False) -> ModifierDef:
    """Register a modifier flag reachable through ``aliases`` on every chain."""
    defn = ModifierDef(name=name, aliases=split_aliases(aliases), involutive=involutive)
    _registry.modifiers[name] = defn
    for alias in defn.aliases:
        _registry.modifier_aliases[alias] = name
    return defn


def get_modifier(alias: str) -> ModifierDef | None:
    """Resolve a modifier alias (``"dont"``) to its definition."""
    name = _registry.modifier_aliases.get(alias)
    return None if name is None else _registry.modifiers[name]


def register_linking_words(words: str | Iterable[str]) -> tuple[str, ...]:
    """Register no-op words that continue a chain unchanged."""
    added = split_aliases(words)
    _registry.linking_words.update(added)
    return added


def is_linking_word(name: str) -> bool:
    return name in _registry.linking_words


def modifier_names() -> tuple[str, ...]:
    return tuple(_registry.modifiers)


register_modifier("negate", "not_, not, dont, doesnt", involutive=True)
register_modifier("deep", "deep")

register_linking_words(
    "to, be, been, is_, is, and_, and, has, have, with_, with, that, which, at, of, same, does"
)
