"""Kernel security – attribute conditions.

Conditions restrict a grant to subject instances whose attributes satisfy a
small, closed set of comparisons.  There is no expression language: a rule
can only say "attribute equals / differs from / is one of / is none of".

Example::

    builder.can("update", "InstrumentData", {"tenant_id": principal.tenant_id})
    builder.can("read", "Invite", {"owner_id": Ne(principal.id)})
"""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping, Union


@dataclasses.dataclass(frozen=True, slots=True)
class Eq:
    value: Any

    def test(self, actual: Any) -> bool:
        return actual == self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Ne:
    value: Any

    def test(self, actual: Any) -> bool:
        return actual != self.value


@dataclasses.dataclass(frozen=True, slots=True)
class In:
    values: frozenset[Any]

    def __init__(self, values: Iterable[Any]) -> None:
        object.__setattr__(self, "values", frozenset(values))

    def test(self, actual: Any) -> bool:
        return actual in self.values


@dataclasses.dataclass(frozen=True, slots=True)
class NotIn:
    values: frozenset[Any]

    def __init__(self, values: Iterable[Any]) -> None:
        object.__setattr__(self, "values", frozenset(values))

    def test(self, actual: Any) -> bool:
        return actual not in self.values


Condition = Union[Eq, Ne, In, NotIn]

_CONDITION_TYPES = (Eq, Ne, In, NotIn)

# Sentinel for attributes the instance does not carry.
_MISSING = object()


Conditions = tuple[tuple[str, Condition], ...]


def normalize_conditions(raw: Mapping[str, Any]) -> Conditions:
    """Return ``(attribute, Condition)`` pairs sorted by attribute name.

    Plain values are shorthand for :class:`Eq` and must be hashable; use
    :class:`In` to match against several values.
    """
    if not raw:
        raise ValueError("conditions must name at least one attribute")
    normalized: dict[str, Condition] = {}
    for attribute, spec in raw.items():
        if not isinstance(attribute, str) or not attribute:
            raise ValueError(f"condition attribute must be a non-empty string, got {attribute!r}")
        condition = spec if isinstance(spec, _CONDITION_TYPES) else Eq(spec)
        try:
            hash(condition)
        except TypeError:
            raise ValueError(
                f"condition value for {attribute!r} must be hashable, got {spec!r}; "
                "use In(...) for several values"
            ) from None
        normalized[attribute] = condition
    return tuple(sorted(normalized.items(), key=lambda item: item[0]))


def conditions_hold(conditions: Conditions, instance: Any) -> bool:
    """Conjunction of *conditions* over *instance*'s attributes.

    An attribute the instance does not carry fails its condition.
    """
    for attribute, condition in conditions:
        actual = getattr(instance, attribute, _MISSING)
        if actual is _MISSING or not condition.test(actual):
            return False
    return True


__all__ = [
    "Condition",
    "Conditions",
    "Eq",
    "In",
    "Ne",
    "NotIn",
    "conditions_hold",
    "normalize_conditions",
]
