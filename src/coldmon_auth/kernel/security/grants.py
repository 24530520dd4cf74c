"""Kernel security – grants and the grant matcher.

A grant is one allow rule.  There are exactly two shapes:

* :class:`KindGrant`: applies to every subject of a kind (or to ``"all"``).
* :class:`ConditionalGrant`: applies only to instances whose attributes
  satisfy its conditions.

There are no deny rules, so matching is a pure function of one grant and one
query and the order grants were declared in never matters.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Final, Union, assert_never

from coldmon_auth.kernel.security.conditions import Conditions, conditions_hold
from coldmon_auth.kernel.security.subjects import ALL, SubjectInstance

MANAGE: Final = "manage"
"""Meta-action satisfying any action checked against the grant's subject."""

Subject = Union[str, SubjectInstance]


@dataclasses.dataclass(frozen=True, slots=True)
class KindGrant:
    actions: frozenset[str]
    subject: str


@dataclasses.dataclass(frozen=True, slots=True)
class ConditionalGrant:
    actions: frozenset[str]
    subject: str
    conditions: Conditions


Grant = Union[KindGrant, ConditionalGrant]


def split_subject(subject: Any) -> tuple[str, SubjectInstance | None]:
    """Return ``(kind, instance)``; *instance* is ``None`` for a bare kind."""
    if isinstance(subject, SubjectInstance):
        return subject.kind, subject
    if isinstance(subject, str):
        return subject, None
    raise TypeError(
        "subject must be a kind name or a SubjectInstance, "
        f"got {type(subject).__name__}; validate loaded objects through the subject registry"
    )


def grant_matches(grant: Grant, action: str, subject: Subject) -> bool:
    """Return ``True`` when *grant* allows *action* on *subject*.

    A bare-kind subject carries no attributes, so a conditional grant is
    taken to match it.  This is what lets ``can("create", "Organization")``
    pass before the organization exists.
    """
    kind, instance = split_subject(subject)
    if MANAGE not in grant.actions and action not in grant.actions:
        return False
    if grant.subject != ALL and grant.subject != kind:
        return False
    match grant:
        case KindGrant():
            return True
        case ConditionalGrant(conditions=conditions):
            if instance is None:
                return True
            return conditions_hold(conditions, instance)
        case _:
            assert_never(grant)


__all__ = [
    "ConditionalGrant",
    "Grant",
    "KindGrant",
    "MANAGE",
    "Subject",
    "grant_matches",
    "split_subject",
]
