"""Kernel security – AbilityBuilder and Ability.

Rule functions declare grants on an :class:`AbilityBuilder`; :meth:`AbilityBuilder.build`
freezes them into an :class:`Ability` answering ``can`` / ``cannot``::

    builder = AbilityBuilder(principal)
    builder.can("update", "InstrumentData", {"tenant_id": principal.tenant_id})
    ability = builder.build()

    ability.can("update", validate_subject("InstrumentData", row))

An ability is closed over one principal.  Build one per request and drop it
afterwards; its conditions carry that principal's tenant.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from coldmon_auth.kernel.errors import ForbiddenError
from coldmon_auth.kernel.security.conditions import normalize_conditions
from coldmon_auth.kernel.security.grants import (
    ConditionalGrant,
    Grant,
    KindGrant,
    Subject,
    grant_matches,
    split_subject,
)
from coldmon_auth.kernel.security.principal import Principal
from coldmon_auth.kernel.security.subjects import ALL, SubjectRegistry, subject_registry


def _as_names(value: str | Iterable[str], what: str) -> tuple[str, ...]:
    names = (value,) if isinstance(value, str) else tuple(value)
    if not names:
        raise ValueError(f"at least one {what} is required")
    for name in names:
        if not isinstance(name, str) or not name:
            raise ValueError(f"{what} names must be non-empty strings, got {name!r}")
    return names


class Ability:
    """Immutable set of grants for one principal."""

    __slots__ = ("_principal", "_grants")

    def __init__(self, principal: Principal, grants: Iterable[Grant]) -> None:
        self._principal = principal
        self._grants: frozenset[Grant] = frozenset(grants)

    @property
    def principal(self) -> Principal:
        return self._principal

    @property
    def grants(self) -> frozenset[Grant]:
        return self._grants

    def can(self, action: str, subject: Subject) -> bool:
        """Return ``True`` when at least one grant allows *action* on *subject*.

        *subject* is either a kind name (class-level check) or a
        :class:`~coldmon_auth.kernel.security.subjects.SubjectInstance`.
        """
        split_subject(subject)
        return any(grant_matches(grant, action, subject) for grant in self._grants)

    def cannot(self, action: str, subject: Subject) -> bool:
        return not self.can(action, subject)

    def throw_unless_can(self, action: str, subject: Subject) -> None:
        """Raise :class:`ForbiddenError` unless *action* on *subject* is allowed."""
        if self.cannot(action, subject):
            label = describe_subject(subject)
            raise ForbiddenError(
                f"You're not allowed to {action} {label}",
                action=action,
                subject=label,
            )

    def __repr__(self) -> str:
        return (
            f"Ability(principal={self._principal.id!r}, role={self._principal.role.value!r}, "
            f"grants={len(self._grants)})"
        )


class AbilityBuilder:
    """Collects grants declared by a role's rule function."""

    def __init__(self, principal: Principal, *, registry: SubjectRegistry = subject_registry) -> None:
        self._principal = principal
        self._registry = registry
        self._grants: list[Grant] = []

    @property
    def principal(self) -> Principal:
        return self._principal

    def can(
        self,
        actions: str | Iterable[str],
        subjects: str | Iterable[str],
        conditions: Mapping[str, Any] | None = None,
    ) -> None:
        """Allow *actions* on *subjects*, optionally only where *conditions* hold.

        Parameters
        ----------
        actions:
            One action name or several.  ``"manage"`` stands for any action.
        subjects:
            One subject kind or several, or ``"all"``.
        conditions:
            ``attribute -> value`` (equality, value must be hashable) or
            ``attribute -> Condition``.
        """
        action_set = frozenset(_as_names(actions, "action"))
        normalized = normalize_conditions(conditions) if conditions is not None else None
        for kind in _as_names(subjects, "subject"):
            if kind != ALL and kind not in self._registry:
                raise ValueError(f"Unknown subject kind {kind!r}")
            if normalized is None:
                self._grants.append(KindGrant(action_set, kind))
            else:
                self._grants.append(ConditionalGrant(action_set, kind, normalized))

    def build(self) -> Ability:
        return Ability(self._principal, self._grants)


def describe_subject(subject: Subject) -> str:
    kind, instance = split_subject(subject)
    return instance.describe() if instance is not None else kind


__all__ = ["Ability", "AbilityBuilder", "describe_subject"]
