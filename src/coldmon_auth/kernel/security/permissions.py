"""Kernel security – permission rules per role.

Each role maps to a rule function ``(principal, builder) -> None`` that
declares its grants.  :func:`rules_for` dispatches with an exhaustive
``match`` over :class:`Role`, so a type checker flags a role added without
rules; values outside the role table raise :class:`UnknownRoleError`.
"""
from __future__ import annotations

from typing import Any, Callable, Never, NoReturn

from coldmon_auth.kernel.errors import UnknownRoleError
from coldmon_auth.kernel.security.ability import Ability, AbilityBuilder
from coldmon_auth.kernel.security.grants import MANAGE
from coldmon_auth.kernel.security.principal import Principal
from coldmon_auth.kernel.security.roles import Role, parse_role
from coldmon_auth.kernel.security.subjects import ALL
from coldmon_auth.observability.logging import get_logger

logger = get_logger(__name__)

RuleFn = Callable[[Principal, AbilityBuilder], None]

TENANT_RESOURCES: tuple[str, ...] = (
    "Instrument",
    "InstrumentData",
    "Organization",
    "User",
    "Invite",
)


def _same_tenant(principal: Principal) -> dict[str, Any]:
    return {"tenant_id": principal.tenant_id}


def super_admin_rules(principal: Principal, builder: AbilityBuilder) -> None:
    builder.can(MANAGE, ALL)


def admin_rules(principal: Principal, builder: AbilityBuilder) -> None:
    builder.can(MANAGE, TENANT_RESOURCES, _same_tenant(principal))


def operator_rules(principal: Principal, builder: AbilityBuilder) -> None:
    builder.can("update", "InstrumentData", _same_tenant(principal))


def observer_rules(principal: Principal, builder: AbilityBuilder) -> None:
    builder.can("read", "InstrumentData", _same_tenant(principal))


def editor_rules(principal: Principal, builder: AbilityBuilder) -> None:
    builder.can(["create", "update"], "InstrumentData", _same_tenant(principal))


def _unhandled(role: Never) -> NoReturn:
    # Only reachable for a Role member with no case in rules_for.
    logger.error("permissions.unknown_role", role=repr(role))
    raise UnknownRoleError(role)


def rules_for(role: Role | str) -> RuleFn:
    """Return the rule function for *role*."""
    try:
        role = parse_role(role)
    except UnknownRoleError:
        logger.error("permissions.unknown_role", role=repr(role))
        raise
    match role:
        case Role.SUPER_ADMIN:
            return super_admin_rules
        case Role.ADMIN:
            return admin_rules
        case Role.OPERATOR:
            return operator_rules
        case Role.OBSERVER:
            return observer_rules
        case Role.EDITOR:
            return editor_rules
        case _:
            _unhandled(role)


def build_ability(principal: Principal) -> Ability:
    """Build the :class:`Ability` for *principal*.  Pure, no I/O."""
    builder = AbilityBuilder(principal)
    rules_for(principal.role)(principal, builder)
    ability = builder.build()
    logger.debug(
        "ability.built",
        principal_id=principal.id,
        tenant_id=principal.tenant_id,
        role=principal.role.value,
        grants=len(ability.grants),
    )
    return ability


__all__ = [
    "RuleFn",
    "TENANT_RESOURCES",
    "admin_rules",
    "build_ability",
    "editor_rules",
    "observer_rules",
    "operator_rules",
    "rules_for",
    "super_admin_rules",
]
