"""Kernel security – Principal resolver.

Turns an authenticated user id plus the tenant being accessed into a
:class:`Principal`.  The membership lookup itself belongs to the persistence
layer and is injected through the :class:`MembershipLookup` port.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Protocol

from coldmon_auth.kernel.errors import UnauthorizedError
from coldmon_auth.kernel.security.principal import Principal
from coldmon_auth.kernel.security.roles import parse_role
from coldmon_auth.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Membership:
    """What the persistence layer knows about a user inside one tenant.

    ``role`` is kept as received; it is checked against the role table when
    the principal is built.
    """

    role: Any
    tenant_id: str


class MembershipLookup(Protocol):
    """Port: find the active membership of *user_id* in *tenant*.

    *tenant* is a tenant slug or id.  Returns ``None`` when there is none.
    """

    def find_membership(self, user_id: str, tenant: str) -> Membership | None: ...


class InMemoryMembershipLookup:
    """Dict-backed :class:`MembershipLookup` for unit tests and local tooling.

    Memberships are indexed by tenant id and, when given, by tenant slug.
    """

    def __init__(self) -> None:
        self._memberships: dict[tuple[str, str], Membership] = {}

    def add(self, user_id: str, tenant_id: str, role: Any, *, slug: str | None = None) -> Membership:
        membership = Membership(role=role, tenant_id=tenant_id)
        self._memberships[(user_id, tenant_id)] = membership
        if slug is not None:
            self._memberships[(user_id, slug)] = membership
        return membership

    def remove(self, user_id: str, tenant: str) -> None:
        """Drop the membership of *user_id* in *tenant* (no-op if absent)."""
        membership = self._memberships.get((user_id, tenant))
        if membership is None:
            return
        for key in [k for k, v in self._memberships.items() if k[0] == user_id and v is membership]:
            del self._memberships[key]

    def find_membership(self, user_id: str, tenant: str) -> Membership | None:
        return self._memberships.get((user_id, tenant))

    def clear(self) -> None:
        self._memberships.clear()


class PrincipalResolver:
    """Resolve ``(user_id, tenant)`` into a :class:`Principal`.

    No membership is an authorization failure, never an empty principal.
    A stored role outside the role table raises :class:`UnknownRoleError`.
    """

    def __init__(self, lookup: MembershipLookup) -> None:
        self._lookup = lookup

    def resolve(self, user_id: str, tenant: str) -> Principal:
        if not user_id:
            raise UnauthorizedError("Missing user identity")
        membership = self._lookup.find_membership(user_id, tenant)
        if membership is None:
            logger.info("principal.unresolved", user_id=user_id, tenant=tenant)
            raise UnauthorizedError(
                "You're not a member of this organization.",
                detail={"tenant": tenant},
            )
        return Principal(
            id=user_id,
            tenant_id=membership.tenant_id,
            role=parse_role(membership.role),
        )


def resolve_principal(user_id: str, tenant: str, lookup: MembershipLookup) -> Principal:
    """Shortcut for ``PrincipalResolver(lookup).resolve(user_id, tenant)``."""
    return PrincipalResolver(lookup).resolve(user_id, tenant)


__all__ = [
    "InMemoryMembershipLookup",
    "Membership",
    "MembershipLookup",
    "PrincipalResolver",
    "resolve_principal",
]
