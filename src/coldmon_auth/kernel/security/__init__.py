"""Kernel security – roles, principals, subjects, grants, abilities, guards."""
from coldmon_auth.kernel.security.roles import Role, parse_role
from coldmon_auth.kernel.security.principal import Principal
from coldmon_auth.kernel.security.subjects import (
    ALL,
    SUBJECT_KINDS,
    Instrument,
    InstrumentData,
    Invite,
    Organization,
    SubjectInstance,
    SubjectRegistry,
    User,
    subject_registry,
    validate_subject,
)
from coldmon_auth.kernel.security.conditions import Condition, Eq, In, Ne, NotIn
from coldmon_auth.kernel.security.grants import (
    MANAGE,
    ConditionalGrant,
    Grant,
    KindGrant,
    Subject,
    grant_matches,
)
from coldmon_auth.kernel.security.ability import Ability, AbilityBuilder
from coldmon_auth.kernel.security.permissions import RuleFn, build_ability, rules_for
from coldmon_auth.kernel.security.resolver import (
    InMemoryMembershipLookup,
    Membership,
    MembershipLookup,
    PrincipalResolver,
    resolve_principal,
)
from coldmon_auth.kernel.security.security_context import SecurityContext
from coldmon_auth.kernel.security.guard import authorize, require_can

__all__ = [
    "ALL",
    "Ability",
    "AbilityBuilder",
    "Condition",
    "ConditionalGrant",
    "Eq",
    "Grant",
    "In",
    "InMemoryMembershipLookup",
    "Instrument",
    "InstrumentData",
    "Invite",
    "KindGrant",
    "MANAGE",
    "Membership",
    "MembershipLookup",
    "Ne",
    "NotIn",
    "Organization",
    "Principal",
    "PrincipalResolver",
    "Role",
    "RuleFn",
    "SUBJECT_KINDS",
    "SecurityContext",
    "Subject",
    "SubjectInstance",
    "SubjectRegistry",
    "User",
    "authorize",
    "build_ability",
    "grant_matches",
    "parse_role",
    "require_can",
    "resolve_principal",
    "rules_for",
    "subject_registry",
    "validate_subject",
]
