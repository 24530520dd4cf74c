"""Kernel security – Principal."""
from __future__ import annotations

import dataclasses
import uuid
from typing import Any

from coldmon_auth.kernel.errors import ValidationError
from coldmon_auth.kernel.security.roles import Role, parse_role


def _scope_id(value: Any, field: str) -> str:
    """Same normalisation subject instances get: UUIDs become text, padding goes."""
    if isinstance(value, uuid.UUID):
        value = str(value)
    if not isinstance(value, str):
        raise ValidationError(f"Principal {field} must be a string, got {type(value).__name__}")
    value = value.strip()
    if not value:
        raise ValidationError(f"Principal {field} must not be empty")
    return value


@dataclasses.dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated actor a permission check is evaluated for.

    Built fresh for every request and never persisted.  ``id`` and
    ``tenant_id`` accept UUIDs and are stored as stripped strings, so they
    compare equal to the scope ids on validated subjects.
    """

    id: str
    tenant_id: str
    role: Role

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _scope_id(self.id, "id"))
        object.__setattr__(self, "tenant_id", _scope_id(self.tenant_id, "tenant_id"))
        object.__setattr__(self, "role", parse_role(self.role))

    def has_role(self, role: str | Role) -> bool:
        return self.role == parse_role(role)


__all__ = ["Principal"]
