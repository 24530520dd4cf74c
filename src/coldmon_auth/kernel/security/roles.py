"""Kernel security – Role table."""
from __future__ import annotations

from enum import Enum
from typing import Any

from coldmon_auth.kernel.errors import UnknownRoleError


class Role(str, Enum):
    """Closed set of membership roles.

    ``SUPER_ADMIN`` is unrestricted, ``ADMIN`` manages everything inside its
    own tenant, and the remaining roles only touch instrument data.
    """

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    OPERATOR = "OPERATOR"
    OBSERVER = "OBSERVER"
    EDITOR = "EDITOR"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


def parse_role(value: Any) -> Role:
    """Return the :class:`Role` for *value* or raise :class:`UnknownRoleError`."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError as exc:
        raise UnknownRoleError(value, cause=exc) from exc


__all__ = ["Role", "parse_role"]
