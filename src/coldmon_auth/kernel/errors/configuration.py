"""Configuration errors: deployment defects that must surface as 500s."""

from __future__ import annotations

from typing import Any

from coldmon_auth.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """The engine or its settings are misconfigured."""

    default_code = "configuration_error"


class UnknownRoleError(ConfigurationError):
    """A role is missing from the role table or has no permission rules."""

    default_code = "unknown_role"

    def __init__(self, role: Any, **kwargs: Any) -> None:
        super().__init__(f"Permissions for role {role!r} not defined", **kwargs)
        self.role = role
        self.detail.setdefault("role", str(role))


__all__ = ["ConfigurationError", "UnknownRoleError"]
