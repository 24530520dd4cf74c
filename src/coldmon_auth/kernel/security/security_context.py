"""Kernel security – SecurityContext using contextvars."""

from __future__ import annotations

import contextvars

from coldmon_auth.kernel.errors import UnauthorizedError
from coldmon_auth.kernel.security.principal import Principal

_VAR: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_security_context", default=None
)


class SecurityContext:
    """Store and retrieve the current request's :class:`Principal` via
    :mod:`contextvars` so each asyncio task has its own isolated context.

    Only the principal is stored; abilities are rebuilt from it per check.
    """

    @staticmethod
    def get_current() -> Principal | None:
        """Return the current principal, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(principal: Principal) -> contextvars.Token[Principal | None]:
        """Set the current principal and return a reset token."""
        return _VAR.set(principal)

    @staticmethod
    def reset(token: contextvars.Token[Principal | None]) -> None:
        """Restore the principal that was current before ``set_current``."""
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current principal from context."""
        _VAR.set(None)

    @staticmethod
    def require() -> Principal:
        """Return the current principal or raise ``UnauthorizedError``."""
        principal = _VAR.get()
        if principal is None:
            raise UnauthorizedError("No authenticated principal in context")
        return principal


__all__ = ["SecurityContext"]
