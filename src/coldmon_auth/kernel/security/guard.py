"""Kernel security: request guards.

Helpers route handlers use after resolving a principal:

* :func:`authorize`: check one (action, subject) pair and raise on denial.
* :func:`require_can`: decorator for handlers that need a class-level check
  against the principal in :class:`SecurityContext`.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from coldmon_auth.kernel.security.ability import Ability, describe_subject
from coldmon_auth.kernel.security.grants import Subject
from coldmon_auth.kernel.security.permissions import build_ability
from coldmon_auth.kernel.security.security_context import SecurityContext
from coldmon_auth.observability.logging import AuditLogger, AuditOutcome

F = TypeVar("F", bound=Callable[..., Any])


def authorize(
    ability: Ability,
    action: str,
    subject: Subject,
    *,
    audit: AuditLogger | None = None,
) -> None:
    """Raise :class:`ForbiddenError` unless *ability* allows *action* on *subject*.

    When *audit* is given the decision is recorded either way.
    """
    allowed = ability.can(action, subject)
    if audit is not None:
        audit.log_access(
            ability.principal,
            describe_subject(subject),
            action,
            AuditOutcome.ALLOWED if allowed else AuditOutcome.DENIED,
            tenant_id=ability.principal.tenant_id,
            role=ability.principal.role.value,
        )
    if not allowed:
        ability.throw_unless_can(action, subject)


def require_can(
    action: str,
    kind: str,
    *,
    audit: AuditLogger | None = None,
) -> Callable[[F], F]:
    """Decorator that checks *action* on the bare *kind* for the current principal.

    Works on both async and sync callables.  Raises :class:`UnauthorizedError`
    if there is no principal in context, and :class:`ForbiddenError` if the
    principal's ability does not allow the action.

    Example::

        @require_can("create", "Instrument")
        async def create_instrument(body: CreateInstrument) -> Instrument:
            ...
    """

    def _check() -> None:
        principal = SecurityContext.require()
        authorize(build_ability(principal), action, kind, audit=audit)

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                _check()
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            _check()
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["authorize", "require_can"]
