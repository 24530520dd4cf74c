"""Observability – structlog processors and get_logger helper.

PrincipalProcessor: injects the current principal into log events.
get_logger(name): returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog


class PrincipalProcessor:
    """structlog processor that injects the request principal.

    Injects the following fields when a :class:`SecurityContext` principal
    is active:

    * ``principal_id``
    * ``tenant_id``
    * ``role``

    Usage::

        import structlog
        from coldmon_auth.observability.logging.processors import PrincipalProcessor

        structlog.configure(processors=[PrincipalProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from coldmon_auth.kernel.security.security_context import SecurityContext

        principal = SecurityContext.get_current()
        if principal is not None:
            event_dict.setdefault("principal_id", principal.id)
            event_dict.setdefault("tenant_id", principal.tenant_id)
            event_dict.setdefault("role", principal.role.value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["PrincipalProcessor", "get_logger"]
