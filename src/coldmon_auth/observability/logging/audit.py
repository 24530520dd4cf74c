"""Observability – AuditLogger.

A dedicated structured-log sink for authorization decisions.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from coldmon_auth.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from coldmon_auth.config.settings import AuthzSettings


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    ALLOWED = "allowed"
    DENIED = "denied"


class AuditLogger:
    """Structured-log sink for security-sensitive decisions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger.  Defaults to one named ``audit``.
    """

    def __init__(
        self,
        service: str = "unknown",
        logger: Any = None,
    ) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    @classmethod
    def from_settings(cls, settings: "AuthzSettings") -> "AuditLogger | None":
        """Return an audit logger, or ``None`` when decision auditing is off."""
        if not settings.audit_decisions:
            return None
        return cls(service=settings.service_name)

    @property
    def service(self) -> str:
        return self._service

    def log_access(
        self,
        principal: Any,
        resource: str,
        action: str,
        outcome: AuditOutcome | str = AuditOutcome.ALLOWED,
        **extra: Any,
    ) -> None:
        """Record an access decision.

        Parameters
        ----------
        principal:
            The actor the decision was made for.  Uses ``principal.id`` if
            available, otherwise ``str(principal)``.
        resource:
            The subject checked (e.g. ``"InstrumentData:42"``).
        action:
            The action checked (e.g. ``"read"``, ``"delete"``).
        outcome:
            :class:`AuditOutcome` or plain string.
        **extra:
            Additional structured fields to include in the audit entry.
        """
        principal_id = getattr(principal, "id", None) or str(principal)
        entry: dict[str, Any] = {
            "service": self._service,
            "principal_id": principal_id,
            "resource": resource,
            "action": action,
            "outcome": outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        self._log.warning("audit.access", **entry)


__all__ = ["AuditLogger", "AuditOutcome"]
