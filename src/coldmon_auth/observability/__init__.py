"""Observability – structured logging and decision audit."""
from coldmon_auth.observability.logging import AuditLogger, AuditOutcome, JsonLoggerFactory, get_logger

__all__ = ["AuditLogger", "AuditOutcome", "JsonLoggerFactory", "get_logger"]
