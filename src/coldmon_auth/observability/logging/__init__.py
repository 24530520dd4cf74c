"""Observability – structured logging helpers."""
from coldmon_auth.observability.logging.audit import AuditLogger, AuditOutcome
from coldmon_auth.observability.logging.factory import JsonLoggerFactory
from coldmon_auth.observability.logging.processors import PrincipalProcessor, get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "PrincipalProcessor",
    "get_logger",
]
