"""Domain errors: invalid subjects handed to the engine by callers."""

from __future__ import annotations

from typing import Any

from coldmon_auth.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class ShapeError(ValidationError):
    """A subject instance does not have the shape its kind requires.

    Raised by the subject registry before any permission check runs, most
    often because a scoping attribute such as ``tenant_id`` is missing.
    """

    default_code = "subject_shape_invalid"

    def __init__(
        self,
        kind: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Invalid {kind} subject", **kwargs)
        self.kind = kind

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["kind"] = self.kind
        return base


__all__ = ["DomainError", "ShapeError", "ValidationError"]
