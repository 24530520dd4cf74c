"""Application-layer errors: authentication and authorization outcomes."""

from __future__ import annotations

from typing import Any

from coldmon_auth.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """The caller could not be authorized.

    Raised when no membership links the identity to the tenant being
    accessed.  Never retried.
    """

    default_code = "unauthorized"


class ForbiddenError(UnauthorizedError):
    """Authenticated principal is not allowed to perform the action."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        action: str | None = None,
        subject: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.action = action
        self.subject = subject
        if action is not None:
            self.detail.setdefault("action", action)
        if subject is not None:
            self.detail.setdefault("subject", subject)


__all__ = ["ApplicationError", "ForbiddenError", "UnauthorizedError"]
