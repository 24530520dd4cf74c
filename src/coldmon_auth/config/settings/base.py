"""Config settings – Settings base class and AuthzSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from coldmon_auth.config.validation.errors import InvalidSettingValueError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class AuthzSettings(Settings):
    """Settings for the access-control engine (``AUTHZ_*`` env vars)."""

    _prefix: ClassVar[str] = "AUTHZ"

    service_name: str = "coldmon-api"
    log_level: str = "INFO"
    audit_decisions: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )
        if not self.service_name:
            raise InvalidSettingValueError("service_name", self.service_name, "must not be empty")

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["AuthzSettings", "Settings"]
