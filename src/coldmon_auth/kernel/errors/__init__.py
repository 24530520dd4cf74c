"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── ShapeError
    ├── ApplicationError         (application.py)
    │   └── UnauthorizedError
    │       └── ForbiddenError
    └── ConfigurationError       (configuration.py)
        └── UnknownRoleError
"""

from coldmon_auth.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from coldmon_auth.kernel.errors.base import BaseError
from coldmon_auth.kernel.errors.configuration import ConfigurationError, UnknownRoleError
from coldmon_auth.kernel.errors.domain import DomainError, ShapeError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "DomainError",
    "ForbiddenError",
    "ShapeError",
    "UnauthorizedError",
    "UnknownRoleError",
    "ValidationError",
]
