"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (fieldmask.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from fieldmask.kernel.errors.application import ApplicationError
from fieldmask.kernel.errors.base import BaseError
from fieldmask.kernel.errors.domain import DomainError, ValidationError
from fieldmask.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]
