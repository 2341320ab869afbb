"""Kernel – framework-agnostic masking building blocks."""

from fieldmask.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]
