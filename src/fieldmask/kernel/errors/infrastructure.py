"""Infrastructure errors — failures while producing serialized output."""

from __future__ import annotations

from typing import Any

from fieldmask.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O or encoding failure that is not a masking-rule problem."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize a record."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["InfrastructureError", "SerializationError"]
