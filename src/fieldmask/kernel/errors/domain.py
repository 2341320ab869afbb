"""Domain errors — invalid masking metadata."""

from __future__ import annotations

from typing import Any

from fieldmask.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a masking rule is malformed."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Masking metadata does not meet validation rules.

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


__all__ = ["DomainError", "ValidationError"]
