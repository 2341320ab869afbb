"""Application-layer errors — wiring and registration failures."""

from __future__ import annotations

from fieldmask.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern (bad wiring, bad settings)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
