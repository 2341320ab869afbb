"""Observability – LoggingAuditSink.

Audit sink that records every masked field as a structured log entry.
"""
from __future__ import annotations

from typing import Any

from fieldmask.kernel.masking.kind import MaskKind
from fieldmask.observability.logging.processors import get_logger


class LoggingAuditSink:
    """Log each masked field at ``INFO`` as a ``field_masked`` event.

    Usage::

        MaskingConfig.get_instance().set_audit_sink(LoggingAuditSink(service="billing"))

    Parameters
    ----------
    service:
        Logical service name bound on every entry.
    logger:
        structlog logger to write to.  Defaults to one named
        ``fieldmask.audit``.
    """

    EVENT = "field_masked"

    def __init__(self, service: str | None = None, logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("fieldmask.audit")

    def __call__(self, field_name: str, kind: MaskKind) -> None:
        entry: dict[str, Any] = {
            "field": field_name,
            "mask_kind": kind.value if isinstance(kind, MaskKind) else str(kind),
        }
        if self._service is not None:
            entry["service"] = self._service
        self._log.info(self.EVENT, **entry)

    def __repr__(self) -> str:
        return f"LoggingAuditSink(service={self._service!r})"


__all__ = ["LoggingAuditSink"]
