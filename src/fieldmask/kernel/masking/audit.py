"""Kernel masking – audit sink port."""
from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable

from fieldmask.kernel.masking.kind import MaskKind


@runtime_checkable
class AuditSink(Protocol):
    """Port: observer notified synchronously for every masked field.

    Any callable ``(field_name, kind) -> None`` satisfies it.  The sink runs
    inline in the serialization call; its failures and latency are the
    owner's concern.
    """

    def __call__(self, field_name: str, kind: MaskKind) -> None: ...


@dataclasses.dataclass(frozen=True)
class MaskingEvent:
    """A single masked-field notification."""

    field_name: str
    kind: MaskKind


__all__ = ["AuditSink", "MaskingEvent"]
