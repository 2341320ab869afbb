"""Testing fakes – in-memory doubles for kernel ports."""
from fieldmask.testing.fakes.audit import InMemoryAuditSink

__all__ = ["InMemoryAuditSink"]
