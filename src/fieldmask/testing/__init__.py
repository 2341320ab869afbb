"""Testing helpers – fakes for masking ports."""
from fieldmask.testing.fakes import InMemoryAuditSink

__all__ = ["InMemoryAuditSink"]
