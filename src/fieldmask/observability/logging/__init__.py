"""Observability – structlog logging helpers and the logging audit sink."""
from fieldmask.observability.logging.audit import LoggingAuditSink
from fieldmask.observability.logging.factory import JsonLoggerFactory
from fieldmask.observability.logging.processors import add_library_name, get_logger

__all__ = [
    "JsonLoggerFactory",
    "LoggingAuditSink",
    "add_library_name",
    "get_logger",
]
