"""Observability – structured logging for masking and auditing."""
