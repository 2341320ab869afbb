"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

from fieldmask.observability.logging.processors import add_library_name

if TYPE_CHECKING:  # pragma: no cover
    from fieldmask.kernel.masking.descriptor import MaskDescriptor


class JsonLoggerFactory:
    """Configure structlog for JSON output on the root stdlib logger.

    When *descriptors* is given, a
    :class:`~fieldmask.observability.logging.masking.MaskingProcessor` is
    placed first in the chain so matching event keys are masked before any
    other processor sees them.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        descriptors: Mapping[str, MaskDescriptor] | None = None,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_library_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if descriptors:
            from fieldmask.observability.logging.masking import MaskingProcessor

            shared_processors.insert(0, MaskingProcessor(descriptors))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
