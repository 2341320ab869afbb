"""Observability – MaskingProcessor (structlog).

Not re-exported from :mod:`fieldmask.observability.logging`: it depends on
the application layer, which itself logs through this package.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldmask.application.masking.masker import RecordMasker
from fieldmask.kernel.masking.descriptor import MaskDescriptor


class MaskingProcessor:
    """structlog processor masking event-dict keys listed in *descriptors*.

    Usage::

        structlog.configure(processors=[
            MaskingProcessor({"card": MaskDescriptor(MaskKind.CREDIT_CARD)}),
            ...,
        ])
    """

    def __init__(
        self,
        descriptors: Mapping[str, MaskDescriptor],
        masker: RecordMasker | None = None,
    ) -> None:
        self._descriptors = dict(descriptors)
        self._masker = masker or RecordMasker()

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._masker.mask(event_dict, self._descriptors)


__all__ = ["MaskingProcessor"]
