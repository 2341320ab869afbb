"""Application masking – MaskingLogFilter."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fieldmask.application.masking.masker import RecordMasker
from fieldmask.kernel.masking.descriptor import MaskDescriptor

__all__ = ["MaskingLogFilter"]


class MaskingLogFilter(logging.Filter):
    """Applies :class:`RecordMasker` to dict ``msg`` and ``args`` before emission."""

    def __init__(
        self,
        descriptors: Mapping[str, MaskDescriptor],
        name: str = "",
        masker: RecordMasker | None = None,
    ) -> None:
        super().__init__(name)
        self._masker = masker or RecordMasker()
        self._descriptors = dict(descriptors)

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if isinstance(record.msg, Mapping):
            record.msg = self._masker.mask(record.msg, self._descriptors)
        if isinstance(record.args, Mapping):
            record.args = self._masker.mask(record.args, self._descriptors)  # type: ignore[assignment]
        elif isinstance(record.args, tuple):
            masked: list[Any] = []
            for arg in record.args:
                if isinstance(arg, Mapping):
                    masked.append(self._masker.mask(arg, self._descriptors))
                else:
                    masked.append(arg)
            record.args = tuple(masked)
        return True
