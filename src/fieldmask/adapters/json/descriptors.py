"""JSON adapter – descriptor discovery for dataclasses and registered types."""
from __future__ import annotations

import dataclasses
import threading
from collections.abc import Mapping
from typing import Any

from fieldmask.config.validation import ConfigError
from fieldmask.kernel.masking.descriptor import DEFAULT_MASK_CHAR, MaskDescriptor
from fieldmask.kernel.masking.kind import MaskKind

METADATA_KEY = "fieldmask"


def masked(
    kind: MaskKind = MaskKind.TOTAL,
    *,
    mask_char: str = DEFAULT_MASK_CHAR,
    visible_start: int = 0,
    visible_end: int = 0,
    **field_kwargs: Any,
) -> Any:
    """Declare a masked dataclass field.

    Usage::

        @dataclasses.dataclass
        class Customer:
            card_number: str = masked(MaskKind.CREDIT_CARD)
            account_id: str = masked(MaskKind.CUSTOM, mask_char="#", visible_start=2, visible_end=3)

    Remaining keyword arguments (``default``, ``repr``, ...) are passed to
    :func:`dataclasses.field`.  Without a ``default`` / ``default_factory``
    the field is required.
    """
    descriptor = MaskDescriptor(kind, mask_char, visible_start, visible_end)
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = descriptor
    return dataclasses.field(metadata=metadata, **field_kwargs)


class DescriptorRegistry:
    """Explicit per-type descriptor table, filled once per record type.

    Registered descriptors take precedence over dataclass field metadata.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, dict[str, MaskDescriptor]] = {}
        self._lock = threading.Lock()

    def register(self, record_type: type, descriptors: Mapping[str, MaskDescriptor]) -> None:
        for name, descriptor in descriptors.items():
            if not isinstance(descriptor, MaskDescriptor):
                raise ConfigError(
                    f"descriptor for {record_type.__name__}.{name} must be a MaskDescriptor"
                )
        with self._lock:
            self._by_type.setdefault(record_type, {}).update(descriptors)

    def descriptors_for(self, record_type: type) -> dict[str, MaskDescriptor]:
        """Merge dataclass metadata with explicit registrations for *record_type*."""
        found: dict[str, MaskDescriptor] = {}
        if dataclasses.is_dataclass(record_type):
            for field in dataclasses.fields(record_type):
                descriptor = field.metadata.get(METADATA_KEY)
                if descriptor is not None:
                    found[field.name] = descriptor
        with self._lock:
            for klass in reversed(record_type.__mro__):
                found.update(self._by_type.get(klass, {}))
        return found


__all__ = ["METADATA_KEY", "DescriptorRegistry", "masked"]
