"""Application masking – programmatic ``mask`` helpers.

Use these outside serialization, e.g. in ``__repr__`` or log statements::

    def __repr__(self) -> str:
        return f"Card(number={mask(self.number, MaskKind.CREDIT_CARD)})"

Both helpers honour the process-wide :class:`MaskingConfig` (enable switch
and default mask character) and never notify the audit sink, which is
reserved for serialized fields.
"""
from __future__ import annotations

from fieldmask.application.masking.engine import MaskEngine
from fieldmask.config.masking import MaskingConfig
from fieldmask.kernel.masking.descriptor import MaskDescriptor
from fieldmask.kernel.masking.kind import MaskKind

_engine = MaskEngine()


def mask(value: str | None, kind: MaskKind) -> str | None:
    """Mask *value* with the built-in strategy of *kind*.

    ``None`` and ``""`` are returned unchanged, as is every value while
    masking is disabled.
    """
    return _engine.apply(value, MaskDescriptor(kind), MaskingConfig.get_instance())


def mask_custom(
    value: str | None,
    mask_char: str,
    visible_start: int,
    visible_end: int,
) -> str | None:
    """Mask *value* keeping a visible window at each end.

    Negative counts are treated as ``0``.  ``mask_char='*'`` follows the
    configured default character; any other character is used verbatim.
    """
    descriptor = MaskDescriptor.custom(mask_char, visible_start, visible_end)
    return _engine.apply(value, descriptor, MaskingConfig.get_instance())


__all__ = ["mask", "mask_custom"]
