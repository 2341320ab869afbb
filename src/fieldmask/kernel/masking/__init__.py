"""Kernel masking – kinds, descriptors, strategies and the audit port."""
from fieldmask.kernel.masking.audit import AuditSink, MaskingEvent
from fieldmask.kernel.masking.custom import apply_custom_mask, resolve_mask_char
from fieldmask.kernel.masking.descriptor import DEFAULT_MASK_CHAR, MaskDescriptor
from fieldmask.kernel.masking.kind import MaskKind
from fieldmask.kernel.masking.strategies import (
    STRATEGIES,
    MaskingStrategy,
    apply_strategy,
    strategy_for,
)

__all__ = [
    "DEFAULT_MASK_CHAR",
    "STRATEGIES",
    "AuditSink",
    "MaskDescriptor",
    "MaskKind",
    "MaskingEvent",
    "MaskingStrategy",
    "apply_custom_mask",
    "apply_strategy",
    "resolve_mask_char",
    "strategy_for",
]
