"""Kernel masking – custom visible-window algorithm."""
from __future__ import annotations

from fieldmask.kernel.masking.descriptor import DEFAULT_MASK_CHAR


def resolve_mask_char(mask_char: str, default_mask_char: str) -> str:
    """Treat the ``'*'`` sentinel as "use the configured default character"."""
    return default_mask_char if mask_char == DEFAULT_MASK_CHAR else mask_char


def apply_custom_mask(
    value: str,
    mask_char: str,
    visible_start: int,
    visible_end: int,
    default_mask_char: str = DEFAULT_MASK_CHAR,
) -> str:
    """Keep *visible_start* leading and *visible_end* trailing characters.

    Callers clamp negative counts to ``0`` first.  When the visible window
    covers the whole value it is returned unchanged.
    """
    length = len(value)
    total_visible = visible_start + visible_end
    if total_visible >= length:
        return value

    char = resolve_mask_char(mask_char, default_mask_char)
    suffix = value[length - visible_end:] if visible_end > 0 else ""
    return value[:visible_start] + char * (length - total_visible) + suffix


__all__ = ["apply_custom_mask", "resolve_mask_char"]
