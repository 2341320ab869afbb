"""Kernel masking – MaskDescriptor value object."""

from __future__ import annotations

import dataclasses

from fieldmask.kernel.errors.domain import ValidationError
from fieldmask.kernel.masking.kind import MaskKind

DEFAULT_MASK_CHAR = "*"


@dataclasses.dataclass(frozen=True, slots=True)
class MaskDescriptor:
    """Per-field masking metadata, resolved once per field by the host.

    Parameters
    ----------
    kind:
        Masking transformation to apply.  Defaults to :attr:`MaskKind.TOTAL`.
    mask_char:
        Character used for masking.  Only consulted for
        :attr:`MaskKind.CUSTOM`; the default ``'*'`` means "use the
        configured default mask character".
    visible_start:
        Characters left visible at the start (``CUSTOM`` only).
    visible_end:
        Characters left visible at the end (``CUSTOM`` only).

    Negative visible counts are accepted and clamped to ``0`` on use.
    """

    kind: MaskKind = MaskKind.TOTAL
    mask_char: str = DEFAULT_MASK_CHAR
    visible_start: int = 0
    visible_end: int = 0

    def __post_init__(self) -> None:
        errors: list[dict[str, str]] = []
        if not isinstance(self.kind, MaskKind):
            try:
                object.__setattr__(self, "kind", MaskKind(self.kind))
            except ValueError:
                errors.append({"field": "kind", "error": f"unknown mask kind {self.kind!r}"})
        if not isinstance(self.mask_char, str) or len(self.mask_char) != 1:
            errors.append({"field": "mask_char", "error": "must be a single character"})
        for name in ("visible_start", "visible_end"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append({"field": name, "error": "must be an integer"})
        if errors:
            raise ValidationError("Invalid mask descriptor", errors=errors)

    @classmethod
    def custom(
        cls,
        mask_char: str = DEFAULT_MASK_CHAR,
        visible_start: int = 0,
        visible_end: int = 0,
    ) -> MaskDescriptor:
        """Shortcut for a :attr:`MaskKind.CUSTOM` descriptor."""
        return cls(MaskKind.CUSTOM, mask_char, visible_start, visible_end)

    @property
    def clamped_start(self) -> int:
        return max(0, self.visible_start)

    @property
    def clamped_end(self) -> int:
        return max(0, self.visible_end)


__all__ = ["DEFAULT_MASK_CHAR", "MaskDescriptor"]
