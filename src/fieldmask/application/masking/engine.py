"""Application masking – MaskEngine."""
from __future__ import annotations

import dataclasses

from fieldmask.config.masking import MaskingConfig, MaskingSnapshot
from fieldmask.kernel.masking.custom import apply_custom_mask
from fieldmask.kernel.masking.descriptor import MaskDescriptor
from fieldmask.kernel.masking.kind import MaskKind
from fieldmask.kernel.masking.strategies import apply_strategy


@dataclasses.dataclass(frozen=True, slots=True)
class MaskOutcome:
    """Result of one masking call.

    ``masked`` is ``True`` only when a transformation was applied, which is
    what drives the audit notification.
    """

    value: str | None
    masked: bool


class MaskEngine:
    """Apply a resolved :class:`MaskDescriptor` to a single value.

    Never raises for string input: malformed values degrade to the kind's
    fixed-width fallback.
    """

    def transform(
        self,
        value: str | None,
        descriptor: MaskDescriptor,
        config: MaskingConfig | MaskingSnapshot,
    ) -> MaskOutcome:
        if value is None or value == "":
            return MaskOutcome(value, False)

        snap = config.snapshot() if isinstance(config, MaskingConfig) else config
        if not snap.enabled:
            return MaskOutcome(value, False)

        if descriptor.kind is MaskKind.CUSTOM:
            masked = apply_custom_mask(
                value,
                descriptor.mask_char,
                descriptor.clamped_start,
                descriptor.clamped_end,
                snap.default_mask_char,
            )
        else:
            masked = apply_strategy(descriptor.kind, value, snap.default_mask_char)
        return MaskOutcome(masked, True)

    def apply(
        self,
        value: str | None,
        descriptor: MaskDescriptor,
        config: MaskingConfig | MaskingSnapshot,
    ) -> str | None:
        return self.transform(value, descriptor, config).value


__all__ = ["MaskEngine", "MaskOutcome"]
