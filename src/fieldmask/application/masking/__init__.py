"""Application masking – engine, serialization hook and record helpers."""
from fieldmask.application.masking.engine import MaskEngine, MaskOutcome
from fieldmask.application.masking.hook import FieldWriter, SerializationHook
from fieldmask.application.masking.log_filter import MaskingLogFilter
from fieldmask.application.masking.masker import RecordMasker
from fieldmask.application.masking.utils import mask, mask_custom

__all__ = [
    "FieldWriter",
    "MaskEngine",
    "MaskOutcome",
    "MaskingLogFilter",
    "RecordMasker",
    "SerializationHook",
    "mask",
    "mask_custom",
]
