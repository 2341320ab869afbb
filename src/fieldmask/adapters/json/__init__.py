"""JSON adapter – masking-aware JSON serializer and its registration points."""
from fieldmask.adapters.json.descriptors import METADATA_KEY, DescriptorRegistry, masked
from fieldmask.adapters.json.module import MaskingModule
from fieldmask.adapters.json.serializer import MaskingJSONSerializer

__all__ = [
    "METADATA_KEY",
    "DescriptorRegistry",
    "MaskingJSONSerializer",
    "MaskingModule",
    "masked",
]
