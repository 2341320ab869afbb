"""
fieldmask – serialization-time redaction of sensitive record fields.

Import path convention::

    from fieldmask.kernel.masking import MaskKind, MaskDescriptor
    from fieldmask.config import MaskingConfig
    from fieldmask.application.masking import mask, mask_custom
    from fieldmask.adapters.json import MaskingJSONSerializer, MaskingModule, masked
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
