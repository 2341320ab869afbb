"""Pydantic adapter – mask model fields during ``model_dump`` / ``model_dump_json``."""
from fieldmask.adapters.pydantic.masked import CONTEXT_KEY, Masked, masking_context

__all__ = ["CONTEXT_KEY", "Masked", "masking_context"]
