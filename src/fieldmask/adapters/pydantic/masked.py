"""Pydantic adapter – ``Masked`` annotation.

Usage::

    class Payment(BaseModel):
        card: Annotated[str, Masked(MaskKind.CREDIT_CARD, field_name="card")]
        note: str

    Payment(card="4111111111111111", note="x").model_dump_json()
    # '{"card":"****-****-****-1111","note":"x"}'

    payment.model_dump(context=masking_context(MaskingConfig.create(enabled=False)))
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldmask.application.masking.hook import SerializationHook
from fieldmask.config.masking import MaskingConfig
from fieldmask.config.validation import ConfigError
from fieldmask.kernel.masking.descriptor import DEFAULT_MASK_CHAR, MaskDescriptor
from fieldmask.kernel.masking.kind import MaskKind

CONTEXT_KEY = "fieldmask.config"
UNKNOWN_FIELD = "unknown"

_default_hook = SerializationHook()


def masking_context(config: MaskingConfig, **extra: Any) -> dict[str, Any]:
    """Build a pydantic serialization ``context`` binding *config* to the call.

    Raises
    ------
    ConfigError
        When *config* is not a :class:`MaskingConfig`.
    """
    if not isinstance(config, MaskingConfig):
        raise ConfigError(
            "MaskingConfig must not be None" if config is None
            else f"Expected MaskingConfig, got {type(config).__name__}"
        )
    return {**extra, CONTEXT_KEY: config}


class Masked:
    """``Annotated`` marker that masks the field when the model is serialized.

    The audit sink receives *field_name*; when omitted, the name of the
    model field the annotation is attached to (taken while pydantic builds
    the schema) is used, else ``"unknown"``.
    """

    __slots__ = ("descriptor", "field_name", "_hook")

    def __init__(
        self,
        kind: MaskKind = MaskKind.TOTAL,
        *,
        mask_char: str = DEFAULT_MASK_CHAR,
        visible_start: int = 0,
        visible_end: int = 0,
        field_name: str | None = None,
        hook: SerializationHook | None = None,
    ) -> None:
        self.descriptor = MaskDescriptor(kind, mask_char, visible_start, visible_end)
        self.field_name = field_name
        self._hook = hook or _default_hook

    def __get_pydantic_core_schema__(self, source_type: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        schema = handler(source_type)
        # one annotation object may be shared by several fields
        name = self.field_name or getattr(handler, "field_name", None) or UNKNOWN_FIELD

        def serialize(value: Any, info: Any) -> str | None:
            return self._serialize(value, info, name)

        schema["serialization"] = core_schema.plain_serializer_function_ser_schema(
            serialize,
            info_arg=True,
        )
        return schema

    def _serialize(self, value: Any, info: Any, field_name: str) -> str | None:
        context = getattr(info, "context", None)
        config = context.get(CONTEXT_KEY) if isinstance(context, Mapping) else None
        return self._hook.render(self.descriptor, field_name, value, config)

    def __repr__(self) -> str:
        return f"Masked({self.descriptor!r}, field_name={self.field_name!r})"


__all__ = ["CONTEXT_KEY", "Masked", "masking_context"]
