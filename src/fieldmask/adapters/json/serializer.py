"""JSON adapter – MaskingJSONSerializer."""
from __future__ import annotations

import dataclasses
import datetime
import enum
import json
import uuid
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from fieldmask.adapters.json.descriptors import DescriptorRegistry
from fieldmask.adapters.json.module import MaskingModule
from fieldmask.application.masking.hook import SerializationHook
from fieldmask.config.masking import MaskingConfig
from fieldmask.config.resolver import ScopeRegistry, default_registry
from fieldmask.config.validation import ConfigError
from fieldmask.kernel.errors import SerializationError
from fieldmask.kernel.masking.descriptor import MaskDescriptor


class MaskingJSONSerializer:
    """JSON serializer that masks annotated fields on the way out.

    Records are dataclasses (descriptors from :func:`masked` metadata or a
    :class:`DescriptorRegistry`) or mappings paired with an explicit
    ``schema``.  Nested records, lists and tuples are walked; other JSON
    scalars pass through.  The serializer is its own serialization scope:
    a :class:`MaskingModule` registered on it shadows the process-wide
    config for every record it writes.

    Parameters
    ----------
    descriptors:
        Per-type descriptor table.  A fresh one by default.
    hook:
        Hook applied to every masked field.
    scopes:
        Binding table for scope-local configs.  Defaults to the process-wide
        :func:`~fieldmask.config.resolver.default_registry`.
    """

    def __init__(
        self,
        descriptors: DescriptorRegistry | None = None,
        hook: SerializationHook | None = None,
        scopes: ScopeRegistry | None = None,
    ) -> None:
        self._descriptors = descriptors or DescriptorRegistry()
        self._hook = hook or SerializationHook()
        self._scopes = scopes or default_registry()

    @property
    def descriptors(self) -> DescriptorRegistry:
        return self._descriptors

    def register_module(self, module: MaskingModule) -> MaskingJSONSerializer:
        """Bind *module*'s config to this serializer.

        Raises
        ------
        ConfigError
            When *module* is not a :class:`MaskingModule`.
        """
        if not isinstance(module, MaskingModule):
            raise ConfigError(
                "MaskingModule must not be None" if module is None
                else f"Expected MaskingModule, got {type(module).__name__}"
            )
        self._scopes.bind(self, module.config)
        return self

    def register(self, record_type: type, descriptors: Mapping[str, MaskDescriptor]) -> MaskingJSONSerializer:
        """Shortcut for ``self.descriptors.register(...)``."""
        self._descriptors.register(record_type, descriptors)
        return self

    @property
    def config(self) -> MaskingConfig:
        """Effective config for this serializer."""
        return self._scopes.resolve(self)

    def to_primitive(self, obj: Any, schema: Mapping[str, MaskDescriptor] | None = None) -> Any:
        """Return *obj* as JSON-ready data with masked fields replaced.

        *schema* supplies descriptors for a top-level mapping record.
        """
        scope_config = self._scopes.lookup(self)
        return self._convert(obj, scope_config, schema)

    def dumps(
        self,
        obj: Any,
        schema: Mapping[str, MaskDescriptor] | None = None,
        **json_kwargs: Any,
    ) -> str:
        """Serialize *obj* to a JSON string.

        Raises
        ------
        SerializationError
            When *obj* contains a value with no JSON representation.
        """
        primitive = self.to_primitive(obj, schema)
        json_kwargs.setdefault("ensure_ascii", False)
        try:
            return json.dumps(primitive, **json_kwargs)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot serialize {type(obj).__name__}: {exc}",
                payload_type=type(obj).__name__,
                cause=exc,
            ) from exc

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def _convert(
        self,
        obj: Any,
        config: MaskingConfig | None,
        schema: Mapping[str, MaskDescriptor] | None = None,
    ) -> Any:
        if obj is None or isinstance(obj, (bool, int, float, str)):
            return obj
        if isinstance(obj, enum.Enum):
            return self._convert(obj.value, config)
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return self._convert_dataclass(obj, config)
        if isinstance(obj, Mapping):
            return self._convert_mapping(obj, config, schema or {})
        if isinstance(obj, (list, tuple, set, frozenset)):
            return [self._convert(item, config) for item in obj]
        if isinstance(obj, (datetime.date, datetime.time)):
            return obj.isoformat()
        if isinstance(obj, (uuid.UUID, Decimal)):
            return str(obj)
        raise SerializationError(
            f"Object of type {type(obj).__name__} is not JSON serializable",
            payload_type=type(obj).__name__,
        )

    def _convert_dataclass(self, obj: Any, config: MaskingConfig | None) -> dict[str, Any]:
        descriptors = self._descriptors.descriptors_for(type(obj))
        out: dict[str, Any] = {}
        for field in dataclasses.fields(obj):
            value = getattr(obj, field.name)
            descriptor = descriptors.get(field.name)
            if descriptor is None:
                out[field.name] = self._convert(value, config)
            else:
                self._hook.serialize(descriptor, field.name, value, config, _setter(out, field.name))
        return out

    def _convert_mapping(
        self,
        obj: Mapping[Any, Any],
        config: MaskingConfig | None,
        schema: Mapping[str, MaskDescriptor],
    ) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in obj.items():
            name = str(key)
            descriptor = schema.get(name)
            if descriptor is None:
                out[name] = self._convert(value, config)
            else:
                self._hook.serialize(descriptor, name, value, config, _setter(out, name))
        return out


def _setter(target: dict[str, Any], key: str) -> Any:
    def write(value: str | None) -> None:
        target[key] = value

    return write


__all__ = ["MaskingJSONSerializer"]
