"""Application masking – SerializationHook.

The single seam a host serializer calls for each masked field.
"""
from __future__ import annotations

from typing import Any, Protocol

from fieldmask.application.masking.engine import MaskEngine
from fieldmask.config.masking import MaskingConfig
from fieldmask.config.resolver import ConfigResolver
from fieldmask.kernel.masking.descriptor import MaskDescriptor


class FieldWriter(Protocol):
    """Callback that commits one field value to the host's output."""

    def __call__(self, value: str | None) -> None: ...


class SerializationHook:
    """Mask one field, write it, then notify the audit sink.

    Side effects are limited to one *write* and at most one audit-sink call,
    in that order.  Exceptions raised by the sink are not caught.

    Parameters
    ----------
    engine:
        Engine used to transform values.
    resolver:
        Resolver used when :meth:`serialize` receives no explicit config.
    """

    def __init__(
        self,
        engine: MaskEngine | None = None,
        resolver: ConfigResolver | None = None,
    ) -> None:
        self._engine = engine or MaskEngine()
        self._resolver = resolver or ConfigResolver()

    def serialize(
        self,
        descriptor: MaskDescriptor,
        field_name: str,
        raw_value: Any,
        config: MaskingConfig | None,
        write: FieldWriter,
    ) -> str | None:
        """Write the (possibly masked) value of *field_name* through *write*.

        Non-string values are converted with :func:`str` first.  *config* is
        the scope-bound config, or ``None`` for the resolver's default.
        """
        effective = self._resolver.resolve(config)
        snap = effective.snapshot()
        value = raw_value if raw_value is None or isinstance(raw_value, str) else str(raw_value)

        outcome = self._engine.transform(value, descriptor, snap)
        write(outcome.value)

        if outcome.masked and snap.audit_sink is not None:
            snap.audit_sink(field_name, descriptor.kind)
        return outcome.value

    def render(
        self,
        descriptor: MaskDescriptor,
        field_name: str,
        raw_value: Any,
        config: MaskingConfig | None = None,
    ) -> str | None:
        """Like :meth:`serialize` for hosts that take the value as a return."""
        return self.serialize(descriptor, field_name, raw_value, config, _discard)


def _discard(value: str | None) -> None:  # noqa: ARG001
    return None


__all__ = ["FieldWriter", "SerializationHook"]
