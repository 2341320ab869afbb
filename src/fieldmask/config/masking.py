"""Config – MaskingConfig (process-wide default and scope-local instances)."""
from __future__ import annotations

import dataclasses
import threading
from typing import ClassVar

from fieldmask.config.validation.errors import ConfigError
from fieldmask.kernel.masking.audit import AuditSink
from fieldmask.kernel.masking.descriptor import DEFAULT_MASK_CHAR


@dataclasses.dataclass(frozen=True)
class MaskingSnapshot:
    """Immutable view of a :class:`MaskingConfig`, taken once per masking call."""

    enabled: bool
    default_mask_char: str
    audit_sink: AuditSink | None


def _check_mask_char(mask_char: object) -> str:
    if not isinstance(mask_char, str) or len(mask_char) != 1:
        raise ConfigError(
            f"default mask character must be a single character, got {mask_char!r}",
            detail={"default_mask_char": repr(mask_char)},
        )
    return mask_char


def _check_audit_sink(audit_sink: object) -> AuditSink | None:
    if audit_sink is not None and not callable(audit_sink):
        raise ConfigError(
            f"audit sink must be callable or None, got {type(audit_sink).__name__}",
            detail={"audit_sink": repr(audit_sink)},
        )
    return audit_sink  # type: ignore[return-value]


class MaskingConfig:
    """Masking policy: on/off switch, default mask character and audit sink.

    One process-wide instance is returned by :meth:`get_instance` and is
    mutated in place; :meth:`create` builds independent scope-local
    instances (see :class:`~fieldmask.adapters.json.MaskingModule`).

    Each field is read and written atomically; there is no cross-field
    atomicity.  Setters return ``self`` so calls can be chained::

        MaskingConfig.get_instance().set_default_mask_char("#").set_audit_sink(sink)

    Parameters
    ----------
    enabled:
        When ``False`` every value is emitted unchanged.
    default_mask_char:
        Character used by the built-in strategies and by custom masks
        declared with the ``'*'`` sentinel.
    audit_sink:
        Optional callable ``(field_name, kind)`` invoked per masked field.
    """

    _instance: ClassVar[MaskingConfig | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        enabled: bool = True,
        default_mask_char: str = DEFAULT_MASK_CHAR,
        audit_sink: AuditSink | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._enabled = bool(enabled)
        self._default_mask_char = _check_mask_char(default_mask_char)
        self._audit_sink = _check_audit_sink(audit_sink)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def get_instance(cls) -> MaskingConfig:
        """Return the process-wide instance."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def create(
        cls,
        enabled: bool = True,
        default_mask_char: str = DEFAULT_MASK_CHAR,
        audit_sink: AuditSink | None = None,
    ) -> MaskingConfig:
        """Return a new instance independent of the process-wide one."""
        return cls(enabled, default_mask_char, audit_sink)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def is_enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def set_enabled(self, enabled: bool) -> MaskingConfig:
        with self._lock:
            self._enabled = bool(enabled)
        return self

    def get_default_mask_char(self) -> str:
        with self._lock:
            return self._default_mask_char

    def set_default_mask_char(self, mask_char: str) -> MaskingConfig:
        """Set the default mask character.

        Raises
        ------
        ConfigError
            When *mask_char* is not a one-character string.
        """
        checked = _check_mask_char(mask_char)
        with self._lock:
            self._default_mask_char = checked
        return self

    def get_audit_sink(self) -> AuditSink | None:
        with self._lock:
            return self._audit_sink

    def set_audit_sink(self, audit_sink: AuditSink | None) -> MaskingConfig:
        """Attach *audit_sink*, or detach with ``None``.

        Raises
        ------
        ConfigError
            When *audit_sink* is neither callable nor ``None``.
        """
        checked = _check_audit_sink(audit_sink)
        with self._lock:
            self._audit_sink = checked
        return self

    enabled = property(is_enabled)
    default_mask_char = property(get_default_mask_char)
    audit_sink = property(get_audit_sink)

    def reset(self) -> MaskingConfig:
        """Restore defaults (``enabled=True``, ``'*'``, no sink).  Meant for tests."""
        with self._lock:
            self._enabled = True
            self._default_mask_char = DEFAULT_MASK_CHAR
            self._audit_sink = None
        return self

    def snapshot(self) -> MaskingSnapshot:
        """Read each field once; the result is stable for one masking call."""
        return MaskingSnapshot(
            enabled=self.is_enabled(),
            default_mask_char=self.get_default_mask_char(),
            audit_sink=self.get_audit_sink(),
        )

    def __repr__(self) -> str:
        snap = self.snapshot()
        return (
            f"MaskingConfig(enabled={snap.enabled!r}, "
            f"default_mask_char={snap.default_mask_char!r}, "
            f"audit_sink={snap.audit_sink!r})"
        )


__all__ = ["MaskingConfig", "MaskingSnapshot"]
