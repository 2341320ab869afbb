"""Config settings – MaskingSettings and process-wide bootstrap.

Example ``.env`` / environment::

    FIELDMASK_ENABLED=true
    FIELDMASK_DEFAULT_MASK_CHAR=#
    FIELDMASK_AUDIT_ENABLED=true
"""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Sequence

from fieldmask.config.masking import MaskingConfig
from fieldmask.config.settings.base import Settings
from fieldmask.config.settings.factory import SettingsFactory
from fieldmask.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from fieldmask.config.validation import InvalidSettingValueError
from fieldmask.observability.logging.audit import LoggingAuditSink
from fieldmask.observability.logging.processors import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass
class MaskingSettings(Settings):
    """External masking settings, read from ``FIELDMASK_*`` variables."""

    _prefix: ClassVar[str] = "FIELDMASK"

    enabled: bool = True
    default_mask_char: str = "*"
    audit_enabled: bool = False

    def _validate(self) -> None:
        if not isinstance(self.default_mask_char, str) or len(self.default_mask_char) != 1:
            raise InvalidSettingValueError(
                "default_mask_char", self.default_mask_char, "must be a single character"
            )


def load_masking_settings(
    loaders: Sequence[SettingsLoader] | None = None,
    overrides: dict[str, Any] | None = None,
) -> MaskingSettings:
    """Load :class:`MaskingSettings`, from the environment unless *loaders* is given."""
    sources = [EnvSettingsLoader()] if loaders is None else list(loaders)
    return SettingsFactory.create(MaskingSettings, sources, overrides)


def configure_masking(
    settings: MaskingSettings | None = None,
    config: MaskingConfig | None = None,
) -> MaskingConfig:
    """Apply *settings* to *config* (the process-wide instance by default).

    With ``audit_enabled`` a :class:`LoggingAuditSink` is attached; otherwise
    any sink already installed on *config* is left as is.
    """
    settings = settings if settings is not None else load_masking_settings()
    target = config if config is not None else MaskingConfig.get_instance()
    target.set_enabled(settings.enabled).set_default_mask_char(settings.default_mask_char)

    if settings.audit_enabled:
        target.set_audit_sink(LoggingAuditSink())
        _log.info("masking_audit_enabled")

    _log.info(
        "masking_configured",
        enabled=settings.enabled,
        default_mask_char=settings.default_mask_char,
    )
    return target


__all__ = ["MaskingSettings", "configure_masking", "load_masking_settings"]
