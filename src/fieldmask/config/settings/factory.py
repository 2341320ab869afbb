"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from fieldmask.config.settings.base import Settings
from fieldmask.config.settings.loaders import SettingsLoader
from fieldmask.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from fieldmask.observability.logging.processors import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Merge the output of several loaders, apply overrides, build the dataclass.

    Loaders are applied in order and later loaders win on field conflicts;
    *overrides* win over every loader.  A loader that fails with
    :class:`ConfigError` is skipped (and logged) so the remaining sources may
    still contribute values.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            When a field without default is absent from every source.
        InvalidSettingValueError
            When the merged values fail the settings' own validation.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError as exc:
                _log.warning(
                    "settings_loader_skipped",
                    loader=type(loader).__name__,
                    settings=settings_cls.__name__,
                    error=exc.message,
                )
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
