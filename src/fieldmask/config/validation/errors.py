"""Config validation errors.

All of them are raised while wiring masking (building configs, binding
scopes, loading settings), never while a value is being masked.
"""
from __future__ import annotations

from fieldmask.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Invalid masking configuration or registration."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without default is absent from every source."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Masking setting {setting_name!r} is required but was not provided",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A masking setting is present but cannot be used."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Masking setting {setting_name!r} rejected ({reason}): {value!r}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
