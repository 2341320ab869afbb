"""Config validation – registration-time and settings errors.

``ConfigError`` is what callers catch around bootstrap code; the two
settings errors narrow it to a single named setting.
"""
from fieldmask.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
