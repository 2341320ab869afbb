"""Config – masking policy, scope resolution, settings and errors."""

from fieldmask.config.masking import MaskingConfig, MaskingSnapshot
from fieldmask.config.resolver import ConfigResolver, ScopeRegistry, default_registry
from fieldmask.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    MaskingSettings,
    configure_masking,
    load_masking_settings,
)
from fieldmask.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigResolver",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MaskingConfig",
    "MaskingSettings",
    "MaskingSnapshot",
    "MissingRequiredSettingError",
    "ScopeRegistry",
    "configure_masking",
    "default_registry",
    "load_masking_settings",
]
