"""Config settings – 12-factor env-based masking configuration."""
from fieldmask.config.settings.base import Settings
from fieldmask.config.settings.factory import SettingsFactory
from fieldmask.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from fieldmask.config.settings.masking import MaskingSettings, configure_masking, load_masking_settings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "MaskingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "configure_masking",
    "load_masking_settings",
]
