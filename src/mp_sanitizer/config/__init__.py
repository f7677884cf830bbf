"""Config – 12-factor settings, loaders, and validation errors."""

from mp_sanitizer.config.settings import (
    EnvSettingsLoader,
    SanitizationSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from mp_sanitizer.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "MissingRequiredSettingError",
    "SanitizationSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
