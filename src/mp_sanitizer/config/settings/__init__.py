"""Config settings – 12-factor env-based configuration."""
from mp_sanitizer.config.settings.base import Settings
from mp_sanitizer.config.settings.factory import SettingsFactory
from mp_sanitizer.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_sanitizer.config.settings.sanitization import SanitizationSettings

__all__ = [
    "EnvSettingsLoader",
    "SanitizationSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
