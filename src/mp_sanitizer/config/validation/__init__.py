"""Config validation errors."""
from mp_sanitizer.config.validation.errors import (
    ConfigError,
    InvalidMaskTokenConfigError,
    InvalidPatternConfigError,
    InvalidSanitizationConfigError,
    InvalidSensitiveKeyConfigError,
    InvalidSeparatorConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidMaskTokenConfigError",
    "InvalidPatternConfigError",
    "InvalidSanitizationConfigError",
    "InvalidSensitiveKeyConfigError",
    "InvalidSeparatorConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
