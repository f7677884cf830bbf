"""Config validation errors."""
from __future__ import annotations

from mp_sanitizer.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidSanitizationConfigError(ConfigError):
    """Base for sanitizer construction failures.

    ``value`` holds the offending list entry so callers can pinpoint which
    configuration list is malformed.
    """
    default_code = "invalid_sanitization_config"
    subject = "sanitization value"

    def __init__(self, value: object, reason: str | None = None) -> None:
        message = f"Invalid {self.subject} {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, detail={"value": repr(value)})
        self.value = value
        self.reason = reason


class InvalidSensitiveKeyConfigError(InvalidSanitizationConfigError):
    """A sensitive key is empty, whitespace-only or holds control characters."""
    default_code = "invalid_sensitive_key"
    subject = "sensitive key"


class InvalidPatternConfigError(InvalidSanitizationConfigError):
    """A sensitive pattern is not a valid regular expression."""
    default_code = "invalid_sensitive_pattern"
    subject = "sensitive pattern"


class InvalidSeparatorConfigError(InvalidSanitizationConfigError):
    """A credential-phrase separator is empty or contains whitespace."""
    default_code = "invalid_separator"
    subject = "credential phrase separator"


class InvalidMaskTokenConfigError(InvalidSanitizationConfigError):
    """A mask token is empty, too long, or carries forbidden content."""
    default_code = "invalid_mask_token"
    subject = "mask token"


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
