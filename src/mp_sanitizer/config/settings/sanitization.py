"""Config settings – SanitizationSettings."""
from __future__ import annotations

import dataclasses

from mp_sanitizer.config.settings.base import Settings
from mp_sanitizer.config.validation import InvalidSettingValueError

DEFAULT_MAX_DEPTH = 10
DEFAULT_MASK_TOKEN = "[MASKED]"
DEFAULT_MASK_TOKEN_MAX_LENGTH = 40
DEFAULT_MASK_TOKEN_FORBIDDEN_PATTERN = r"[\x00-\x1F\x7F]|base64|script|php"


@dataclasses.dataclass
class SanitizationSettings(Settings):
    """Everything the sanitization engine needs, supplied once at startup.

    The list fields only carry *custom* entries; built-in keys, patterns and
    separators are always merged in by the components themselves.

    Environment variables (see :class:`EnvSettingsLoader`) use the
    ``SANITIZER_`` prefix, with comma-separated lists::

        SANITIZER_SENSITIVE_KEYS=pin,otp
        SANITIZER_MAX_DEPTH=5
    """

    _prefix = "sanitizer"

    sensitive_keys: list[str] = dataclasses.field(default_factory=list)
    sensitive_patterns: list[str] = dataclasses.field(default_factory=list)
    credential_phrase_separators: list[str] = dataclasses.field(default_factory=list)
    max_depth: int = DEFAULT_MAX_DEPTH
    mask_token: str = DEFAULT_MASK_TOKEN
    mask_token_forbidden_pattern: str = DEFAULT_MASK_TOKEN_FORBIDDEN_PATTERN
    mask_token_max_length: int = DEFAULT_MASK_TOKEN_MAX_LENGTH

    def _validate(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise InvalidSettingValueError("max_depth", self.max_depth, "must be an integer")
        if self.max_depth < 0:
            raise InvalidSettingValueError("max_depth", self.max_depth, "must be >= 0")
        if self.mask_token_max_length < 1:
            raise InvalidSettingValueError(
                "mask_token_max_length", self.mask_token_max_length, "must be >= 1"
            )
        if not isinstance(self.mask_token, str):
            raise InvalidSettingValueError("mask_token", self.mask_token, "must be a string")


__all__ = [
    "DEFAULT_MASK_TOKEN",
    "DEFAULT_MASK_TOKEN_FORBIDDEN_PATTERN",
    "DEFAULT_MASK_TOKEN_MAX_LENGTH",
    "DEFAULT_MAX_DEPTH",
    "SanitizationSettings",
]
