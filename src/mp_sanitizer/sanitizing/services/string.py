"""Sanitizing services – StringSanitizer."""
from __future__ import annotations

from mp_sanitizer.sanitizing.services.pattern import SensitivePatternSanitizer
from mp_sanitizer.sanitizing.services.phrase import CredentialPhraseSanitizer
from mp_sanitizer.sanitizing.tools.unicode import UnicodeNormalizer


class StringSanitizer:
    """Partial masking of a single string.

    Credential phrases are masked first, then value patterns, so the phrase
    pass still sees the raw value next to its key.  When nothing is masked
    the original string is returned unchanged, byte for byte.
    """

    def __init__(
        self,
        pattern_sanitizer: SensitivePatternSanitizer,
        phrase_sanitizer: CredentialPhraseSanitizer,
        normalizer: UnicodeNormalizer | None = None,
    ) -> None:
        self._pattern_sanitizer = pattern_sanitizer
        self._phrase_sanitizer = phrase_sanitizer
        self._normalizer = normalizer or UnicodeNormalizer()

    def sanitize(self, value: str, mask_token: str) -> str:
        normalized = self._normalizer.normalize(value).strip()
        sanitized = self._phrase_sanitizer.sanitize(normalized, mask_token)
        sanitized = self._pattern_sanitizer.sanitize(sanitized, mask_token)
        if sanitized == normalized:
            return value
        return sanitized


__all__ = ["StringSanitizer"]
