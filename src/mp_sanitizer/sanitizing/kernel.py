"""Sanitizing – SanitizationKernel (component wiring)."""
from __future__ import annotations

from mp_sanitizer.config.settings.sanitization import SanitizationSettings
from mp_sanitizer.observability.logging.processors import get_logger
from mp_sanitizer.sanitizing.detectors.keys import SensitiveKeyDetector
from mp_sanitizer.sanitizing.detectors.patterns import SensitivePatternDetector
from mp_sanitizer.sanitizing.services.array import ArraySanitizer
from mp_sanitizer.sanitizing.services.object import ObjectSanitizer
from mp_sanitizer.sanitizing.services.pattern import SensitivePatternSanitizer
from mp_sanitizer.sanitizing.services.phrase import CredentialPhraseSanitizer
from mp_sanitizer.sanitizing.services.service import SanitizingService
from mp_sanitizer.sanitizing.services.string import StringSanitizer
from mp_sanitizer.sanitizing.tools.mask_token import MaskTokenValidator
from mp_sanitizer.sanitizing.tools.unicode import UnicodeNormalizer

_log = get_logger(__name__)


class SanitizationKernel:
    """Build every detector and sanitizer from one :class:`SanitizationSettings`.

    Construction is fail-fast: an invalid key, pattern, separator or mask
    token raises a :class:`~mp_sanitizer.config.validation.InvalidSanitizationConfigError`
    subclass and no service is produced.

    Usage::

        kernel = SanitizationKernel(SanitizationSettings(sensitive_keys=["pin"]))
        sanitizer = kernel.sanitizer()
        sanitizer.sanitize({"pin": "1234"})   # {'pin': '[MASKED]'}
    """

    def __init__(self, settings: SanitizationSettings | None = None) -> None:
        self._settings = settings or SanitizationSettings()
        self._sanitizer = self._boot(self._settings)
        _log.debug(
            "sanitization_kernel_ready",
            custom_keys=len(self._settings.sensitive_keys),
            custom_patterns=len(self._settings.sensitive_patterns),
            max_depth=self._settings.max_depth,
            mask_token=self._sanitizer.mask_token,
        )

    @property
    def settings(self) -> SanitizationSettings:
        return self._settings

    def sanitizer(self) -> SanitizingService:
        return self._sanitizer

    @staticmethod
    def _boot(settings: SanitizationSettings) -> SanitizingService:
        normalizer = UnicodeNormalizer()
        token_validator = MaskTokenValidator(
            settings.mask_token_forbidden_pattern,
            settings.mask_token_max_length,
        )
        # Traversal sanitizers receive the normalized token.
        mask_token = token_validator.validate(settings.mask_token)

        pattern_detector = SensitivePatternDetector(settings.sensitive_patterns)
        key_detector = SensitiveKeyDetector(settings.sensitive_keys, normalizer)

        pattern_sanitizer = SensitivePatternSanitizer(pattern_detector, normalizer)
        phrase_sanitizer = CredentialPhraseSanitizer(
            key_detector, settings.credential_phrase_separators
        )
        string_sanitizer = StringSanitizer(pattern_sanitizer, phrase_sanitizer, normalizer)

        object_sanitizer = ObjectSanitizer(
            string_sanitizer, key_detector, mask_token, settings.max_depth
        )
        array_sanitizer = ArraySanitizer(
            string_sanitizer,
            key_detector,
            mask_token,
            settings.max_depth,
            object_sanitizer=object_sanitizer,
        )

        return SanitizingService(
            array_sanitizer,
            object_sanitizer,
            string_sanitizer,
            pattern_detector,
            key_detector,
            token_validator,
            mask_token,
            settings.max_depth,
            normalizer,
        )


__all__ = ["SanitizationKernel"]
