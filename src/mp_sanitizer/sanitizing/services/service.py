"""Sanitizing services – SanitizingService."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mp_sanitizer.config.settings.sanitization import DEFAULT_MASK_TOKEN, DEFAULT_MAX_DEPTH
from mp_sanitizer.observability.logging.processors import get_logger
from mp_sanitizer.sanitizing.detectors.circular import CircularReferenceDetector
from mp_sanitizer.sanitizing.detectors.keys import SensitiveKeyDetector
from mp_sanitizer.sanitizing.detectors.patterns import SensitivePatternDetector
from mp_sanitizer.sanitizing.services.array import ArraySanitizer
from mp_sanitizer.sanitizing.services.object import ObjectSanitizer
from mp_sanitizer.sanitizing.services.string import StringSanitizer
from mp_sanitizer.sanitizing.tools.mask_token import MaskTokenValidator
from mp_sanitizer.sanitizing.tools.unicode import UnicodeNormalizer
from mp_sanitizer.sanitizing.values import Shape, shape_of, visible_fields

if TYPE_CHECKING:
    from mp_sanitizer.config.settings.sanitization import SanitizationSettings

_log = get_logger(__name__)


class SanitizingService:
    """Single entry point of the sanitization engine.

    ``sanitize`` validates the mask token, starts a fresh traversal state and
    routes the value by shape: containers to :class:`ArraySanitizer`,
    object-like values to :class:`ObjectSanitizer`, strings to
    :class:`StringSanitizer`.  Other scalars come back unchanged.

    The service holds no per-call state and may be shared between threads.
    """

    def __init__(
        self,
        array_sanitizer: ArraySanitizer,
        object_sanitizer: ObjectSanitizer,
        string_sanitizer: StringSanitizer,
        pattern_detector: SensitivePatternDetector,
        key_detector: SensitiveKeyDetector,
        mask_token_validator: MaskTokenValidator,
        mask_token: str = DEFAULT_MASK_TOKEN,
        max_depth: int = DEFAULT_MAX_DEPTH,
        normalizer: UnicodeNormalizer | None = None,
    ) -> None:
        self._arrays = array_sanitizer
        self._objects = object_sanitizer
        self._strings = string_sanitizer
        self._pattern_detector = pattern_detector
        self._key_detector = key_detector
        self._validator = mask_token_validator
        self._max_depth = max_depth
        self._normalizer = normalizer or UnicodeNormalizer()
        self._fallback_reported: set[str] = set()
        self._mask_token = DEFAULT_MASK_TOKEN
        self._mask_token = self._resolve_mask_token(mask_token)

    @classmethod
    def from_settings(cls, settings: SanitizationSettings | None = None) -> SanitizingService:
        from mp_sanitizer.sanitizing.kernel import SanitizationKernel

        return SanitizationKernel(settings).sanitizer()

    @property
    def mask_token(self) -> str:
        return self._mask_token

    def validate_mask_token(self, mask_token: str) -> str:
        """Return the token *sanitize* would substitute for *mask_token*.

        Raises :class:`~mp_sanitizer.config.validation.InvalidMaskTokenConfigError`
        for an invalid token, so callers holding a token can fail at construction.
        """
        return self._resolve_mask_token(mask_token)

    def sanitize(self, value: Any, mask_token: str | None = None) -> Any:
        """Return a copy of *value* with sensitive fragments masked.

        Raises :class:`~mp_sanitizer.config.validation.InvalidMaskTokenConfigError`
        when an explicit *mask_token* fails validation; never raises for the
        value itself.
        """
        token = self._mask_token if mask_token is None else self._resolve_mask_token(mask_token)

        shape = shape_of(value)
        if shape in (Shape.MAPPING, Shape.SEQUENCE):
            return self._arrays.sanitize(value, token, state=CircularReferenceDetector())
        if shape is Shape.OBJECT:
            return self._objects.sanitize(value, token, state=CircularReferenceDetector())
        if shape is Shape.STRING:
            return self._strings.sanitize(value, token)
        return value

    def is_sensitive(self, value: Any) -> bool:
        """Report whether *value* holds data the engine considers sensitive.

        Strings are checked against the configured patterns.  Structures are
        sensitive when any key/field name is sensitive or any member is.
        """
        return self._is_sensitive(value, CircularReferenceDetector(), 0)

    def _is_sensitive(self, value: Any, state: CircularReferenceDetector, depth: int) -> bool:
        shape = shape_of(value)
        if shape is Shape.STRING:
            return self._pattern_detector.matches(self._normalizer.normalize(value))
        if shape is Shape.SCALAR:
            return False
        if state.is_circular(value) or depth >= self._max_depth:
            return False
        state.mark_seen(value)

        if shape is Shape.MAPPING:
            entries = list(value.items())
        elif shape is Shape.SEQUENCE:
            entries = [(None, item) for item in value]
        else:
            entries = list(visible_fields(value).items())

        return any(
            (isinstance(key, str) and self._key_detector.is_sensitive_key(key))
            or self._is_sensitive(item, state, depth + 1)
            for key, item in entries
        )

    def _resolve_mask_token(self, mask_token: str) -> str:
        validated = self._validator.validate(mask_token)
        # The mask token itself must never match a sensitive pattern.
        if self._pattern_detector.matches(validated):
            # Reported once per token: the warning itself may be sanitized with it.
            if validated not in self._fallback_reported:
                self._fallback_reported.add(validated)
                _log.warning("mask_token_fallback", fallback=self._mask_token)
            return self._mask_token
        return validated


__all__ = ["SanitizingService"]
