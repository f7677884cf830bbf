"""Sanitizing services – SensitivePatternSanitizer."""
from __future__ import annotations

import re

from mp_sanitizer.config.validation import InvalidPatternConfigError
from mp_sanitizer.sanitizing.detectors.patterns import SensitivePatternDetector
from mp_sanitizer.sanitizing.tools.unicode import UnicodeNormalizer


class SensitivePatternSanitizer:
    """Mask only the substrings that match a configured pattern.

    All patterns of the detector are OR-ed into a single compiled
    alternation at construction time; surrounding text is left untouched.
    """

    def __init__(
        self,
        pattern_detector: SensitivePatternDetector,
        normalizer: UnicodeNormalizer | None = None,
    ) -> None:
        self._normalizer = normalizer or UnicodeNormalizer()
        self._regex = self._build_unified_regex(pattern_detector.patterns)

    def sanitize(self, value: str, mask_token: str) -> str:
        normalized = self._normalizer.normalize(value).strip()
        if self._regex is None:
            return normalized
        return self._regex.sub(lambda _match: mask_token, normalized)

    @staticmethod
    def _build_unified_regex(patterns: tuple[str, ...]) -> re.Pattern[str] | None:
        if not patterns:
            return None
        unified = "|".join(f"(?:{p})" for p in patterns)
        try:
            return re.compile(unified, re.IGNORECASE)
        except re.error as exc:
            # Each pattern compiled alone; the alternation can still fail on
            # inline global flags or numbered back-references.
            raise InvalidPatternConfigError(unified, str(exc)) from exc


__all__ = ["SensitivePatternSanitizer"]
