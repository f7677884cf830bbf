"""Sanitizing detectors – SensitivePatternDetector."""
from __future__ import annotations

import re
from typing import Any, Iterable

from mp_sanitizer.config.validation import InvalidPatternConfigError

DEFAULT_SENSITIVE_PATTERNS: tuple[str, ...] = (
    r"\b\d{3}\.?\d{3}\.?\d{3}-?\d{2}\b",     # CPF (Brazilian national ID)
    r"\b\d{16}\b",                          # 16-digit card number
    r"(?<![a-z0-9._%+-])[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}",  # email, anchored to a token start
)


class SensitivePatternDetector:
    """Match string values against regular-expression signatures.

    Custom patterns are appended to :data:`DEFAULT_SENSITIVE_PATTERNS`.  All
    patterns use Python :mod:`re` syntax and are applied case-insensitively.
    """

    def __init__(self, custom_patterns: Iterable[str] = ()) -> None:
        merged = (*DEFAULT_SENSITIVE_PATTERNS, *custom_patterns)
        self._compiled = tuple(self._compile(p) for p in merged)
        self._patterns: tuple[str, ...] = merged

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    def matches(self, value: Any) -> bool:
        """Return ``True`` on the first matching pattern; non-strings never match."""
        if not isinstance(value, str):
            return False
        return any(regex.search(value) for regex in self._compiled)

    @staticmethod
    def _compile(pattern: str) -> re.Pattern[str]:
        if not isinstance(pattern, str) or not pattern:
            raise InvalidPatternConfigError(pattern, "must be a non-empty string")
        try:
            return re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise InvalidPatternConfigError(pattern, str(exc)) from exc


__all__ = ["DEFAULT_SENSITIVE_PATTERNS", "SensitivePatternDetector"]
