"""Sanitizing detectors – key names, value patterns and reference cycles."""
from mp_sanitizer.sanitizing.detectors.circular import (
    CIRCULAR_REFERENCE_MARKER_KEY,
    CircularReferenceDetector,
)
from mp_sanitizer.sanitizing.detectors.keys import DEFAULT_SENSITIVE_KEYS, SensitiveKeyDetector
from mp_sanitizer.sanitizing.detectors.patterns import (
    DEFAULT_SENSITIVE_PATTERNS,
    SensitivePatternDetector,
)

__all__ = [
    "CIRCULAR_REFERENCE_MARKER_KEY",
    "CircularReferenceDetector",
    "DEFAULT_SENSITIVE_KEYS",
    "DEFAULT_SENSITIVE_PATTERNS",
    "SensitiveKeyDetector",
    "SensitivePatternDetector",
]
