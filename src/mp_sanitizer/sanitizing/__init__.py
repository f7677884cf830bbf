"""Sanitizing – mask sensitive data in values bound for log lines."""
from mp_sanitizer.sanitizing.detectors import (
    CircularReferenceDetector,
    SensitiveKeyDetector,
    SensitivePatternDetector,
)
from mp_sanitizer.sanitizing.kernel import SanitizationKernel
from mp_sanitizer.sanitizing.ports import Sanitizer
from mp_sanitizer.sanitizing.services import (
    ArraySanitizer,
    CredentialPhraseSanitizer,
    ObjectSanitizer,
    SanitizingService,
    SensitivePatternSanitizer,
    StringSanitizer,
)
from mp_sanitizer.sanitizing.tools import MaskTokenValidator, UnicodeNormalizer
from mp_sanitizer.sanitizing.values import HALT_MARKER_KEY, TYPE_TAG_KEY, Shape, shape_of

__all__ = [
    "ArraySanitizer",
    "CircularReferenceDetector",
    "CredentialPhraseSanitizer",
    "HALT_MARKER_KEY",
    "MaskTokenValidator",
    "ObjectSanitizer",
    "SanitizationKernel",
    "Sanitizer",
    "SanitizingService",
    "SensitiveKeyDetector",
    "SensitivePatternDetector",
    "SensitivePatternSanitizer",
    "Shape",
    "StringSanitizer",
    "TYPE_TAG_KEY",
    "UnicodeNormalizer",
    "shape_of",
]
