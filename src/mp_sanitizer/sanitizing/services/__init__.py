"""Sanitizing services – string, container and object traversal."""
from mp_sanitizer.sanitizing.services.array import ArraySanitizer
from mp_sanitizer.sanitizing.services.object import ObjectSanitizer
from mp_sanitizer.sanitizing.services.pattern import SensitivePatternSanitizer
from mp_sanitizer.sanitizing.services.phrase import CredentialPhraseSanitizer
from mp_sanitizer.sanitizing.services.service import SanitizingService
from mp_sanitizer.sanitizing.services.string import StringSanitizer

__all__ = [
    "ArraySanitizer",
    "CredentialPhraseSanitizer",
    "ObjectSanitizer",
    "SanitizingService",
    "SensitivePatternSanitizer",
    "StringSanitizer",
]
