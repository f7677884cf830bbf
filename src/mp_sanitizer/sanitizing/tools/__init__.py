"""Sanitizing tools – text canonicalization and mask token validation."""
from mp_sanitizer.sanitizing.tools.mask_token import MaskTokenValidator
from mp_sanitizer.sanitizing.tools.unicode import UnicodeNormalizer

__all__ = ["MaskTokenValidator", "UnicodeNormalizer"]
