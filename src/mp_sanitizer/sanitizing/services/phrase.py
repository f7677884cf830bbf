"""Sanitizing services – CredentialPhraseSanitizer."""
from __future__ import annotations

import functools
import re
from typing import Iterable

from mp_sanitizer.config.validation import InvalidSeparatorConfigError
from mp_sanitizer.observability.logging.processors import get_logger
from mp_sanitizer.sanitizing.detectors.keys import SensitiveKeyDetector

_log = get_logger(__name__)

DEFAULT_SEPARATORS: tuple[str, ...] = (
    ":", "=", "-", "->", "=>", "|", "/", ";", ",",
    "is", "was", "are",        # English copulas
    "é", "foi", "era", "são",  # Portuguese copulas
)

MAX_INTERMEDIATE_WORDS = 3

# Compiled pass pairs kept per mask token.
_TOKEN_CACHE_SIZE = 32

# A value runs up to whitespace or a list delimiter; trailing sentence
# punctuation is kept out of the mask.
_VALUE = r'[^\s,;"]+'
_TRAILING_PUNCTUATION = ".:!?"

_FORWARD_TEMPLATE = (
    r"\b({keys})\b"                     # 1 sensitive key
    r"((?:\s+{word}){{0,{words}}})"     # 2 intermediate words
    r"(\s*)"                            # 3
    r"({separators})"                   # 4 separator
    r"(\s*)"                            # 5
    r"(" + _VALUE + r")"                # 6 value
)

_BACKWARD_TEMPLATE = (
    # The value starts a token; an unanchored run would be retried at every offset.
    r"(?<![^\s,;\"])(" + _VALUE + r")"  # 1 value
    r"(\s+)"                            # 2
    r"({separators})"                   # 3 separator
    r"(\s*(?:{word}\s*){{0,{words}}})"  # 4 intermediate words
    r"(\s+)"                            # 5
    r"\b({keys})\b"                     # 6 sensitive key
)


def _split_value(value: str) -> tuple[str, str]:
    stripped = value.rstrip(_TRAILING_PUNCTUATION)
    return stripped, value[len(stripped):]


class CredentialPhraseSanitizer:
    """Mask credential values written as free text.

    Catches ``"password is now: hunter2"`` style phrases that were never
    structured as a key/value pair.  Two passes, in this order:

    1. forward, ``<key> [<=3 words] <separator> <value>``;
    2. backward, ``<value> <separator> [<=3 words] <key>``, attempted only
       when the forward pass masked nothing.

    Only ``<value>`` is replaced; the key, intermediate words, separator and
    original spacing are preserved.
    """

    def __init__(
        self,
        key_detector: SensitiveKeyDetector,
        custom_separators: Iterable[str] | None = None,
    ) -> None:
        self._separators = self._init_separators(custom_separators)
        self._keys_regex = self._build_keys_regex(key_detector.prepared_keys)
        self._separators_regex = self._build_separators_regex(self._separators)
        self._passes = functools.lru_cache(maxsize=_TOKEN_CACHE_SIZE)(self._compile_passes)
        _log.debug("credential_phrase_sanitizer_ready", separators=len(self._separators))

    @property
    def separators(self) -> tuple[str, ...]:
        return self._separators

    def sanitize(self, value: str, mask_token: str) -> str:
        passes = self._passes(mask_token)
        if passes is None:
            return value
        forward, backward = passes

        replaced = 0

        def _forward(match: re.Match[str]) -> str:
            nonlocal replaced
            secret, trailing = _split_value(match.group(6))
            if not secret:
                return match.group(0)
            replaced += 1
            return "".join(match.group(1, 2, 3, 4, 5)) + mask_token + trailing

        sanitized = forward.sub(_forward, value)
        if replaced:
            return sanitized

        def _backward(match: re.Match[str]) -> str:
            secret, trailing = _split_value(match.group(1))
            if not secret:
                return match.group(0)
            return mask_token + trailing + "".join(match.group(2, 3, 4, 5, 6))

        return backward.sub(_backward, value)

    @staticmethod
    def _init_separators(custom: Iterable[str] | None) -> tuple[str, ...]:
        validated: list[str] = []
        for separator in custom or ():
            if not isinstance(separator, str) or not separator.strip() or re.search(r"\s", separator):
                raise InvalidSeparatorConfigError(separator)
            validated.append(separator)
        return tuple(dict.fromkeys((*validated, *DEFAULT_SEPARATORS)))

    @staticmethod
    def _build_separators_regex(separators: tuple[str, ...]) -> str:
        parts = []
        # Longest first so "->" wins over "-".
        for separator in sorted(separators, key=len, reverse=True):
            escaped = re.escape(separator)
            if re.fullmatch(r"\w+", separator):
                escaped = rf"\b{escaped}\b"
            parts.append(escaped)
        return "|".join(parts)

    def _compile_passes(self, mask_token: str) -> tuple[re.Pattern[str], re.Pattern[str]] | None:
        if not self._keys_regex:
            return None
        # A word already replaced by the token still counts as an intermediate word.
        parts = {
            "keys": self._keys_regex,
            "separators": self._separators_regex,
            "words": MAX_INTERMEDIATE_WORDS,
            "word": rf"(?:\w+|{re.escape(mask_token)})",
        }
        return (
            re.compile(_FORWARD_TEMPLATE.format(**parts), re.IGNORECASE),
            re.compile(_BACKWARD_TEMPLATE.format(**parts), re.IGNORECASE),
        )

    @staticmethod
    def _build_keys_regex(keys: Iterable[str]) -> str:
        # Underscored names also match when written with a hyphen or a space.
        ordered = sorted(keys, key=len, reverse=True)
        return "|".join(re.escape(key).replace("_", r"[_\- ]") for key in ordered)


__all__ = ["CredentialPhraseSanitizer", "DEFAULT_SEPARATORS", "MAX_INTERMEDIATE_WORDS"]
