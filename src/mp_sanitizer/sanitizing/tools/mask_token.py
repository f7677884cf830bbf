"""Sanitizing tools – MaskTokenValidator."""
from __future__ import annotations

import re

from mp_sanitizer.config.settings.sanitization import (
    DEFAULT_MASK_TOKEN_FORBIDDEN_PATTERN,
    DEFAULT_MASK_TOKEN_MAX_LENGTH,
)
from mp_sanitizer.config.validation import InvalidMaskTokenConfigError, InvalidPatternConfigError

_WRAPPED_RE = re.compile(r"^\[([^\[\]]*)\]$")


class MaskTokenValidator:
    """Validate and normalize the token substituted for sensitive data.

    The forbidden-content check stops the mask token itself from being used
    as a covert channel (control characters, encoded payloads, script hints).
    Valid tokens are normalized to ``[UPPERCASE]``::

        >>> MaskTokenValidator().validate(" masked ")
        '[MASKED]'
    """

    def __init__(
        self,
        forbidden_pattern: str | None = None,
        max_length: int | None = None,
    ) -> None:
        pattern = forbidden_pattern or DEFAULT_MASK_TOKEN_FORBIDDEN_PATTERN
        try:
            self._forbidden = re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise InvalidPatternConfigError(pattern, str(exc)) from exc
        self._max_length = max_length or DEFAULT_MASK_TOKEN_MAX_LENGTH

    @property
    def max_length(self) -> int:
        return self._max_length

    def validate(self, mask_token: str) -> str:
        if not isinstance(mask_token, str):
            raise InvalidMaskTokenConfigError(mask_token, "must be a string")

        clean = mask_token.strip()
        if not clean:
            raise InvalidMaskTokenConfigError(mask_token, "empty")
        if len(clean) > self._max_length:
            raise InvalidMaskTokenConfigError(
                mask_token, f"longer than {self._max_length} characters"
            )
        if self._forbidden.search(clean):
            raise InvalidMaskTokenConfigError(mask_token, "forbidden content")

        unwrapped = _WRAPPED_RE.sub(r"\1", clean).replace("[", "").replace("]", "").strip()
        if not unwrapped:
            raise InvalidMaskTokenConfigError(mask_token, "empty once unwrapped")
        return f"[{unwrapped.upper()}]"


__all__ = ["MaskTokenValidator"]
