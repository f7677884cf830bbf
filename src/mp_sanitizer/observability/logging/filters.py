"""Observability – SanitizingLogFilter for stdlib logging."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mp_sanitizer.sanitizing.ports import Sanitizer


class SanitizingLogFilter(logging.Filter):
    """Applies a :class:`Sanitizer` to log record msg and args before emission."""

    def __init__(self, sanitizer: Sanitizer, name: str = "", mask_token: str | None = None) -> None:
        super().__init__(name)
        self._sanitizer = sanitizer
        self._mask_token = None if mask_token is None else sanitizer.validate_mask_token(mask_token)

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if isinstance(record.msg, str) and record.args:
            # Merge first: "password: %s" only becomes a credential phrase once formatted.
            try:
                message = record.getMessage()
            except (KeyError, TypeError, ValueError):
                pass
            else:
                record.msg = self._sanitizer.sanitize(message, self._mask_token)
                record.args = None
                return True

        record.msg = self._sanitizer.sanitize(record.msg, self._mask_token)
        if isinstance(record.args, dict):
            record.args = self._sanitizer.sanitize(record.args, self._mask_token)
        elif isinstance(record.args, tuple):
            sanitized = self._sanitizer.sanitize(list(record.args), self._mask_token)
            # A marker in place of the list means no argument survived.
            record.args = tuple(sanitized) if isinstance(sanitized, list) else None
        return True


__all__ = ["SanitizingLogFilter"]
