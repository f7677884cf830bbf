"""Sanitizing – Sanitizer port consumed by the log pipeline."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sanitizer(Protocol):
    """Port: mask sensitive data before a value reaches a log line."""

    def sanitize(self, value: Any, mask_token: str | None = None) -> Any: ...

    def is_sensitive(self, value: Any) -> bool: ...

    def validate_mask_token(self, mask_token: str) -> str: ...


__all__ = ["Sanitizer"]
