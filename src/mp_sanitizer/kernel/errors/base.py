"""Root error class for the mp-sanitizer error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a machine-readable ``code`` (``default_code`` unless
    overridden) and a ``detail`` dict.  Errors are raised at construction
    time, before any value is sanitized, so ``detail`` only ever holds
    configuration entries.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain ``{"code", "message", "detail"}`` payload for structured logs."""
        return {"code": self.code, "message": self.message, "detail": self.detail}


__all__ = ["BaseError"]
