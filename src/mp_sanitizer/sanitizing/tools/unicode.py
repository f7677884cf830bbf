"""Sanitizing tools – UnicodeNormalizer."""
from __future__ import annotations

import unicodedata


class UnicodeNormalizer:
    """Canonicalize text so visually equivalent strings compare equal.

    Uses NFKC (compatibility composition): ``"ｐａｓｓｗｏｒｄ"`` and
    ``"password"`` normalize to the same string.  Never raises; input that
    cannot be normalized is returned unchanged.
    """

    def __init__(self, form: str = "NFKC") -> None:
        self._form = form

    def normalize(self, value: str) -> str:
        try:
            return unicodedata.normalize(self._form, value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return value


__all__ = ["UnicodeNormalizer"]
