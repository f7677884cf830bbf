"""Sanitizing detectors – SensitiveKeyDetector."""
from __future__ import annotations

import re
from typing import Iterable

from mp_sanitizer.config.validation import InvalidSensitiveKeyConfigError
from mp_sanitizer.observability.logging.processors import get_logger
from mp_sanitizer.sanitizing.tools.unicode import UnicodeNormalizer

_log = get_logger(__name__)

# English and Brazilian Portuguese field names.
DEFAULT_SENSITIVE_KEYS: tuple[str, ...] = (
    "password", "token", "api_key", "secret", "authorization", "credit_card", "ssn",
    "senha", "chave_api", "segredo", "autorizacao", "cartao_credito", "cpf", "cnpj",
    "acesso_token",
)

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1F\x7F]")
_FUZZY_SEPARATORS_RE = re.compile(r"[_\-@]")
_VOWELS_RE = re.compile(r"[aeiouáéíóúàèìòùãõâêîôûäëïöü]", re.IGNORECASE)


class SensitiveKeyDetector:
    """Decide whether a field name is sensitive.

    Every configured key is expanded into four variants:

    * lowercased (and trimmed);
    * Unicode-canonicalized (NFKC);
    * fuzzy, with ``_``, ``-`` and ``@`` removed;
    * vowel-less (accented vowels included).

    A candidate key is sensitive when any of its own four variants is in the
    prepared set, so ``API_KEY``, ``apikey``, ``api-key`` and ``ApiKey`` all
    hit a single ``api_key`` entry.
    """

    def __init__(
        self,
        custom_keys: Iterable[str] = (),
        normalizer: UnicodeNormalizer | None = None,
    ) -> None:
        self._normalizer = normalizer or UnicodeNormalizer()
        custom = list(custom_keys)
        self._validate_keys(custom)
        prepared: set[str] = set()
        for key in (*DEFAULT_SENSITIVE_KEYS, *custom):
            prepared.update(self._variants(key))
        prepared.discard("")
        self._prepared: frozenset[str] = frozenset(prepared)
        _log.debug(
            "sensitive_key_detector_ready",
            custom_keys=len(custom),
            prepared_keys=len(self._prepared),
        )

    @property
    def prepared_keys(self) -> tuple[str, ...]:
        """All prepared variants, sorted (audit / debugging accessor)."""
        return tuple(sorted(self._prepared))

    def is_sensitive_key(self, key: str) -> bool:
        if not isinstance(key, str):
            return False
        return any(variant in self._prepared for variant in self._variants(key))

    def _variants(self, key: str) -> tuple[str, str, str, str]:
        base = key.strip().lower()
        return (
            base,
            self._normalizer.normalize(base),
            _FUZZY_SEPARATORS_RE.sub("", base),
            _VOWELS_RE.sub("", base),
        )

    @staticmethod
    def _validate_keys(keys: list[str]) -> None:
        for key in keys:
            if not isinstance(key, str) or not key.strip() or _CONTROL_CHARS_RE.search(key):
                raise InvalidSensitiveKeyConfigError(key)


__all__ = ["DEFAULT_SENSITIVE_KEYS", "SensitiveKeyDetector"]
