"""Sanitizing services – ArraySanitizer."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_sanitizer.config.settings.sanitization import DEFAULT_MASK_TOKEN, DEFAULT_MAX_DEPTH
from mp_sanitizer.sanitizing.detectors.circular import CircularReferenceDetector
from mp_sanitizer.sanitizing.detectors.keys import SensitiveKeyDetector
from mp_sanitizer.sanitizing.services.object import ObjectSanitizer
from mp_sanitizer.sanitizing.services.string import StringSanitizer
from mp_sanitizer.sanitizing.values import Shape, halt_marker, rebuild_sequence, shape_of


class ArraySanitizer:
    """Recursively sanitize mappings and sequences.

    Entry rules, in priority order:

    1. a sensitive (string) key masks the whole value, whatever its type;
    2. nested containers are recursed into;
    3. object-like values are handed to :class:`ObjectSanitizer`;
    4. strings go through :class:`StringSanitizer`;
    5. anything else is returned unchanged.

    Before a node is processed it is checked for a circular reference
    (replaced by the circular marker) and then against ``max_depth``
    (replaced by the halt marker).  Mappings come back as ``dict``; tuples,
    sets and frozensets keep their kind; other sequences become lists.
    """

    def __init__(
        self,
        string_sanitizer: StringSanitizer,
        key_detector: SensitiveKeyDetector,
        mask_token: str = DEFAULT_MASK_TOKEN,
        max_depth: int = DEFAULT_MAX_DEPTH,
        object_sanitizer: ObjectSanitizer | None = None,
    ) -> None:
        self._string_sanitizer = string_sanitizer
        self._key_detector = key_detector
        self._mask_token = mask_token
        self._max_depth = max_depth
        self._object_sanitizer = object_sanitizer or ObjectSanitizer(
            string_sanitizer, key_detector, mask_token, max_depth
        )
        self._object_sanitizer.bind_container_sanitizer(self)

    def sanitize(
        self,
        value: Mapping[Any, Any] | Any,
        mask_token: str | None = None,
        *,
        state: CircularReferenceDetector | None = None,
        depth: int = 0,
    ) -> Any:
        """Sanitize a container.

        *state* and *depth* are only passed when called from another
        traversal; an outermost call always starts with a fresh detector.
        """
        if state is None:
            state = CircularReferenceDetector()
        return self._walk(value, mask_token or self._mask_token, state, depth)

    def _walk(self, container: Any, token: str, state: CircularReferenceDetector, depth: int) -> Any:
        if state.is_circular(container):
            return state.marker()
        if depth >= self._max_depth:
            return halt_marker()
        state.mark_seen(container)

        if isinstance(container, Mapping):
            return {
                key: self._sanitize_entry(key, item, token, state, depth)
                for key, item in container.items()
            }
        items = [self._sanitize_entry(None, item, token, state, depth) for item in container]
        return rebuild_sequence(container, items)

    def _sanitize_entry(
        self,
        key: Any,
        value: Any,
        token: str,
        state: CircularReferenceDetector,
        depth: int,
    ) -> Any:
        if isinstance(key, str) and self._key_detector.is_sensitive_key(key):
            return token

        shape = shape_of(value)
        if shape in (Shape.MAPPING, Shape.SEQUENCE):
            return self._walk(value, token, state, depth + 1)
        if shape is Shape.OBJECT:
            return self._object_sanitizer.sanitize(value, token, state=state, depth=depth + 1)
        if shape is Shape.STRING:
            return self._string_sanitizer.sanitize(value, token)
        return value


__all__ = ["ArraySanitizer"]
