"""Sanitizing services – ObjectSanitizer."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mp_sanitizer.config.settings.sanitization import DEFAULT_MASK_TOKEN, DEFAULT_MAX_DEPTH
from mp_sanitizer.sanitizing.detectors.circular import CircularReferenceDetector
from mp_sanitizer.sanitizing.detectors.keys import SensitiveKeyDetector
from mp_sanitizer.sanitizing.services.string import StringSanitizer
from mp_sanitizer.sanitizing.values import (
    TYPE_TAG_KEY,
    Shape,
    halt_marker,
    shape_of,
    type_tag,
    visible_fields,
)

if TYPE_CHECKING:
    from mp_sanitizer.sanitizing.services.array import ArraySanitizer


class ObjectSanitizer:
    """Turn an object-like value into a sanitized, type-tagged ``dict``.

    Only externally visible fields are walked (dataclass and namedtuple
    fields, public instance attributes).  The record always starts with a
    ``"__type__"`` entry; an object without visible fields becomes
    ``{"__type__": "<Name> (private fields)"}``.

    Containers found in fields go back to :class:`ArraySanitizer` with the
    same traversal state and depth counter.
    """

    def __init__(
        self,
        string_sanitizer: StringSanitizer,
        key_detector: SensitiveKeyDetector,
        mask_token: str = DEFAULT_MASK_TOKEN,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._string_sanitizer = string_sanitizer
        self._key_detector = key_detector
        self._mask_token = mask_token
        self._max_depth = max_depth
        self._container_sanitizer: ArraySanitizer | None = None

    def bind_container_sanitizer(self, container_sanitizer: ArraySanitizer) -> None:
        self._container_sanitizer = container_sanitizer

    def sanitize(
        self,
        obj: Any,
        mask_token: str | None = None,
        *,
        state: CircularReferenceDetector | None = None,
        depth: int = 0,
    ) -> dict[str, Any]:
        if state is None:
            state = CircularReferenceDetector()
        return self._walk(obj, mask_token or self._mask_token, state, depth)

    def _walk(self, obj: Any, token: str, state: CircularReferenceDetector, depth: int) -> dict[str, Any]:
        if state.is_circular(obj):
            return state.marker()
        if depth >= self._max_depth:
            return halt_marker()
        state.mark_seen(obj)

        fields = visible_fields(obj)
        if not fields:
            return {TYPE_TAG_KEY: type_tag(obj, private=True)}

        record: dict[str, Any] = {TYPE_TAG_KEY: type_tag(obj)}
        for name, value in fields.items():
            record[name] = self._sanitize_field(name, value, token, state, depth)
        return record

    def _sanitize_field(
        self,
        name: str,
        value: Any,
        token: str,
        state: CircularReferenceDetector,
        depth: int,
    ) -> Any:
        if self._key_detector.is_sensitive_key(name):
            return token

        shape = shape_of(value)
        if shape in (Shape.MAPPING, Shape.SEQUENCE):
            return self._containers().sanitize(value, token, state=state, depth=depth + 1)
        if shape is Shape.OBJECT:
            return self._walk(value, token, state, depth + 1)
        if shape is Shape.STRING:
            return self._string_sanitizer.sanitize(value, token)
        return value

    def _containers(self) -> ArraySanitizer:
        if self._container_sanitizer is None:
            from mp_sanitizer.sanitizing.services.array import ArraySanitizer

            self._container_sanitizer = ArraySanitizer(
                self._string_sanitizer,
                self._key_detector,
                self._mask_token,
                self._max_depth,
                object_sanitizer=self,
            )
        return self._container_sanitizer


__all__ = ["ObjectSanitizer"]
