"""Sanitizing – runtime value shapes and traversal markers.

Every value handed to the engine falls into exactly one :class:`Shape`;
the traversal services dispatch on it and nothing else.
"""
from __future__ import annotations

import dataclasses
import datetime
import decimal
import enum
import fractions
import inspect
import pathlib
import types
import uuid
from collections.abc import Mapping, Sequence, Set
from typing import Any

HALT_MARKER_KEY = "[SANITIZATION_HALTED]"
HALT_MARKER_VALUE = "MAX_DEPTH_REACHED"
TYPE_TAG_KEY = "__type__"
PRIVATE_FIELDS_SUFFIX = " (private fields)"

# Opaque leaves: returned exactly as received.
_SCALAR_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    decimal.Decimal,
    fractions.Fraction,
    bytes,
    bytearray,
    memoryview,
    range,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    enum.Enum,
    pathlib.PurePath,
    type,
    types.ModuleType,
)


class Shape(enum.Enum):
    STRING = "string"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    OBJECT = "object"
    SCALAR = "scalar"


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields") and hasattr(value, "_asdict")


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def shape_of(value: Any) -> Shape:
    """Classify *value*; unknown shapes end up as :attr:`Shape.SCALAR`."""
    if isinstance(value, str):
        return Shape.STRING
    if isinstance(value, _SCALAR_TYPES) or inspect.isroutine(value):
        return Shape.SCALAR
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if _is_namedtuple(value):
        return Shape.OBJECT
    if isinstance(value, (Sequence, Set)):
        return Shape.SEQUENCE
    if dataclasses.is_dataclass(value) or hasattr(value, "__dict__") or _slot_names(type(value)):
        return Shape.OBJECT
    return Shape.SCALAR


def visible_fields(obj: Any) -> dict[str, Any]:
    """Externally visible fields of an object-like value, in declaration order.

    Names starting with an underscore are private and never enumerated.
    """
    if _is_namedtuple(obj):
        raw: dict[str, Any] = dict(obj._asdict())
    elif dataclasses.is_dataclass(obj):
        raw = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj) if hasattr(obj, f.name)}
    else:
        raw = {}
        if isinstance(obj, BaseException):
            raw["args"] = obj.args
        for name in _slot_names(type(obj)):
            if hasattr(obj, name):
                raw[name] = getattr(obj, name)
        if hasattr(obj, "__dict__"):
            raw.update(vars(obj))
    return {name: value for name, value in raw.items() if not name.startswith("_")}


def type_tag(obj: Any, *, private: bool = False) -> str:
    name = type(obj).__qualname__
    return f"{name}{PRIVATE_FIELDS_SUFFIX}" if private else name


def halt_marker() -> dict[str, str]:
    """Fresh sentinel substituted where the depth limit stopped the traversal."""
    return {HALT_MARKER_KEY: HALT_MARKER_VALUE}


def rebuild_sequence(original: Any, items: list[Any]) -> Any:
    """Return *items* in the container kind of *original*.

    ``tuple``, ``set`` and ``frozenset`` keep their kind; a set whose
    sanitized members are unhashable, and any other sequence, becomes a list.
    """
    if isinstance(original, tuple):
        return tuple(items)
    if isinstance(original, (set, frozenset)):
        try:
            return frozenset(items) if isinstance(original, frozenset) else set(items)
        except TypeError:
            return items
    return items


__all__ = [
    "HALT_MARKER_KEY",
    "HALT_MARKER_VALUE",
    "PRIVATE_FIELDS_SUFFIX",
    "Shape",
    "TYPE_TAG_KEY",
    "halt_marker",
    "rebuild_sequence",
    "shape_of",
    "type_tag",
    "visible_fields",
]
