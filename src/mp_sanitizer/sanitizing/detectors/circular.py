"""Sanitizing detectors – CircularReferenceDetector."""
from __future__ import annotations

from typing import Any

CIRCULAR_REFERENCE_MARKER_KEY = "[CIRCULAR_REFERENCE_DETECTED]"

# Immutable values cannot close a cycle on their own; the interpreter may
# also share equal tuple/str constants, so they are never tracked.
_UNTRACKED = (str, bytes, bytearray, tuple, frozenset, int, float, complex, type(None))


class CircularReferenceDetector:
    """Identity registry for one top-level traversal.

    Nodes go from *unseen* to *seen*; seeing a node twice means it is a
    shared or self reference.  Identity is ``id()``, never equality: two
    distinct lists holding the same items are not a cycle.  The registry
    keeps a strong reference to every node so an ``id`` cannot be recycled
    while the traversal is running.

    Instances are not thread-safe.  Create one per top-level call.
    """

    def __init__(self) -> None:
        self._seen: dict[int, Any] = {}

    def reset(self) -> None:
        self._seen = {}

    def is_circular(self, ref: Any) -> bool:
        if isinstance(ref, _UNTRACKED):
            return False
        return id(ref) in self._seen

    def mark_seen(self, ref: Any) -> None:
        if isinstance(ref, _UNTRACKED):
            return
        self._seen[id(ref)] = ref

    @staticmethod
    def marker() -> dict[str, bool]:
        """Fresh sentinel substituted where a cycle was cut."""
        return {CIRCULAR_REFERENCE_MARKER_KEY: True}

    @property
    def seen_count(self) -> int:
        return len(self._seen)


__all__ = ["CIRCULAR_REFERENCE_MARKER_KEY", "CircularReferenceDetector"]
