"""Observability – structlog processors and get_logger helper.

SanitizingProcessor - masks every event-dict value before rendering.
get_logger(name) - returns a bound structlog logger.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from mp_sanitizer.sanitizing.ports import Sanitizer

# Keys structlog itself adds or consumes; never masked.
_RESERVED_KEYS = frozenset({"level", "logger", "timestamp", "exc_info", "stack_info", "_record", "_from_structlog"})


class SanitizingProcessor:
    """structlog processor that routes the event dict through a :class:`Sanitizer`.

    The ``event`` message is sanitized as a string; every other non-reserved
    key/value pair is sanitized as one mapping, so sensitive keys such as
    ``password=...`` are masked whole.

    Usage::

        import structlog
        from mp_sanitizer.observability.logging.processors import SanitizingProcessor

        structlog.configure(processors=[SanitizingProcessor(sanitizer), ...])
    """

    def __init__(self, sanitizer: Sanitizer, mask_token: str | None = None) -> None:
        self._sanitizer = sanitizer
        self._mask_token = None if mask_token is None else sanitizer.validate_mask_token(mask_token)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        payload = {k: v for k, v in event_dict.items() if k not in _RESERVED_KEYS and k != "event"}
        sanitized = self._sanitizer.sanitize(payload, self._mask_token)
        # The result may be a marker standing in for the whole payload.
        for key in payload:
            del event_dict[key]
        if isinstance(sanitized, Mapping):
            event_dict.update(sanitized)
        else:
            event_dict["payload"] = sanitized
        if isinstance(event_dict.get("event"), str):
            event_dict["event"] = self._sanitizer.sanitize(event_dict["event"], self._mask_token)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["SanitizingProcessor", "get_logger"]
