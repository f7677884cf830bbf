"""Observability – structured logging wired to the sanitizer."""

from mp_sanitizer.observability.logging import (
    JsonLoggerFactory,
    SanitizingLogFilter,
    SanitizingProcessor,
    get_logger,
)

__all__ = [
    "JsonLoggerFactory",
    "SanitizingLogFilter",
    "SanitizingProcessor",
    "get_logger",
]
