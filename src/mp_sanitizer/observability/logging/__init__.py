"""Observability – structured logging helpers wired to the sanitizer."""
from mp_sanitizer.observability.logging.factory import JsonLoggerFactory
from mp_sanitizer.observability.logging.filters import SanitizingLogFilter
from mp_sanitizer.observability.logging.processors import SanitizingProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "SanitizingLogFilter",
    "SanitizingProcessor",
    "get_logger",
]
