"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from mp_sanitizer.observability.logging.processors import SanitizingProcessor

if TYPE_CHECKING:
    from mp_sanitizer.sanitizing.ports import Sanitizer


class JsonLoggerFactory:
    """Configure structlog for JSON output with sanitization installed first."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sanitizer: Sanitizer | None = None,
        mask_token: str | None = None,
    ) -> None:
        """
        Parameters
        ----------
        level:
            Root logger level.
        sanitizer:
            Sanitizer applied to every event; a default
            :class:`~mp_sanitizer.sanitizing.SanitizingService` is built when
            omitted.
        mask_token:
            Per-event mask token override passed to the sanitizer.  An invalid
            token raises
            :class:`~mp_sanitizer.config.validation.InvalidMaskTokenConfigError`
            before structlog or the root logger is touched.
        """
        if sanitizer is None:
            from mp_sanitizer.sanitizing.kernel import SanitizationKernel

            sanitizer = SanitizationKernel().sanitizer()

        shared_processors: list[Any] = [
            SanitizingProcessor(sanitizer, mask_token),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
