"""
mp_sanitizer – Sensitive-data sanitization engine for log pipelines.

Import path convention::

    from mp_sanitizer.config import SanitizationSettings
    from mp_sanitizer.sanitizing import SanitizationKernel, SanitizingService
    from mp_sanitizer.observability.logging import SanitizingProcessor
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
