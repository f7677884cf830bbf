"""Kernel error hierarchy - public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError                      (application.py)
        └── ConfigError                       (mp_sanitizer.config.validation)
            ├── MissingRequiredSettingError
            ├── InvalidSettingValueError
            └── InvalidSanitizationConfigError
                ├── InvalidSensitiveKeyConfigError
                ├── InvalidPatternConfigError
                ├── InvalidSeparatorConfigError
                └── InvalidMaskTokenConfigError
"""

from mp_sanitizer.kernel.errors.application import ApplicationError
from mp_sanitizer.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
