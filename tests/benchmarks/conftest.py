"""conftest.py for benchmarks.

The ``service`` fixture is session-scoped so every benchmark shares one
fully wired sanitizer; kernel construction (regex compilation, key
variant expansion) stays out of the measured timings.
"""

from __future__ import annotations

import pytest

from mp_sanitizer.sanitizing import SanitizationKernel


@pytest.fixture(scope="session")
def service():
    """Default-configured :class:`SanitizingService` shared by all benchmarks."""
    return SanitizationKernel().sanitizer()
