"""
Shared compute infrastructure for PyOLS.

This module provides timing utilities, numerical tolerances and the dense
linear algebra kernels used by the regression backend.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot threshold and comparison tolerance tiers
    linalg: Linear algebra kernels (transpose, multiply, invert)
"""

from pyols.core.compute.timing import Timer
from pyols.core.compute.tolerances import PIVOT_TOLERANCE, ToleranceTier

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "PIVOT_TOLERANCE",
    "ToleranceTier",
]
