"""
Linear algebra kernels for PyOLS.

All functions follow these conventions:
    - Inputs are array-likes, converted to float64
    - Outputs are freshly allocated, C-contiguous and read-only
    - Errors are raised immediately with clear messages

Submodules:
    gauss_jordan: transpose, multiply, matvec, and pivoted inversion
"""

from pyols.core.compute.linalg.gauss_jordan import (
    transpose,
    multiply,
    matvec,
    invert,
)

__all__ = [
    "transpose",
    "multiply",
    "matvec",
    "invert",
]
