"""
PyOLS: ordinary least squares via the normal equations.

Computes OLS coefficients, residual sum of squares and standard errors by
inverting X'X with pivoted Gauss-Jordan elimination, and classifies
Dickey-Fuller statistics against a static critical-value table.

Submodules:
    regression: fit(), fit_ols()
    stationarity: classify_stationarity(), adf_test()
    core: exceptions, Result envelope, validation, linear algebra kernels
"""

__version__ = "0.1.0"

from pyols.core.compute.linalg import invert as invert_matrix
from pyols.regression import fit, fit_ols
from pyols.stationarity import classify_stationarity, adf_test
from pyols.core.exceptions import (
    PyOLSError,
    DimensionError,
    EmptyInputError,
    NotSquareError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "invert_matrix",
    "fit",
    "fit_ols",
    "classify_stationarity",
    "adf_test",
    "PyOLSError",
    "DimensionError",
    "EmptyInputError",
    "NotSquareError",
    "SingularMatrixError",
]
