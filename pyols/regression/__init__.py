"""
Ordinary least squares regression.

Public API:
    fit(X, y, ...) -> OLSSolution
    fit_ols(x_flat, y, nobs, nparams, ...) -> OLSSolution

Both entry points handle:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pyols.regression import fit
    >>> result = fit(X, y)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pyols.regression.design import RegressionDesign
from pyols.regression.solution import OLSSolution, OLSParams
from pyols.regression.solvers import fit, fit_ols

__all__ = [
    "fit",
    "fit_ols",
    "RegressionDesign",
    "OLSSolution",
    "OLSParams",
]
