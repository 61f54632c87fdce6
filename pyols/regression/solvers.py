"""
Solver dispatch for regression.

This module provides fit() and fit_ols() (public API) and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pyols.core.exceptions import ValidationError
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import OLSSolution
from pyols.regression.backends.cpu import CPUNormalEquationsBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_normal']


def fit(
    X: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> OLSSolution:
    """
    Fit an ordinary least squares regression.

    Solves the normal equations (X'X) beta = X'y. No intercept is added:
    include a column of ones in X if the model needs one.

    Args:
        X: Design matrix (nobs x nparams), or a prebuilt RegressionDesign
        y: Response vector (nobs,). Required unless X is a RegressionDesign.
        backend: Computational backend ('auto', 'cpu', 'cpu_normal')

    Returns:
        OLSSolution with coefficients, standard errors, SSR and diagnostics

    Raises:
        ValidationError: If inputs are not numeric
        EmptyInputError: If X or y is empty
        DimensionError: If len(y) != X.rows
        SingularMatrixError: If X'X cannot be inverted (collinear
            predictors, or nobs < nparams)

    Example:
        >>> import numpy as np
        >>> from pyols.regression import fit
        >>>
        >>> X = np.column_stack([np.ones(3), [1.0, 2.0, 3.0]])
        >>> result = fit(X, [2.0, 4.0, 6.0])
        >>> result.coefficients
        array([0., 2.])
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(X, RegressionDesign):
        if y is not None:
            raise ValidationError("y must not be given together with a RegressionDesign")
        design = X
    else:
        if y is None:
            raise ValidationError("y required when X is an array")
        design = RegressionDesign.from_arrays(X, y)

    return _solve(design, backend)


def fit_ols(
    x_flat: ArrayLike,
    y: ArrayLike,
    nobs: int,
    nparams: int,
    *,
    backend: BackendChoice = 'auto',
) -> OLSSolution:
    """
    Fit OLS from a flattened row-major design matrix.

    Element (i, j) of the design matrix is x_flat[i * nparams + j]. All
    dimension checks happen before any matrix is formed.

    Args:
        x_flat: Design matrix values, length nobs * nparams
        y: Response vector, length nobs
        nobs: Number of observations
        nparams: Number of model parameters
        backend: Computational backend ('auto', 'cpu', 'cpu_normal')

    Returns:
        OLSSolution

    Raises:
        EmptyInputError: If nobs or nparams is zero
        DimensionError: If len(x_flat) != nobs * nparams or len(y) != nobs
        SingularMatrixError: If X'X cannot be inverted
    """
    design = RegressionDesign.from_flat(x_flat, y, nobs, nparams)
    return _solve(design, backend)


def _solve(design: RegressionDesign, backend: str) -> OLSSolution:
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return OLSSolution(_result=result, _design=design)


def _get_backend(choice: str) -> CPUNormalEquationsBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_normal'):
        return CPUNormalEquationsBackend()
    raise ValidationError(
        f"Unknown backend: {choice!r}. Use 'auto', 'cpu' or 'cpu_normal'."
    )
