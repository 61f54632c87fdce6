"""
Regression Design.

Design holds the validated design matrix X and response y. It is the only
place regression inputs are checked; backends trust it completely.

The caller owns the model specification: if an intercept is wanted, X
must already contain a column of ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_consistent_length,
    check_length,
    check_not_empty,
    check_positive_count,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Validated regression inputs.

    Immutable after construction; X and y are read-only arrays.

    Construction:
        RegressionDesign.from_arrays(X, y)                   # 2D X
        RegressionDesign.from_flat(x_flat, y, nobs, nparams) # row-major buffer
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Build Design from a 2D design matrix and a response vector.

        A 1D X is treated as a single column. A column vector y is
        flattened.

        Raises:
            ValidationError: If inputs are not numeric
            EmptyInputError: If X or y has no elements
            DimensionError: If len(y) != X.rows
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_not_empty(X_arr, 'X')
        check_not_empty(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))

        n, p = X_arr.shape
        return cls._build(X_arr, y_arr, n, p)

    @classmethod
    def from_flat(
        cls,
        x_flat: ArrayLike,
        y: ArrayLike,
        nobs: int,
        nparams: int,
    ) -> RegressionDesign:
        """
        Build Design from a flattened row-major design matrix.

        Element (i, j) of X is x_flat[i * nparams + j].

        Raises:
            EmptyInputError: If nobs or nparams is zero
            DimensionError: If len(x_flat) != nobs * nparams or len(y) != nobs
        """
        nobs = check_positive_count(nobs, 'nobs')
        nparams = check_positive_count(nparams, 'nparams')

        x_arr = check_array(x_flat, 'x_flat')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x_flat')
        check_1d(y_arr, 'y')
        check_length(x_arr, nobs * nparams, 'x_flat')
        check_length(y_arr, nobs, 'y')

        return cls._build(x_arr.reshape(nobs, nparams), y_arr, nobs, nparams)

    @classmethod
    def _build(
        cls,
        X: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        n: int,
        p: int,
    ) -> RegressionDesign:
        X = np.array(X, dtype=np.float64, order='C')
        y = np.array(y, dtype=np.float64)
        X.flags.writeable = False
        y.flags.writeable = False
        return cls(_X=X, _y=y, _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (nobs x nparams)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (nobs,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of model parameters (columns of X)."""
        return self._p

    @property
    def df_residual(self) -> int:
        """Residual degrees of freedom, nobs - nparams. May be <= 0."""
        return self._n - self._p
