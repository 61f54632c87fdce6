"""
CPU backend for OLS via the normal equations.

Forms X'X and X'y, inverts X'X with pivoted Gauss-Jordan elimination and
derives coefficients, residuals, SSR and standard errors from the inverse.
"""

from typing import Any
import numpy as np

from pyols.core.result import Result
from pyols.core.compute.timing import Timer
from pyols.core.compute.tolerances import PIVOT_TOLERANCE
from pyols.core.compute.linalg import transpose, multiply, matvec, invert
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import OLSParams


class CPUNormalEquationsBackend:
    """
    CPU backend solving (X'X) beta = X'y through an explicit inverse.

    Implements the Backend protocol for RegressionDesign -> OLSParams.
    The explicit inverse is needed anyway for the standard errors, so the
    coefficients are taken from it rather than from a separate solve.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal'

    def solve(self, design: RegressionDesign) -> Result[OLSParams]:
        """
        Solve OLS via the normal equations.

        Algorithm:
            1. X' = transpose(X)
            2. X'X (p x p Gram matrix) and X'y
            3. (X'X)^-1 by Gauss-Jordan; SingularMatrixError propagates
            4. beta = (X'X)^-1 X'y
            5. residuals r = y - X beta, ssr = r'r
            6. se_i = sqrt(mse * (X'X)^-1_ii), +inf where undefined

        Args:
            design: Validated regression design

        Returns:
            Result containing OLSParams

        Raises:
            SingularMatrixError: If X'X cannot be inverted
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        n, p = design.n, design.p
        warnings_list: list[str] = []

        # === Normal Equations ===
        with timer.section('transpose'):
            Xt = transpose(X)

        with timer.section('gram'):
            XtX = multiply(Xt, X)
            Xty = matvec(Xt, y)

        with timer.section('invert'):
            XtX_inv = invert(XtX, matrix_name="X'X")

        with timer.section('coefficients'):
            coefficients = matvec(XtX_inv, Xty)

        # === Residuals ===
        with timer.section('residuals'):
            fitted_values = matvec(X, coefficients)
            residuals = y - fitted_values
            residuals.flags.writeable = False
            ssr = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        # === Standard Errors ===
        with timer.section('std_errors'):
            df = n - p
            if df > 0:
                mse = ssr / df
            else:
                mse = float('inf')
                warnings_list.append(
                    f"No residual degrees of freedom (nobs={n}, nparams={p}); "
                    f"standard errors are undefined and reported as inf"
                )

            diag = np.diag(XtX_inv)
            valid = np.isfinite(mse) & (diag >= 0)
            std_errors = np.full(p, np.inf, dtype=np.float64)
            std_errors[valid] = np.sqrt(mse * diag[valid])

            if np.isfinite(mse) and not np.all(valid):
                bad = np.flatnonzero(~valid).tolist()
                warnings_list.append(
                    f"Negative diagonal in (X'X)^-1 at {bad}; "
                    f"standard errors reported as inf"
                )
            std_errors.flags.writeable = False

        timer.stop()

        # === Construct Result ===
        params = OLSParams(
            coefficients=coefficients,
            std_errors=std_errors,
            ssr=ssr,
            nobs=n,
            nparams=p,
            residuals=residuals,
            fitted_values=fitted_values,
            XtX_inv=XtX_inv,
            df_residual=df,
            tss=tss,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'inversion': 'gauss_jordan_partial_pivoting',
            'pivot_tolerance': PIVOT_TOLERANCE,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
