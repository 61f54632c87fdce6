"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pyols.core.result import Result

if TYPE_CHECKING:
    from pyols.regression.design import RegressionDesign


@dataclass(frozen=True)
class OLSParams:
    """
    Parameter payload for OLS regression.

    This is the immutable record computed by backends. The first five
    fields are the regression result proper; the rest are byproducts of
    the fit kept for diagnostics.

    std_errors holds +inf for every coefficient whose standard error is
    undefined (df_residual <= 0, or a negative diagonal entry in the
    inverted Gram matrix).
    """
    coefficients: NDArray[np.floating[Any]]
    std_errors: NDArray[np.floating[Any]]
    ssr: float
    nobs: int
    nparams: int
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    XtX_inv: NDArray[np.floating[Any]]
    df_residual: int
    tss: float


@dataclass
class OLSSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides read-only accessors for the
    regression record plus derived inference (t statistics, p-values,
    R-squared).
    """
    _result: Result[OLSParams]
    _design: 'RegressionDesign'

    # Cached computations
    _t_statistics: NDArray[np.floating[Any]] | None = None
    _p_values: NDArray[np.floating[Any]] | None = None

    # === Regression record ===

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def std_errors(self) -> NDArray[np.floating[Any]]:
        return self._result.params.std_errors

    @property
    def ssr(self) -> float:
        return self._result.params.ssr

    @property
    def nobs(self) -> int:
        return self._result.params.nobs

    @property
    def nparams(self) -> int:
        return self._result.params.nparams

    @property
    def params(self) -> OLSParams:
        """The underlying immutable record."""
        return self._result.params

    # === Fit byproducts ===

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def tss(self) -> float:
        return self._result.params.tss

    # === Derived statistics ===

    @property
    def mse(self) -> float:
        """Residual variance ssr / df, or +inf when df <= 0."""
        df = self.df_residual
        if df <= 0:
            return float('inf')
        return self.ssr / df

    @property
    def residual_std_error(self) -> float:
        return float(np.sqrt(self.mse))

    @property
    def vcov(self) -> NDArray[np.floating[Any]]:
        """
        Variance-covariance matrix of the coefficients, mse * (X'X)^-1.

        All entries are +inf when df <= 0.
        """
        XtX_inv = self._result.params.XtX_inv
        if self.df_residual <= 0:
            return np.full_like(XtX_inv, np.inf)
        return self.mse * XtX_inv

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.ssr == 0 else 0.0
        return 1.0 - (self.ssr / self.tss)

    @property
    def adjusted_r_squared(self) -> float:
        n = self.nobs
        df = self.df_residual
        if df <= 0 or self.tss == 0:
            return self.r_squared
        return 1.0 - (1.0 - self.r_squared) * (n - 1) / df

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """
        t-statistics for coefficients.

        An infinite standard error gives t = 0.
        """
        if self._t_statistics is not None:
            return self._t_statistics

        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / self.std_errors
        t.flags.writeable = False
        self._t_statistics = t
        return self._t_statistics

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """
        Two-sided p-values from Student's t with df_residual degrees of freedom.

        NaN for every coefficient when df <= 0.
        """
        if self._p_values is not None:
            return self._p_values

        df = self.df_residual
        if df <= 0:
            p = np.full(self.nparams, np.nan, dtype=np.float64)
        else:
            p = 2.0 * stats.t.sf(np.abs(self.t_statistics), df)
        p.flags.writeable = False
        self._p_values = p
        return self._p_values

    # === Envelope ===

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text coefficient table."""
        lines = [
            "OLS Regression Results",
            "=" * 68,
            f"Observations: {self.nobs}",
            f"Parameters: {self.nparams}",
            f"SSR: {self.ssr:.6g}",
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 68,
            f"{'':<8} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * 68,
        ]

        for i, (coef, se, t, pv) in enumerate(zip(
            self.coefficients, self.std_errors, self.t_statistics, self.p_values
        )):
            se_str = f"{se:12.6f}" if np.isfinite(se) else "         Inf"
            t_str = f"{t:10.3f}" if np.isfinite(t) else "        NA"
            p_str = f"{pv:12.4g}" if not np.isnan(pv) else "          NA"
            lines.append(f"  b[{i}]: {coef:14.6f} {se_str} {t_str} {p_str}")

        lines.append("-" * 68)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"OLSSolution(nobs={self.nobs}, nparams={self.nparams}, "
            f"ssr={self.ssr:.6g}, r_squared={self.r_squared:.4f})"
        )
