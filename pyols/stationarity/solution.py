"""
Stationarity solution types.

StationarityParams is the payload of a table classification; ADFParams adds
what the Augmented Dickey-Fuller test regression produced. The solution
classes wrap Result[...] and expose read-only properties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyols.core.result import Result

if TYPE_CHECKING:
    from pyols.regression.solution import OLSSolution


@dataclass(frozen=True)
class StationarityParams:
    """
    Parameter payload for a stationarity classification.

    Attributes
    ----------
    statistic : float
        Dickey-Fuller test statistic.
    p_value : float
        Table-interpolated p-value.
    is_stationary : bool
        True when statistic < critical_values[significance].
    critical_values : dict
        Critical values keyed by level ('1%', '5%', '10%').
    significance : str
        Level used for the decision.
    """
    statistic: float
    p_value: float
    is_stationary: bool
    critical_values: dict[str, float]
    significance: str


@dataclass(frozen=True)
class ADFParams(StationarityParams):
    """
    Parameter payload for the Augmented Dickey-Fuller test.

    Attributes
    ----------
    used_lag : int
        Number of lagged differences in the final test regression.
    nobs : int
        Observations in the final test regression.
    aic : float
        AIC of the selected lag (on the common lag-selection sample).
    """
    used_lag: int = 0
    nobs: int = 0
    aic: float = float('nan')


@dataclass
class StationaritySolution:
    """User-facing stationarity classification."""
    _result: Result[StationarityParams]

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def is_stationary(self) -> bool:
        return self._result.params.is_stationary

    @property
    def critical_values(self) -> dict[str, float]:
        return dict(self._result.params.critical_values)

    @property
    def significance(self) -> str:
        return self._result.params.significance

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        cv = ", ".join(f"{k}: {v:.2f}" for k, v in self.critical_values.items())
        verdict = "stationary" if self.is_stationary else "non-stationary"
        return "\n".join([
            "Dickey-Fuller Classification",
            "=" * 40,
            f"Statistic: {self.statistic:.6f}",
            f"p-value: {self.p_value:.4f}",
            f"Critical values: {cv}",
            f"Result ({self.significance}): {verdict}",
        ])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(statistic={self.statistic:.4f}, "
            f"p_value={self.p_value:.4f}, is_stationary={self.is_stationary})"
        )


@dataclass(repr=False)
class ADFSolution(StationaritySolution):
    """
    Augmented Dickey-Fuller test results.

    The fitted test regression is kept so its coefficients and diagnostics
    can be inspected. Column 0 is the lagged level, column 1 the constant,
    the remaining columns the lagged differences.
    """
    _regression: 'OLSSolution | None' = None

    @property
    def used_lag(self) -> int:
        return self._result.params.used_lag

    @property
    def nobs(self) -> int:
        return self._result.params.nobs

    @property
    def aic(self) -> float:
        return self._result.params.aic

    @property
    def regression(self) -> 'OLSSolution | None':
        return self._regression

    def summary(self) -> str:
        lines = [
            "Augmented Dickey-Fuller Test",
            "=" * 40,
            f"Lags used: {self.used_lag}",
            f"Observations: {self.nobs}",
            f"AIC: {self.aic:.4f}",
        ]
        base = super().summary().split("\n")[2:]
        return "\n".join(lines + base)
