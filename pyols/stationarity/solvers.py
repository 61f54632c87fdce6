"""
Solver dispatch for stationarity tests.

Provides classify_stationarity() (table lookup for an existing statistic)
and adf_test() (runs the Augmented Dickey-Fuller test regression through
the OLS engine, then classifies its statistic).
"""

from __future__ import annotations

import warnings
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.exceptions import SingularMatrixError, ValidationError
from pyols.core.result import Result
from pyols.core.compute.timing import Timer
from pyols.core.validation import check_array, check_1d, check_finite, check_min_samples
from pyols.regression.design import RegressionDesign
from pyols.regression.solvers import fit
from pyols.regression.solution import OLSSolution
from pyols.stationarity._table import CRITICAL_VALUES, interpolate_p_value
from pyols.stationarity.solution import (
    ADFParams,
    ADFSolution,
    StationarityParams,
    StationaritySolution,
)


DEFAULT_SIGNIFICANCE = '5%'
MIN_ADF_OBSERVATIONS = 5

Significance = Literal['1%', '5%', '10%']


def classify_stationarity(
    statistic: float,
    *,
    significance: Significance = DEFAULT_SIGNIFICANCE,
) -> StationaritySolution:
    """
    Classify a Dickey-Fuller statistic using the static table.

    The series is called stationary when the statistic is strictly below
    the critical value for the chosen significance level (-2.86 at 5%).
    The p-value is reported alongside but does not drive the decision.

    Args:
        statistic: Test statistic
        significance: '1%', '5%' or '10%'

    Returns:
        StationaritySolution

    Raises:
        ValidationError: If significance is not a known level
    """
    params = _classify(float(statistic), significance)
    return StationaritySolution(
        _result=Result(
            params=params,
            info={'method': 'table_lookup', 'rule': 'critical_value'},
            timing=None,
            backend_name='table',
        )
    )


def _classify(statistic: float, significance: str) -> StationarityParams:
    if significance not in CRITICAL_VALUES:
        raise ValidationError(
            f"significance: expected one of {sorted(CRITICAL_VALUES)}, got {significance!r}"
        )
    return StationarityParams(
        statistic=statistic,
        p_value=interpolate_p_value(statistic),
        # NaN compares False, so an undefined statistic is never stationary
        is_stationary=bool(statistic < CRITICAL_VALUES[significance]),
        critical_values=dict(CRITICAL_VALUES),
        significance=significance,
    )


def adf_test(
    series: ArrayLike,
    *,
    max_lags: int | None = None,
    autolag: Literal['aic'] | None = 'aic',
    significance: Significance = DEFAULT_SIGNIFICANCE,
) -> ADFSolution:
    """
    Augmented Dickey-Fuller unit-root test with a constant.

    Fits

        dy_t = gamma * y_{t-1} + alpha + sum_{i=1..k} delta_i * dy_{t-i} + e_t

    by OLS and reports gamma_hat / se(gamma_hat).

    With autolag='aic', every k in 0..max_lags is fitted on the same sample
    (the one max_lags leaves available) and the k with the smallest AIC is
    refitted on the longest sample it allows. A candidate whose test
    regression is singular is skipped; the error is raised only when every
    candidate is singular. With autolag=None, k = max_lags.

    Args:
        series: 1D time series, at least 5 finite values
        max_lags: Largest number of lagged differences. Defaults to
            int(12 * (n / 100) ** 0.25), and is reduced (with a
            RuntimeWarning) if the sample cannot support it.
        autolag: 'aic' or None
        significance: Level for the stationarity decision

    Returns:
        ADFSolution

    Raises:
        ValidationError: Bad options, non-finite values or too few observations
        DimensionError: If series is not 1D
        SingularMatrixError: If the test regression is singular (e.g. a
            constant series)
    """
    y = check_array(series, 'series')
    check_1d(y, 'series')
    check_finite(y, 'series')
    check_min_samples(y, MIN_ADF_OBSERVATIONS, 'series')
    if autolag not in ('aic', None):
        raise ValidationError(f"autolag: expected 'aic' or None, got {autolag!r}")
    if significance not in CRITICAL_VALUES:
        raise ValidationError(
            f"significance: expected one of {sorted(CRITICAL_VALUES)}, got {significance!r}"
        )

    n = y.shape[0]
    warnings_list: list[str] = []

    # Largest lag that leaves at least one residual degree of freedom
    lag_cap = (n - 4) // 2
    if max_lags is None:
        max_lags = min(int(12 * (n / 100) ** 0.25), lag_cap)
    else:
        if isinstance(max_lags, bool) or not isinstance(max_lags, (int, np.integer)) or max_lags < 0:
            raise ValidationError(f"max_lags: expected a non-negative integer, got {max_lags!r}")
        max_lags = int(max_lags)
        if max_lags > lag_cap:
            msg = (
                f"max_lags={max_lags} is too large for {n} observations; "
                f"using {lag_cap}"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            warnings_list.append(msg)
            max_lags = lag_cap

    dy = np.diff(y)

    timer = Timer()
    timer.start()

    if autolag == 'aic':
        with timer.section('lag_selection'):
            aics = [_candidate_aic(y, dy, k, start=max_lags) for k in range(max_lags + 1)]
            if np.all(np.isposinf(aics)):
                # Every candidate singular: surface the error from the smallest lag
                fit(_adf_design(y, dy, 0, start=max_lags))
            used_lag = int(np.argmin(aics))
            best_aic = float(aics[used_lag])
    else:
        used_lag = max_lags
        best_aic = float('nan')

    with timer.section('test_regression'):
        regression = fit(_adf_design(y, dy, used_lag, start=used_lag))
        if autolag is None:
            best_aic = _aic(regression)

    timer.stop()

    with np.errstate(divide='ignore', invalid='ignore'):
        statistic = float(regression.coefficients[0] / regression.std_errors[0])

    base = _classify(statistic, significance)
    params = ADFParams(
        statistic=base.statistic,
        p_value=base.p_value,
        is_stationary=base.is_stationary,
        critical_values=base.critical_values,
        significance=base.significance,
        used_lag=used_lag,
        nobs=regression.nobs,
        aic=best_aic,
    )

    info: dict[str, Any] = {
        'method': 'adf',
        'regression': 'c',
        'max_lags': max_lags,
        'autolag': autolag,
        'rule': 'critical_value',
    }

    return ADFSolution(
        _result=Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=regression.backend_name,
            warnings=tuple(warnings_list) + regression.warnings,
        ),
        _regression=regression,
    )


def _adf_design(
    y: NDArray[np.floating[Any]],
    dy: NDArray[np.floating[Any]],
    lags: int,
    start: int,
) -> RegressionDesign:
    """
    Test regression design for rows t = start .. n-2 of dy.

    Columns: y_{t} (the level preceding dy_t), constant, dy_{t-1} .. dy_{t-lags}.
    """
    m = dy.shape[0]
    columns = [y[start:m], np.ones(m - start)]
    columns.extend(dy[start - j:m - j] for j in range(1, lags + 1))
    return RegressionDesign.from_arrays(np.column_stack(columns), dy[start:])


def _candidate_aic(
    y: NDArray[np.floating[Any]],
    dy: NDArray[np.floating[Any]],
    lags: int,
    start: int,
) -> float:
    """AIC of one candidate lag; +inf when its test regression is singular."""
    try:
        return _aic(fit(_adf_design(y, dy, lags, start=start)))
    except SingularMatrixError:
        return float('inf')


def _aic(solution: OLSSolution) -> float:
    """Gaussian AIC, -2 loglik + 2k."""
    n = solution.nobs
    with np.errstate(divide='ignore'):
        llf = -0.5 * n * (np.log(2 * np.pi) + np.log(solution.ssr / n) + 1.0)
    return float(-2.0 * llf + 2.0 * solution.nparams)
