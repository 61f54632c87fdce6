"""
Tests for adf_test().

The test regression is fitted with the OLS engine, so the statistic can be
checked against a direct fit of the same design.
"""

import warnings

import pytest
import numpy as np

from pyols import adf_test, fit
from pyols.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pyols.stationarity import ADFSolution, MIN_ADF_OBSERVATIONS


class TestADFBasic:

    def test_mean_reverting_series_is_stationary(self, ar1_series):
        result = adf_test(ar1_series)
        assert isinstance(result, ADFSolution)
        assert result.is_stationary is True
        assert result.statistic < -5.0
        assert result.p_value == 0.01

    def test_random_walk_less_negative_than_ar1(self, random_walk, ar1_series):
        assert adf_test(random_walk).statistic > adf_test(ar1_series).statistic

    def test_accelerating_series_not_stationary(self):
        y = 0.01 * np.arange(200.0) ** 2
        result = adf_test(y, max_lags=0, autolag=None)
        assert result.statistic > 0.0
        assert result.is_stationary is False

    def test_statistic_matches_direct_fit(self, ar1_series):
        result = adf_test(ar1_series, max_lags=0, autolag=None)
        y = ar1_series
        dy = np.diff(y)
        X = np.column_stack([y[:-1], np.ones(len(dy))])
        direct = fit(X, dy)
        expected = direct.coefficients[0] / direct.std_errors[0]
        assert result.statistic == pytest.approx(expected, rel=1e-12)
        assert result.nobs == len(dy)

    def test_fixed_lags(self, ar1_series):
        result = adf_test(ar1_series, max_lags=3, autolag=None)
        assert result.used_lag == 3
        assert result.nobs == len(ar1_series) - 1 - 3
        assert result.regression.nparams == 5
        assert np.isfinite(result.aic)

    def test_autolag_within_bounds(self, ar1_series):
        result = adf_test(ar1_series, max_lags=4)
        assert 0 <= result.used_lag <= 4
        assert result.info['max_lags'] == 4
        assert result.info['autolag'] == 'aic'

    def test_default_max_lags(self, ar1_series):
        result = adf_test(ar1_series)
        assert result.info['max_lags'] == int(12 * (len(ar1_series) / 100) ** 0.25)

    def test_regression_columns(self, ar1_series):
        result = adf_test(ar1_series, max_lags=2, autolag=None)
        X = result.regression._design.X
        np.testing.assert_array_equal(X[:, 1], 1.0)
        np.testing.assert_array_equal(X[:, 0], ar1_series[2:-1])

    def test_minimum_length_series(self):
        result = adf_test([1.0, 3.0, 2.0, 5.0, 4.0])
        assert result.used_lag == 0
        assert result.regression.df_residual >= 1

    def test_summary(self, ar1_series):
        s = adf_test(ar1_series).summary()
        assert "Augmented Dickey-Fuller" in s
        assert "Lags used" in s


class TestADFValidation:

    def test_too_short(self):
        with pytest.raises(ValidationError, match=f"at least {MIN_ADF_OBSERVATIONS}"):
            adf_test([1.0, 2.0, 3.0, 4.0])

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            adf_test([1.0, 2.0, np.nan, 4.0, 5.0, 6.0])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            adf_test(np.ones((10, 2)))

    def test_bad_autolag(self, ar1_series):
        with pytest.raises(ValidationError, match="autolag"):
            adf_test(ar1_series, autolag='bic')

    def test_bad_significance(self, ar1_series):
        with pytest.raises(ValidationError, match="significance"):
            adf_test(ar1_series, significance='3%')

    def test_negative_max_lags(self, ar1_series):
        with pytest.raises(ValidationError, match="max_lags"):
            adf_test(ar1_series, max_lags=-1)

    def test_max_lags_reduced_with_warning(self, rng):
        y = rng.standard_normal(12).cumsum()
        with pytest.warns(RuntimeWarning, match="too large"):
            result = adf_test(y, max_lags=10, autolag=None)
        assert result.used_lag == (12 - 4) // 2
        assert any("too large" in w for w in result.warnings)

    def test_no_warning_for_default_lags(self, ar1_series):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            adf_test(ar1_series)

    def test_constant_series_is_singular(self):
        with pytest.raises(SingularMatrixError):
            adf_test(np.full(30, 2.5), max_lags=0, autolag=None)

    def test_constant_series_singular_for_every_lag(self):
        with pytest.raises(SingularMatrixError):
            adf_test(np.full(30, 2.5), max_lags=3)


class TestADFLagSearch:
    """Singular candidate lags are skipped, not fatal."""

    def test_singular_higher_lags_skipped(self):
        # Differences of sin(t) + 0.1 t obey a two-term linear recurrence,
        # so three or more lagged differences are collinear.
        t = np.arange(60.0)
        y = np.sin(t) + 0.1 * t
        with pytest.raises(SingularMatrixError):
            adf_test(y, max_lags=3, autolag=None)

        result = adf_test(y)
        assert result.info['max_lags'] == 10
        assert result.used_lag <= 2
        assert result.regression.nparams == result.used_lag + 2

    def test_fixed_lag_on_same_series(self):
        t = np.arange(60.0)
        y = np.sin(t) + 0.1 * t
        result = adf_test(y, max_lags=0, autolag=None)
        assert np.isfinite(result.statistic)
        assert result.used_lag == 0
