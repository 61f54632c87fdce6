"""
Tests for fit_ols(), the flattened row-major entry point.
"""

import pytest
import numpy as np

from pyols import fit_ols, invert_matrix
from pyols.regression import fit, RegressionDesign
from pyols.core.exceptions import (
    DimensionError,
    EmptyInputError,
    SingularMatrixError,
    ValidationError,
)


class TestFitOlsBasic:

    def test_closed_form_case(self):
        x_flat = [1.0, 1.0, 1.0, 2.0, 1.0, 3.0]
        result = fit_ols(x_flat, [2.0, 4.0, 6.0], nobs=3, nparams=2)
        np.testing.assert_allclose(result.coefficients, [0.0, 2.0], atol=1e-12)
        assert result.ssr == pytest.approx(0.0, abs=1e-18)
        assert result.nobs == 3
        assert result.nparams == 2

    def test_row_major_layout_matches_fit(self, simple_regression_data):
        X, y, _ = simple_regression_data
        flat = fit_ols(X.ravel(order='C'), y, *X.shape)
        full = fit(X, y)
        np.testing.assert_array_equal(flat.coefficients, full.coefficients)
        np.testing.assert_array_equal(flat.std_errors, full.std_errors)
        assert flat.ssr == full.ssr

    def test_accepts_numpy_integer_counts(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit_ols(X.ravel(), y, np.int64(X.shape[0]), np.int32(X.shape[1]))
        assert result.nparams == 3

    def test_design_from_flat(self):
        design = RegressionDesign.from_flat([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [0.0, 1.0], 2, 3)
        np.testing.assert_array_equal(design.X, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert design.df_residual == -1


class TestFitOlsValidation:

    def test_flat_length_mismatch(self):
        with pytest.raises(DimensionError, match="x_flat: expected length 6, got 5"):
            fit_ols([1.0] * 5, [1.0, 2.0, 3.0], nobs=3, nparams=2)

    def test_response_length_mismatch(self):
        with pytest.raises(DimensionError, match="y: expected length 3, got 2"):
            fit_ols([1.0, 1.0, 1.0, 2.0, 1.0, 3.0], [2.0, 4.0], nobs=3, nparams=2)

    def test_zero_nobs(self):
        with pytest.raises(EmptyInputError, match="nobs"):
            fit_ols([], [], nobs=0, nparams=2)

    def test_zero_nparams(self):
        with pytest.raises(EmptyInputError, match="nparams"):
            fit_ols([], [1.0], nobs=1, nparams=0)

    def test_empty_input_is_dimension_error(self):
        with pytest.raises(DimensionError):
            fit_ols([], [], nobs=0, nparams=0)

    def test_2d_buffer_rejected(self):
        with pytest.raises(DimensionError, match="x_flat"):
            fit_ols(np.ones((3, 2)), [1.0, 2.0, 3.0], nobs=3, nparams=2)

    def test_non_integer_counts(self):
        with pytest.raises(ValidationError):
            fit_ols([1.0, 2.0], [1.0, 2.0], nobs=2.0, nparams=1)

    def test_mismatch_checked_before_algebra(self, monkeypatch):
        import pyols.regression.backends.cpu as cpu

        called = []
        monkeypatch.setattr(cpu, "multiply", lambda *a: called.append(a))
        with pytest.raises(DimensionError):
            fit_ols([1.0] * 6, [1.0, 2.0], nobs=3, nparams=2)
        assert called == []


class TestFitOlsDegenerate:

    def test_singular_propagates_unchanged(self):
        # Two identical columns
        x_flat = [1.0, 1.0, 2.0, 2.0, 3.0, 3.0]
        with pytest.raises(SingularMatrixError) as exc_info:
            fit_ols(x_flat, [1.0, 2.0, 3.0], nobs=3, nparams=2)
        assert type(exc_info.value) is SingularMatrixError

    def test_square_system_has_infinite_se(self):
        result = fit_ols([1.0, 0.0, 0.0, 1.0], [3.0, 4.0], nobs=2, nparams=2)
        np.testing.assert_allclose(result.coefficients, [3.0, 4.0])
        assert np.all(np.isposinf(result.std_errors))


class TestInvertMatrix:
    """invert_matrix is the public alias of the Gauss-Jordan kernel."""

    def test_permutation_matrix(self):
        np.testing.assert_array_equal(
            invert_matrix([[0.0, 1.0], [1.0, 0.0]]), [[0.0, 1.0], [1.0, 0.0]]
        )

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            invert_matrix([[1.0, 1.0], [1.0, 1.0]])
