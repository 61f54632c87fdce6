"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_regression_data(rng):
    """Intercept plus two predictors with small noise."""
    n = 100
    X = np.column_stack([
        np.ones(n),
        rng.standard_normal(n),
        rng.standard_normal(n),
    ])
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def noiseless_data(rng):
    """y = X @ beta exactly."""
    n = 50
    X = np.column_stack([
        np.ones(n),
        rng.standard_normal(n),
        rng.uniform(-5.0, 5.0, n),
        rng.standard_normal(n) * 10.0,
    ])
    beta_true = np.array([3.0, -1.25, 0.5, 2.0])
    y = X @ beta_true
    return X, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Two identical columns (perfect collinearity)."""
    n = 100
    x1 = rng.standard_normal(n)
    X = np.column_stack([np.ones(n), x1, x1])
    y = rng.standard_normal(n)
    return X, y


@pytest.fixture
def random_walk(rng):
    """Non-stationary series: cumulative sum of white noise."""
    return np.cumsum(rng.standard_normal(500))


@pytest.fixture
def ar1_series(rng):
    """Strongly mean-reverting AR(1) series, phi = 0.3."""
    n = 500
    e = rng.standard_normal(n)
    y = np.empty(n)
    y[0] = e[0]
    for t in range(1, n):
        y[t] = 0.3 * y[t - 1] + e[t]
    return y
