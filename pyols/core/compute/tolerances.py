"""
Numerical thresholds and tolerance tiers.

PIVOT_TOLERANCE is the hard stop used by Gauss-Jordan elimination. The
ToleranceTier constants describe how closely results are expected to match
exact answers and are used by the test suite.
"""

from dataclasses import dataclass


# A pivot smaller than this in magnitude means the matrix is treated as
# singular. Absolute, not scaled by the matrix norm.
PIVOT_TOLERANCE = 1e-12


@dataclass(frozen=True)
class ToleranceTier:
    """rtol/atol pair for comparing numerical results."""
    rtol: float
    atol: float
    name: str
    description: str


# A @ inv(A) against the identity, entrywise
INVERSE_ROUND_TRIP = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='inverse_round_trip',
    description='A @ inv(A) equals I per entry',
)

# Coefficients fitted on noiseless data against the generating coefficients
EXACT_RECOVERY = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='exact_recovery',
    description='noiseless y = X @ beta is fitted back to beta',
)
