"""
Static critical-value table for Dickey-Fuller statistics (constant, no trend).

The table maps a test statistic to an approximate p-value. It is built once
at import time and never modified. Lookups clamp at the table edges and
interpolate linearly between bracketing entries.
"""

from types import MappingProxyType
import numpy as np


# (statistic, p-value) pairs, ascending in statistic
CRITICAL_VALUE_TABLE: tuple[tuple[float, float], ...] = (
    (-4.0, 0.01),
    (-3.5, 0.025),
    (-3.0, 0.05),
    (-2.5, 0.10),
    (-2.0, 0.20),
    (-1.5, 0.50),
    (-1.0, 0.75),
    (0.0, 0.99),
)

# Asymptotic critical values keyed by significance level
CRITICAL_VALUES = MappingProxyType({
    '1%': -3.43,
    '5%': -2.86,
    '10%': -2.57,
})

_STATISTICS = np.array([s for s, _ in CRITICAL_VALUE_TABLE], dtype=np.float64)
_P_VALUES = np.array([p for _, p in CRITICAL_VALUE_TABLE], dtype=np.float64)
_STATISTICS.flags.writeable = False
_P_VALUES.flags.writeable = False


def interpolate_p_value(statistic: float) -> float:
    """
    Approximate p-value for a Dickey-Fuller statistic.

    Statistics at or beyond either end of the table get that end's p-value.
    NaN maps to the largest p-value so that it never reads as significant.
    """
    statistic = float(statistic)
    if np.isnan(statistic):
        return float(_P_VALUES[-1])
    if statistic <= _STATISTICS[0]:
        return float(_P_VALUES[0])
    if statistic >= _STATISTICS[-1]:
        return float(_P_VALUES[-1])

    hi = int(np.searchsorted(_STATISTICS, statistic, side='right'))
    lo = hi - 1
    x1, x2 = _STATISTICS[lo], _STATISTICS[hi]
    y1, y2 = _P_VALUES[lo], _P_VALUES[hi]
    return float(y1 + (statistic - x1) * (y2 - y1) / (x2 - x1))
