"""
Stationarity classification.

Public API:
    classify_stationarity(statistic) -> StationaritySolution
    adf_test(series, ...) -> ADFSolution
    interpolate_p_value(statistic) -> float

The p-value table and critical values are static and read-only.
"""

from pyols.stationarity._table import (
    CRITICAL_VALUE_TABLE,
    CRITICAL_VALUES,
    interpolate_p_value,
)
from pyols.stationarity.solution import (
    StationarityParams,
    StationaritySolution,
    ADFParams,
    ADFSolution,
)
from pyols.stationarity.solvers import (
    DEFAULT_SIGNIFICANCE,
    MIN_ADF_OBSERVATIONS,
    classify_stationarity,
    adf_test,
)

__all__ = [
    "classify_stationarity",
    "adf_test",
    "interpolate_p_value",
    "CRITICAL_VALUE_TABLE",
    "CRITICAL_VALUES",
    "DEFAULT_SIGNIFICANCE",
    "MIN_ADF_OBSERVATIONS",
    "StationarityParams",
    "StationaritySolution",
    "ADFParams",
    "ADFSolution",
]
