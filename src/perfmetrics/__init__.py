"""Portfolio performance statistics.

The headline function is :func:`linear_regression_cagr`, a growth rate
estimated from linear regressions over overlapping yearly windows.  The
usual series statistics (drawdown, CAGR, Sortino, Sharpe, Calmar) live in
:mod:`perfmetrics.metrics` and are re-exported here.
"""

from .exceptions import LengthMismatchError, PerfMetricsError, ValidationError
from .growth import (
    GrowthSample,
    growth_samples,
    linear_regression_cagr,
    weighted_growth,
    window_growth_sample,
)
from .metrics import (
    average,
    cagr,
    calmar_ratio,
    evaluate,
    max_as_series,
    max_relative_drawdown,
    relative_change_as_series,
    relative_drawdown_as_series,
    relative_time_in_market,
    sharpe_ratio,
    sortino_ratio,
    standard_deviation,
)
from .regression import LinearFit, simple_linear_regression
from .utils.times import DAY_IN_MS, YEAR_IN_MS, get_times
from .validation import ensure_sequence
from .windows import Observation, get_windows, partition

__version__ = "0.1.0"

__all__ = [
    "DAY_IN_MS",
    "YEAR_IN_MS",
    "GrowthSample",
    "LengthMismatchError",
    "LinearFit",
    "Observation",
    "PerfMetricsError",
    "ValidationError",
    "average",
    "cagr",
    "calmar_ratio",
    "ensure_sequence",
    "evaluate",
    "get_times",
    "get_windows",
    "growth_samples",
    "linear_regression_cagr",
    "max_as_series",
    "max_relative_drawdown",
    "partition",
    "relative_change_as_series",
    "relative_drawdown_as_series",
    "relative_time_in_market",
    "sharpe_ratio",
    "simple_linear_regression",
    "sortino_ratio",
    "standard_deviation",
    "weighted_growth",
    "window_growth_sample",
]
