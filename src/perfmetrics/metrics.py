from __future__ import annotations

"""Portfolio performance metrics computed from a series of values.

The functions take the raw portfolio values (not returns) in chronological
order.  Undefined results, such as a ratio whose denominator is zero, are
returned as ``NaN`` or ``inf`` rather than raising; only malformed input
raises :class:`~perfmetrics.exceptions.ValidationError`.
"""

from datetime import datetime
from numbers import Real
from typing import Dict, List, Sequence

import math

import numpy as np
import pandas as pd

from .exceptions import ValidationError
from .growth import linear_regression_cagr
from .utils.times import elapsed_years
from .validation import ensure_sequence, is_timestamp


def _to_series(data: Sequence[float], name: str = "data") -> pd.Series:
    ensure_sequence(data, Real, name=name)
    return pd.Series(list(data), dtype="float64")


def _divide(numerator: float, denominator: float) -> float:
    """``numerator / denominator`` following IEEE rules instead of raising."""

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _returns(data: Sequence[float]) -> pd.Series:
    series = _to_series(data)
    # the first change is always NaN
    return series / series.shift(1) - 1


def _drawdowns(data: Sequence[float]) -> pd.Series:
    series = _to_series(data)
    return series / series.cummax() - 1


def max_as_series(data: Sequence[float]) -> List[float]:
    """Maximum of all previous values and the current one, for every value."""

    return _to_series(data).cummax().tolist()


def relative_drawdown_as_series(data: Sequence[float]) -> List[float]:
    """Relative drawdown from the running maximum; drawdowns are always ``<= 0``."""

    return _drawdowns(data).tolist()


def max_relative_drawdown(data: Sequence[float]) -> float:
    """Deepest relative drawdown of the series (``<= 0``)."""

    drawdowns = _drawdowns(data)
    return float(drawdowns.min()) if not drawdowns.empty else math.nan


def relative_change_as_series(data: Sequence[float]) -> List[float]:
    """Relative change from the previous value; the first entry is ``NaN``."""

    return _returns(data).tolist()


def average(data: Sequence[float]) -> float:
    series = _to_series(data)
    return float(series.mean()) if not series.empty else math.nan


def standard_deviation(data: Sequence[float], ddof: int = 0) -> float:
    """Standard deviation of ``data``; population (``ddof=0``) by default."""

    series = _to_series(data)
    if len(series) <= ddof:
        return math.nan
    return float(series.std(ddof=ddof))


def relative_time_in_market(data: Sequence[float]) -> float:
    """Share of periods in which the value changed.

    An unchanged value is taken to mean the portfolio was *not* in the
    market.  The first value is ignored since there is nothing to compare it
    with: for ``5, 3, 3, 4, 4, 5`` two of five changes are zero, so the result
    is ``0.6``.
    """

    changes = _returns(data).iloc[1:]
    unchanged = int((changes == 0).sum())
    return 1 - _divide(unchanged, len(changes))


def _ensure_dates(start_date: datetime, end_date: datetime) -> None:
    for value, name in ((start_date, "start_date"), (end_date, "end_date")):
        if not is_timestamp(value):
            raise ValidationError(
                f"Parameter {name} must be an instance of datetime, is {value} instead.",
                argument=name,
                offending=value,
            )
    if start_date >= end_date:
        raise ValidationError(
            f"Parameter start_date ({start_date}) must lie before end_date ({end_date}).",
            argument="start_date",
            offending=(start_date, end_date),
        )


def cagr(data: Sequence[float], start_date: datetime, end_date: datetime) -> float:
    """Compound annual growth rate between the first and last value.

    ``(last / first) ** (1 / years) - 1`` where a year has 365 days and the
    span is ``end_date - start_date``.
    """

    _ensure_dates(start_date, end_date)
    series = _to_series(data)
    if series.empty:
        return math.nan
    years = elapsed_years(start_date, end_date)
    with np.errstate(divide="ignore", invalid="ignore"):
        growth = np.float64(series.iloc[-1]) / np.float64(series.iloc[0])
        return float(growth ** (1 / years) - 1)


def calmar_ratio(data: Sequence[float], start_date: datetime, end_date: datetime) -> float:
    """CAGR divided by the absolute maximum drawdown."""

    mdd = abs(max_relative_drawdown(data))
    return _divide(cagr(data, start_date, end_date), mdd)


def sortino_ratio(data: Sequence[float]) -> float:
    """Sortino ratio following Red Rock Capital's "Sortino: A Sharper Ratio".

    The mean relative change is divided by the downside deviation, the root
    mean square of the negative changes only.
    """

    returns = _returns(data).iloc[1:]
    downs = returns[returns < 0]
    if returns.empty or downs.empty:
        return math.nan
    downside = math.sqrt(float((downs**2).sum()) / len(downs))
    return _divide(float(returns.mean()), downside)


def sharpe_ratio(data: Sequence[float], risk_free_rate: float = 0.0) -> float:
    """Mean relative change in excess of ``risk_free_rate`` over its deviation.

    ``risk_free_rate`` is per period, matching the spacing of ``data``.  The
    ratio is not annualised.
    """

    returns = _returns(data).iloc[1:]
    if returns.empty:
        return math.nan
    return _divide(float(returns.mean()) - risk_free_rate, float(returns.std(ddof=0)))


def evaluate(
    values: Sequence[float],
    timestamps: Sequence[datetime] | None = None,
) -> Dict[str, float]:
    """Compute a set of basic metrics from a series of portfolio values.

    When ``timestamps`` are given the date based metrics (``cagr``,
    ``calmar`` and the regression based ``robust_cagr``) are included too.
    """

    metrics = {
        "max_drawdown": max_relative_drawdown(values),
        "sortino": sortino_ratio(values),
        "sharpe": sharpe_ratio(values),
        "time_in_market": relative_time_in_market(values),
    }
    if timestamps is not None:
        metrics["robust_cagr"] = linear_regression_cagr(values, timestamps)
        timestamps = list(timestamps)
        if len(timestamps) < 2:
            metrics["cagr"] = metrics["calmar"] = math.nan
        else:
            start, end = timestamps[0], timestamps[-1]
            metrics["cagr"] = cagr(values, start, end)
            metrics["calmar"] = calmar_ratio(values, start, end)
    return metrics


__all__ = [
    "max_as_series",
    "relative_drawdown_as_series",
    "max_relative_drawdown",
    "relative_change_as_series",
    "average",
    "standard_deviation",
    "relative_time_in_market",
    "cagr",
    "calmar_ratio",
    "sortino_ratio",
    "sharpe_ratio",
    "evaluate",
]
