"""Growth rate estimated by linear regressions over overlapping yearly windows.

A single regression over the whole series depends heavily on where the
series starts and ends.  Instead the series is cut into one year windows that
advance by six months, a line is fitted to every window and the implied one
year growth of each line is averaged, weighted by how much of a year the
window actually spans.

The pipeline is split into three plain functions so each stage can be used
and tested on its own::

    windows = get_windows(observations, YEAR_IN_MS, YEAR_IN_MS / 2)
    samples = growth_samples(windows)
    rate = weighted_growth(samples)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from numbers import Real
from typing import Any, Iterable, List, Sequence

from .exceptions import LengthMismatchError
from .regression import simple_linear_regression
from .utils.logging import get_logger
from .utils.times import YEAR_IN_MS, elapsed_years
from .validation import ensure_consistent_timezones, ensure_sequence
from .windows import Observation, get_windows

log = get_logger(__name__)

WINDOW_SIZE_MS = YEAR_IN_MS
WINDOW_OVERLAP_MS = YEAR_IN_MS / 2


@dataclass(frozen=True)
class GrowthSample:
    """Annual growth implied by one window and the part of a year it spans."""

    rate: float
    fraction_of_year: float


def window_growth_sample(window: Sequence[Any]) -> GrowthSample | None:
    """Return the growth implied by a regression over ``window``.

    Time is measured in years since the window's first observation, so the
    fitted line at ``x = 1`` is the value one year after the window starts.
    The rate is ``(intercept + slope) / intercept - 1``: ``0.05`` for 5%
    growth, ``1.0`` for a doubling.

    Returns ``None`` when the window holds fewer than two observations or the
    regression is otherwise undefined.
    """

    if len(window) < 2:
        return None
    first = window[0].timestamp
    xs = [elapsed_years(first, item.timestamp) for item in window]
    ys = [item.value for item in window]
    fit = simple_linear_regression(xs, ys)
    if not fit.is_defined:
        return None
    if fit.intercept == 0:
        rate = math.copysign(math.inf, fit.slope) if fit.slope else math.nan
    else:
        rate = fit.predict(1.0) / fit.intercept - 1
    if math.isnan(rate):
        return None
    return GrowthSample(rate, elapsed_years(first, window[-1].timestamp))


def growth_samples(windows: Iterable[Sequence[Any]]) -> List[GrowthSample]:
    """Growth samples for every window whose regression is defined."""

    samples: List[GrowthSample] = []
    for index, window in enumerate(windows):
        sample = window_growth_sample(window)
        if sample is None:
            log.debug(
                "Discarding window %d: %d observation(s), regression undefined",
                index,
                len(window),
            )
            continue
        samples.append(sample)
    return samples


def weighted_growth(samples: Iterable[GrowthSample]) -> float:
    """Average of the sample rates weighted by their fraction of a year.

    ``NaN`` when there is nothing to weight.
    """

    total_weight = 0.0
    weighted_sum = 0.0
    for sample in samples:
        total_weight += sample.fraction_of_year
        weighted_sum += sample.rate * sample.fraction_of_year
    if total_weight == 0:
        return math.nan
    return weighted_sum / total_weight


def linear_regression_cagr(
    values: Sequence[float],
    timestamps: Sequence[datetime],
) -> float:
    """Return the CAGR based on regressions over overlapping yearly windows.

    Parameters
    ----------
    values:
        Portfolio values, one per timestamp.
    timestamps:
        Strictly increasing datetimes matching ``values``.

    Returns
    -------
    float
        Time-weighted growth rate, e.g. ``0.02`` for 2% a year.  ``NaN`` when
        no window holds at least two observations (a single observation, for
        instance).

    Raises
    ------
    ValidationError
        If either argument is not a sequence, ``values`` holds a non-number,
        ``timestamps`` holds a non-datetime, or naive and timezone-aware
        timestamps are mixed.  ``argument`` names the offending parameter.
    LengthMismatchError
        If ``values`` and ``timestamps`` differ in length.
    """

    values = list(ensure_sequence(values, Real, name="values"))
    timestamps = list(ensure_sequence(timestamps, datetime, name="timestamps"))
    if len(values) != len(timestamps):
        raise LengthMismatchError(
            f"Length of values ({len(values)}) must match length of "
            f"timestamps ({len(timestamps)}).",
            lengths=(len(values), len(timestamps)),
        )
    ensure_consistent_timezones(timestamps, name="timestamps")

    observations = [
        Observation(timestamp=timestamp, value=value)
        for value, timestamp in zip(values, timestamps)
    ]
    windows = get_windows(observations, WINDOW_SIZE_MS, WINDOW_OVERLAP_MS)
    samples = growth_samples(windows)
    log.debug("Kept %d of %d windows for regression CAGR", len(samples), len(windows))
    return weighted_growth(samples)


__all__ = [
    "GrowthSample",
    "WINDOW_SIZE_MS",
    "WINDOW_OVERLAP_MS",
    "window_growth_sample",
    "growth_samples",
    "weighted_growth",
    "linear_regression_cagr",
]
