"""Ordinary least-squares fit of a straight line."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import stats

from .exceptions import LengthMismatchError


@dataclass(frozen=True)
class LinearFit:
    """``y = intercept + slope * x``; both ``NaN`` when the fit is undefined."""

    slope: float
    intercept: float

    @property
    def is_defined(self) -> bool:
        return not (math.isnan(self.slope) or math.isnan(self.intercept))

    def predict(self, x: float) -> float:
        return self.intercept + self.slope * x


UNDEFINED_FIT = LinearFit(math.nan, math.nan)


def simple_linear_regression(x: Sequence[float], y: Sequence[float]) -> LinearFit:
    """Fit ``y`` against ``x`` minimising the squared residuals.

    Parameters
    ----------
    x, y:
        Paired samples of equal length.

    Returns
    -------
    LinearFit
        Slope and intercept of the fitted line.  With fewer than two points,
        or when every ``x`` is identical, the line is undefined and both
        coefficients are ``NaN``.
    """

    xs = np.asarray(list(x), dtype=float)
    ys = np.asarray(list(y), dtype=float)
    if xs.size != ys.size:
        raise LengthMismatchError(
            f"Length of x ({xs.size}) must match length of y ({ys.size}).",
            lengths=(int(xs.size), int(ys.size)),
        )
    if xs.size < 2:
        return UNDEFINED_FIT

    # linregress raises when every x is identical
    if np.all(xs == xs[0]):
        return UNDEFINED_FIT
    result = stats.linregress(xs, ys)
    return LinearFit(float(result.slope), float(result.intercept))


__all__ = ["LinearFit", "simple_linear_regression"]
