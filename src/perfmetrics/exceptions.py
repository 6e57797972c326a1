"""Exceptions raised by :mod:`perfmetrics`.

Only malformed input raises.  Numerically undefined results (a regression on
fewer than two points, an aggregate with zero total weight) are reported as
``NaN`` instead.
"""

from __future__ import annotations

from typing import Any, Sequence


class PerfMetricsError(Exception):
    """Base class for every error raised by the library."""


class ValidationError(PerfMetricsError, ValueError):
    """Signal that an argument does not have the expected shape or type.

    ``argument`` names the offending parameter and ``offending`` holds the
    value(s) that failed the check so callers can inspect them without
    parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        offending: Sequence[Any] | Any = None,
    ) -> None:
        super().__init__(message)
        self.argument = argument
        self.offending = offending


class LengthMismatchError(ValidationError):
    """Two paired sequences do not have the same number of items."""

    def __init__(self, message: str, *, lengths: tuple[int, int]) -> None:
        super().__init__(message, offending=lengths)
        self.lengths = lengths


__all__ = ["PerfMetricsError", "ValidationError", "LengthMismatchError"]
