"""Time constants shared by the growth calculations.

A year is always 365 days; leap days are not accounted for.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict

DAY_IN_MS = 1000 * 60 * 60 * 24
YEAR_IN_MS = DAY_IN_MS * 365

_ONE_MS = timedelta(milliseconds=1)


def get_times() -> Dict[str, int]:
    """Return the day and year lengths in milliseconds."""

    return {"day_in_ms": DAY_IN_MS, "year_in_ms": YEAR_IN_MS}


def elapsed_ms(start: datetime, end: datetime) -> float:
    """Milliseconds from ``start`` to ``end`` (negative if ``end`` is earlier).

    The difference is taken on the wall-clock values, so naive datetimes are
    not shifted by daylight-saving transitions.  Both datetimes must be naive
    or both aware; the public functions check this before calling here.
    """

    return (end - start) / _ONE_MS


def elapsed_years(start: datetime, end: datetime) -> float:
    return elapsed_ms(start, end) / YEAR_IN_MS


__all__ = ["DAY_IN_MS", "YEAR_IN_MS", "get_times", "elapsed_ms", "elapsed_years"]
