"""Split a time series into fixed-length, possibly overlapping windows.

Windows are measured in wall-clock time from the first observation, not in
number of samples.  With 24 months of data, a window size of one year and an
overlap of three months the series is split into

- month 0 to 12
- month 9 to 21
- month 18 to 30 (only holds data up to month 24)

Each window is a list of the caller's own observation objects; nothing is
copied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Sequence

from .exceptions import ValidationError
from .utils.logging import get_logger
from .utils.times import elapsed_ms
from .validation import (
    ensure_consistent_timezones,
    is_number,
    is_sequence,
    is_timestamp,
)

log = get_logger(__name__)


@dataclass(frozen=True)
class Observation:
    """Portfolio value sampled at ``timestamp``."""

    timestamp: datetime
    value: float


def _is_observation(item: Any) -> bool:
    return is_timestamp(getattr(item, "timestamp", None)) and is_number(
        getattr(item, "value", None)
    )


def _validate(observations: Any, window_size_ms: Any, overlap_ms: Any) -> None:
    if not is_sequence(observations) or not all(
        _is_observation(item) for item in observations
    ):
        raise ValidationError(
            "Argument observations must be a sequence of observations, each with "
            f"a datetime timestamp and a numeric value; got {observations!r} instead.",
            argument="observations",
            offending=observations,
        )
    ensure_consistent_timezones(
        [item.timestamp for item in observations], name="observations"
    )
    if not is_number(window_size_ms) or not window_size_ms > 0:
        raise ValidationError(
            f"Window size must be a positive number, got {window_size_ms!r} instead.",
            argument="window_size_ms",
            offending=window_size_ms,
        )
    if not is_number(overlap_ms) or not 0 <= overlap_ms < window_size_ms:
        raise ValidationError(
            "Overlap must be a non-negative number smaller than window size; got overlap "
            f"{overlap_ms!r} and window size {window_size_ms!r}.",
            argument="overlap_ms",
            offending=overlap_ms,
        )


def window_count(span_ms: float, window_size_ms: float, overlap_ms: float = 0) -> int:
    """Number of windows needed to cover ``span_ms``.

    ``ceil(span / stride)`` with a minimum of one.  Without overlap and a span
    that is an exact multiple of the stride the last observation would sit on
    the open end of the last window, so one more window is added.  This is
    deliberately one more than a plain ``ceil(span / stride)`` count, which
    would leave that observation in no window.
    """

    stride = window_size_ms - overlap_ms
    count = max(1, math.ceil(span_ms / stride))
    if (count - 1) * stride + window_size_ms <= span_ms:
        count += 1
    return count


def get_windows(
    observations: Sequence[Any],
    window_size_ms: float,
    overlap_ms: float = 0,
) -> List[List[Any]]:
    """Divide ``observations`` into windows that may or may not overlap.

    Parameters
    ----------
    observations:
        Chronologically ordered objects exposing ``timestamp`` (a
        :class:`~datetime.datetime`) and ``value`` (a real number), usually
        :class:`Observation` instances.
    window_size_ms:
        Length of every window in milliseconds.
    overlap_ms:
        Time shared by two consecutive windows, counted back from the end of
        the previous window.  Must be smaller than ``window_size_ms``.

    Returns
    -------
    list of lists
        Window ``i`` holds every observation whose offset from the first
        timestamp lies in ``[i * stride, i * stride + window_size_ms)`` where
        ``stride = window_size_ms - overlap_ms``.  Windows without
        observations are returned empty, not dropped.

    Raises
    ------
    ValidationError
        If any argument fails its precondition.
    """

    _validate(observations, window_size_ms, overlap_ms)
    items = list(observations)
    if not items:
        return []

    start_time = items[0].timestamp
    offsets = [elapsed_ms(start_time, item.timestamp) for item in items]
    stride = window_size_ms - overlap_ms
    count = window_count(offsets[-1], window_size_ms, overlap_ms)

    windows: List[List[Any]] = []
    for index in range(count):
        start = index * stride
        end = start + window_size_ms
        windows.append(
            [item for item, offset in zip(items, offsets) if start <= offset < end]
        )
    log.debug(
        "Split %d observations into %d windows (size=%sms, overlap=%sms)",
        len(items),
        count,
        window_size_ms,
        overlap_ms,
    )
    return windows


partition = get_windows


__all__ = ["Observation", "get_windows", "partition", "window_count"]
