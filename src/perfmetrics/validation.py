"""Thin argument guards used by the public functions."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from numbers import Real
from typing import Any, Tuple, Type

import numpy as np
import pandas as pd

from .exceptions import ValidationError

SEQUENCE_TYPES = (Sequence, np.ndarray, pd.Series, pd.Index)

_KIND_NAMES = {Real: "number", datetime: "datetime"}


def is_sequence(data: Any) -> bool:
    """Return ``True`` for list-like containers, excluding strings and bytes."""

    return isinstance(data, SEQUENCE_TYPES) and not isinstance(data, (str, bytes))


def is_number(value: Any) -> bool:
    """Real numbers, NaN included; bools are not numbers here."""

    return isinstance(value, Real) and not isinstance(value, bool)


def is_timestamp(value: Any) -> bool:
    return isinstance(value, datetime) and not pd.isna(value)


def ensure_consistent_timezones(timestamps: Any, *, name: str = "timestamps") -> None:
    """Reject a mix of naive and timezone-aware datetimes.

    They cannot be subtracted from each other, so no elapsed time could be
    computed between them.
    """

    stamps = [ts for ts in timestamps if is_timestamp(ts)]
    aware = [ts for ts in stamps if ts.utcoffset() is not None]
    if aware and len(aware) != len(stamps):
        naive = [ts for ts in stamps if ts.utcoffset() is None]
        raise ValidationError(
            f"Expected {name} to be all naive or all timezone-aware, got naive "
            f"{', '.join(str(ts) for ts in naive)} and aware "
            f"{', '.join(str(ts) for ts in aware)}.",
            argument=name,
            offending=naive,
        )


def _kind_name(kind: Type[Any] | Tuple[Type[Any], ...]) -> str:
    if isinstance(kind, tuple):
        return " or ".join(_kind_name(k) for k in kind)
    return _KIND_NAMES.get(kind, kind.__name__)


def _type_name(item: Any) -> str:
    if callable(item) and not isinstance(item, type):
        return "function"
    return type(item).__name__


def _matches(item: Any, kind: Type[Any] | Tuple[Type[Any], ...]) -> bool:
    if not isinstance(item, kind):
        return False
    # bool is an int subclass; only accept it when asked for explicitly
    if isinstance(item, bool):
        kinds = kind if isinstance(kind, tuple) else (kind,)
        return bool in kinds
    return True


def ensure_sequence(
    data: Any,
    kind: Type[Any] | Tuple[Type[Any], ...] | None = None,
    *,
    name: str = "data",
) -> Any:
    """Ensure ``data`` is a sequence and optionally that every item is a ``kind``.

    Parameters
    ----------
    data:
        Value to check.  Lists, tuples, numpy arrays and pandas Series or
        Index objects are accepted; strings are not.
    kind:
        Type (or tuple of types) every item must be an instance of.  Pass
        :class:`numbers.Real` for numbers.  ``None`` skips the item check.
    name:
        Argument name reported in the raised error.

    Returns
    -------
    The original ``data``, unchanged.

    Raises
    ------
    ValidationError
        If ``data`` is not a sequence or some items are of the wrong type.
        The message lists the offending items and their types.
    """

    if not is_sequence(data):
        raise ValidationError(
            f"Expected parameter to be a sequence, got {data} instead.",
            argument=name,
            offending=data,
        )
    if kind is not None:
        invalid = [item for item in data if not _matches(item, kind)]
        if invalid:
            items = ", ".join(str(item) for item in invalid)
            types = ", ".join(_type_name(item) for item in invalid)
            raise ValidationError(
                f"Expected every item of sequence to be of type {_kind_name(kind)}, "
                f"got items {items} with types {types} instead.",
                argument=name,
                offending=invalid,
            )
    return data


__all__ = [
    "ensure_sequence",
    "ensure_consistent_timezones",
    "is_sequence",
    "is_number",
    "is_timestamp",
]
