from datetime import datetime, timedelta, timezone
from numbers import Real

import numpy as np
import pandas as pd
import pytest

from perfmetrics.exceptions import ValidationError
from perfmetrics.validation import (
    ensure_consistent_timezones,
    ensure_sequence,
    is_number,
    is_sequence,
    is_timestamp,
)


def sample_function():
    pass


def test_ensures_sequence_and_type():
    with pytest.raises(ValidationError, match="Expected parameter to be a sequence, got t instead."):
        ensure_sequence("t")
    assert ensure_sequence([]) == []
    with pytest.raises(
        ValidationError,
        match="Expected every item of sequence to be of type number, got items y, .* "
        "with types str, function instead.",
    ) as exc:
        ensure_sequence([5, "y", 7, sample_function], Real, name="values")
    assert exc.value.argument == "values"
    assert exc.value.offending == ["y", sample_function]
    data = [2, 3, 4]
    assert ensure_sequence(data, Real) is data


def test_accepts_numpy_and_pandas_containers():
    assert ensure_sequence(np.array([1.0, 2.0]), Real) is not None
    assert ensure_sequence(pd.Series([1, 2, 3]), Real) is not None
    assert ensure_sequence((1.5, np.float64(2.0), np.int64(3)), Real) is not None


def test_bools_are_not_numbers():
    with pytest.raises(ValidationError, match="with types bool instead"):
        ensure_sequence([1.0, True], Real)
    assert ensure_sequence([True, False], bool) == [True, False]


def test_reports_datetime_kind():
    with pytest.raises(ValidationError, match="of type datetime"):
        ensure_sequence(["2024-01-01"], datetime)


@pytest.mark.parametrize("value", [None, 5, "abc", b"abc", {"a": 1}])
def test_rejects_non_sequences(value):
    assert not is_sequence(value)


def test_scalar_predicates():
    assert is_number(float("nan"))
    assert not is_number(False)
    assert is_timestamp(pd.Timestamp("2024-01-01"))
    assert not is_timestamp(pd.NaT)
    assert not is_timestamp("2024-01-01")


def test_consistent_timezones():
    naive = datetime(2024, 1, 1)
    aware = datetime(2024, 1, 2, tzinfo=timezone(timedelta(hours=2)))
    ensure_consistent_timezones([naive, naive])
    ensure_consistent_timezones([aware, pd.Timestamp("2024-01-03", tz="UTC")])
    ensure_consistent_timezones([])
    with pytest.raises(ValidationError, match="got naive 2024-01-01 00:00:00 and aware") as exc:
        ensure_consistent_timezones([naive, aware], name="dates")
    assert exc.value.argument == "dates"
    assert exc.value.offending == [naive]
