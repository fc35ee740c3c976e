"""Tests for :mod:`samplestats.stats.coerce`."""

from __future__ import annotations

import pytest

from samplestats import EmptyInputError
from samplestats.stats import coerce_samples


def test_plain_containers():
	assert coerce_samples([3, 1.5, 2]) == [3, 1.5, 2]
	assert coerce_samples((1, 2)) == [1, 2]
	assert coerce_samples(x for x in range(3)) == [0, 1, 2]
	assert coerce_samples({"a": 1, "b": 2.5}) == [1, 2.5]


@pytest.mark.parametrize("data", [[], (), {}, None, iter([])])
def test_empty_input(data):
	with pytest.raises(EmptyInputError):
		coerce_samples(data)


@pytest.mark.parametrize("data", ["123", [1, "2"], [True, 2], [None], 5])
def test_non_numeric_input(data):
	with pytest.raises(ValueError):
		coerce_samples(data)


def test_numpy_input_keeps_python_types():
	np = pytest.importorskip("numpy")
	ints = coerce_samples(np.array([3, 1, 2]))
	assert ints == [3, 1, 2]
	assert all(type(v) is int for v in ints)
	assert coerce_samples(np.array([0.5, 1.5])) == [0.5, 1.5]

	with pytest.raises(ValueError):
		coerce_samples(np.ones((2, 2)))
	with pytest.raises(ValueError):
		coerce_samples(np.array(["a", "b"]))
	with pytest.raises(EmptyInputError):
		coerce_samples(np.array([]))


def test_pandas_input():
	pd = pytest.importorskip("pandas")
	assert coerce_samples(pd.Series([1.0, 2.0])) == [1.0, 2.0]

	df = pd.DataFrame({"a": [1, 2, 3], "b": [4, 5, 6]})
	assert coerce_samples(df, column="b") == [4, 5, 6]
	assert coerce_samples(df, column=0) == [1, 2, 3]
	assert coerce_samples(df[["a"]]) == [1, 2, 3]

	with pytest.raises(ValueError, match="specify `column`"):
		coerce_samples(df)
	with pytest.raises(ValueError, match="Invalid column selector"):
		coerce_samples(df, column="zzz")
