"""Integration tests for :class:`samplestats.stats.samplestat.SampleStat` and the summary helpers."""

from __future__ import annotations

import math

import pytest

import samplestats
from samplestats import SampleStat, compute_all
from samplestats.stats import describe, describe_table

DATA = [9, 9, 10, 10, 10, 11, 12, 36]


def test_samplestat_workflow_matches_function_equivalents():
	ss = SampleStat(DATA)

	assert ss.samples() == DATA
	assert ss.statistics() == compute_all(DATA)
	assert ss.statistics(exclude_outliers=True).sample_size == 7
	assert ss.percentiles([25, 50, 75]) == {25: 9.25, 50: 10.0, 75: 11.75}
	assert ss.median() == 10.0
	assert ss.mode() == 10
	assert ss.outliers() == ([36], [9, 9, 10, 10, 10, 11, 12])
	assert ss.describe()["outliers"] == [36]


def test_samplestat_variance_strategies_agree():
	ss = SampleStat([4, 9, 11, 12, 17, 5, 8, 12, 12])
	assert ss.variance() == 16.0
	assert math.isclose(ss.variance(strategy="welford"), 16.0)
	with pytest.raises(ValueError):
		ss.variance(strategy="three_pass")


def test_samplestat_dataframe_column():
	pd = pytest.importorskip("pandas")
	df = pd.DataFrame({"a": [1, 2, 3], "b": DATA[:3]})
	assert SampleStat(df, column="b").samples() == [9, 9, 10]
	assert SampleStat(df, column="a").statistics().total == 6


def test_describe_is_a_plain_dict():
	out = describe(DATA)
	assert isinstance(out, dict)
	assert out["median"] == 10.0
	assert out["lower_outlier_bound"] == 5.5
	assert describe(DATA, exclude_outliers=True)["maximum"] == 12


def test_describe_table_per_column():
	pd = pytest.importorskip("pandas")
	df = pd.DataFrame({"a": [1.0, 2.0, 3.0, float("nan")], "b": [2, 4, 6, 100]})

	table = describe_table(df)
	assert list(table.index) == ["a", "b"]
	assert table.index.name == "column"
	assert math.isclose(table.loc["a", "total"], 6.0)
	assert table.loc["a", "sample_size"] == 3
	assert math.isclose(table.loc["b", "average"], 28.0)
	assert table.loc["b", "outlier_count"] == 0

	by_row = describe_table(df.fillna(0), axis=1)
	assert by_row.index.name == "row"
	assert list(by_row.index) == [0, 1, 2, 3]
	assert math.isclose(by_row.loc[3, "total"], 100.0)


def test_describe_table_requires_dataframe():
	with pytest.raises(ValueError):
		describe_table([1, 2, 3])


def test_describe_table_rejects_bad_axis():
	pd = pytest.importorskip("pandas")
	with pytest.raises(ValueError):
		describe_table(pd.DataFrame({"a": [1]}), axis=2)


def test_top_level_lazy_exports():
	assert samplestats.compute_all is compute_all
	assert samplestats.stats.SampleStat is SampleStat
	assert isinstance(samplestats.__version__, str)
	with pytest.raises(AttributeError):
		samplestats.no_such_thing
