"""Tests for :mod:`samplestats.stats.quantile`."""

from __future__ import annotations

import pytest

from samplestats import EmptyInputError, PercentileRangeError
from samplestats.stats import median, percentile, percentiles

SAMPLES = [5, 3, 4, 5, 1, 3, 1, 3]


@pytest.mark.parametrize(
	("ranks", "expected"),
	[
		(12.5, {12.5: 1.0}),
		([50], {50: 3.0}),
		([75], {75: 4.75}),
		(99, {99: 5.0}),
		([50, 75, 99], {50: 3.0, 75: 4.75, 99: 5.0}),
	],
)
def test_percentiles_type_6_interpolation(ranks, expected):
	assert percentiles(SAMPLES, ranks) == expected


def test_percentiles_trust_sorted_flag():
	assert percentiles([1, 1, 3, 3, 3, 4, 5, 5], 12.5, sorted=True) == {12.5: 1.0}
	assert percentiles([1, 1, 3, 3, 3, 4, 5, 5], 12.5, {"sorted?": True}) == {12.5: 1.0}


def test_percentiles_match_r_type_6():
	# quantile(c(9, 9, 10, 10, 10, 11, 12, 36), probs = c(.25, .5, .75), type = 6)
	result = percentiles([9, 9, 10, 10, 10, 11, 12, 36], [25, 50, 75])
	assert result == {25: 9.25, 50: 10.0, 75: 11.75}


def test_rank_below_first_position_returns_first_sample_unconverted():
	# k = 0.1 * 3 < 1
	result = percentiles([7, 3], 10)
	assert result == {10: 3}
	assert isinstance(result[10], int)


def test_interpolated_values_are_floats():
	result = percentiles([1, 2, 3], [50, 75])
	assert all(isinstance(v, float) for v in result.values())
	assert result == {50: 2.0, 75: 3.0}


@pytest.mark.parametrize("rank", [0, 100, -1, 100.5, float("nan")])
def test_out_of_range_rank(rank):
	with pytest.raises(PercentileRangeError, match="between 0 and 100"):
		percentiles(SAMPLES, rank)


def test_one_bad_rank_fails_whole_batch():
	with pytest.raises(PercentileRangeError) as info:
		percentiles(SAMPLES, [25, 50, 100])
	assert info.value.rank == 100


def test_empty_samples_raise_before_ranks_are_checked():
	with pytest.raises(EmptyInputError):
		percentiles([], [100])


def test_percentile_single_value():
	assert percentile(SAMPLES, 75) == 4.75


def test_median():
	assert median([1, 3, 4, 6, 7, 8, 9]) == 6.0
	assert median([1, 2, 3, 4, 5, 6, 8, 9]) == 4.5
	assert median([0]) == 0.0
	assert median([1, 3, 4, 6, 7, 8, 9], sorted=True) == 6.0


def test_median_reuses_known_percentiles():
	assert median(None, percentiles={50: 6.0}) == 6.0
	# a map without rank 50 still triggers the computation
	assert median([1, 3, 4, 6, 7, 8, 9], percentiles={25: 3.0}) == 6.0
	assert median([1, 2, 3, 4, 5, 6, 8, 9], percentiles={}) == 4.5


def test_median_of_nothing():
	with pytest.raises(EmptyInputError):
		median([])
	with pytest.raises(EmptyInputError):
		median(None)
