"""Tests for :mod:`samplestats.stats.tukey` (IQR outlier detection)."""

from __future__ import annotations

import pytest

from samplestats import EmptyInputError
from samplestats.stats import outlier_bounds, outliers


@pytest.mark.parametrize(
	("samples", "expected"),
	[
		([3, 4, 5], (0.0, 8.0)),
		([4, 5, 3], (0.0, 8.0)),
		([1, 2, 6, 50, 50, 50, 50, 50, 50, 50, 50, 50, 50, 50], (22.5, 66.5)),
		([50, 50, 50, 50, 50, 50, 50, 50, 50, 50, 50, 99, 99, 99], (31.625, 80.625)),
		([200, 400, 400, 400, 500, 500, 500, 700, 900], (100.0, 900.0)),
		([50, 50, 450, 450, 450, 500, 500, 500, 600, 900], (87.5, 787.5)),
	],
)
def test_outlier_bounds(samples, expected):
	assert outlier_bounds(samples) == expected


def test_outlier_bounds_with_sorted_flag_and_known_percentiles():
	assert outlier_bounds([3, 4, 5], sorted=True) == (0.0, 8.0)
	assert outlier_bounds([3, 4, 5], percentiles={25: 3.0, 75: 5.0}) == (0.0, 8.0)
	assert outlier_bounds(None, percentiles={25: 3.0, 50: 4.0, 75: 5.0}) == (0.0, 8.0)


def test_outlier_bounds_ignore_incomplete_percentiles():
	assert outlier_bounds([3, 4, 5], percentiles={25: 100.0}) == (0.0, 8.0)


def test_outlier_bounds_empty():
	with pytest.raises(EmptyInputError):
		outlier_bounds([])


@pytest.mark.parametrize(
	("samples", "expected"),
	[
		([3, 4, 5], ([], [3, 4, 5])),
		(
			[1, 2, 6, 50, 50, 50, 50, 50, 50, 50, 50, 50, 50, 50],
			([1, 2, 6], [50] * 11),
		),
		(
			[50, 50, 1, 50, 50, 50, 50, 50, 2, 50, 50, 50, 50, 6],
			([1, 2, 6], [50] * 11),
		),
		(
			[50, 50, 50, 50, 50, 50, 50, 50, 50, 50, 50, 99, 99, 99],
			([99, 99, 99], [50] * 11),
		),
	],
)
def test_outliers_partition_keeps_order(samples, expected):
	assert outliers(samples) == expected


def test_outliers_with_known_bounds():
	# values on a bound stay inliers
	assert outliers([0, 1, 5, 8, 9], outlier_bounds=(1, 8)) == ([0, 9], [1, 5, 8])
	assert outliers([0, 1, 5, 8, 9], {"outliers_bounds": [1, 8]}) == ([0, 9], [1, 5, 8])


def test_outliers_empty():
	with pytest.raises(EmptyInputError):
		outliers([])
