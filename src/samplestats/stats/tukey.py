# src/samplestats/stats/tukey.py

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from .coerce import Sample, SampleLike, optional_samples, require_samples
from .options import OptionsLike, resolve_options
from .quantile import FIRST_QUARTILE, THIRD_QUARTILE, PercentileMap, sorted_percentiles
from .sorting import maybe_sort

__all__ = ["IQR_FACTOR", "OutlierBounds", "outlier_bounds", "fences", "partition", "outliers"]

# Tukey's fences: https://en.wikipedia.org/wiki/Interquartile_range#Outliers
IQR_FACTOR = 1.5

OutlierBounds = Tuple[float, float]


def fences(q1: Sample, q3: Sample) -> OutlierBounds:
	"""Lower and upper outlier bound for the given first and third quartile."""
	tolerance = (q3 - q1) * IQR_FACTOR
	return q1 - tolerance, q3 + tolerance


def partition(samples: Sequence[Sample], bounds: OutlierBounds) -> Tuple[List[Sample], List[Sample]]:
	"""
	Split ``samples`` into ``(outliers, remaining)``.

	A sample equal to a bound is not an outlier. Both lists keep the input order.
	"""
	lower, upper = bounds
	outs: List[Sample] = []
	rest: List[Sample] = []
	for sample in samples:
		(outs if sample < lower or sample > upper else rest).append(sample)
	return outs, rest


def _quartiles_known(known: Optional[PercentileMap]) -> bool:
	return known is not None and FIRST_QUARTILE in known and THIRD_QUARTILE in known


def outlier_bounds(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> OutlierBounds:
	"""
	Bounds outside of which a sample counts as an outlier.

	``q1 - 1.5 * IQR`` and ``q3 + 1.5 * IQR`` with ``IQR = q3 - q1``. A supplied
	``percentiles`` map holding ranks 25 and 75 is reused; otherwise the
	quartiles are computed from the samples (sorting unless ``sorted`` is set).

	>>> outlier_bounds([3, 4, 5])
	(0.0, 8.0)

	:raises EmptyInputError: If the quartiles have to be computed and ``samples`` is empty.
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	quartiles = opts.percentiles
	if not _quartiles_known(quartiles):
		quartiles = sorted_percentiles(
			maybe_sort(require_samples(xs), opts), [FIRST_QUARTILE, THIRD_QUARTILE]
		)
	return fences(quartiles[FIRST_QUARTILE], quartiles[THIRD_QUARTILE])


def outliers(samples: SampleLike, options: OptionsLike = None, **known: Any) -> Tuple[List[Sample], List[Sample]]:
	"""
	All outliers of ``samples`` along with the remaining samples.

	Uses supplied ``outlier_bounds`` or derives them via :func:`outlier_bounds`
	(which may in turn reuse supplied ``percentiles``).

	>>> outliers([50, 50, 1, 50, 50, 50, 50, 50, 2, 50, 50, 50, 50, 6])
	([1, 2, 6], [50, 50, 50, 50, 50, 50, 50, 50, 50, 50, 50])

	:return: ``(outliers, remaining)``, both in the order of ``samples``.
	:raises EmptyInputError: If ``samples`` is empty.
	"""
	xs = require_samples(optional_samples(samples))
	opts = resolve_options(options, known)
	bounds = opts.outlier_bounds
	if bounds is None:
		bounds = outlier_bounds(xs, opts)
	return partition(xs, bounds)
