# src/samplestats/stats/quantile.py

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..errors import PercentileRangeError
from .coerce import Sample, SampleLike, coerce_samples, optional_samples, require_samples
from .options import OptionsLike, resolve_options
from .sorting import maybe_sort

__all__ = [
	"FIRST_QUARTILE", "MEDIAN_PERCENTILE", "THIRD_QUARTILE",
	"PercentileMap", "percentiles", "sorted_percentiles", "percentile", "median",
]

FIRST_QUARTILE = 25
MEDIAN_PERCENTILE = 50
THIRD_QUARTILE = 75

PercentileMap = Dict[Real, Sample]


def _rank_list(ranks: Union[Real, Iterable[Real]]) -> List[Real]:
	if isinstance(ranks, Real):
		ranks = [ranks]
	out: List[Real] = []
	for rank in ranks:
		if rank not in out:
			out.append(rank)
	return out


def _validate_rank(rank: Real) -> None:
	if isinstance(rank, bool) or not isinstance(rank, Real):
		raise TypeError(f"percentile rank must be a number, got {rank!r}")
	if not 0 < rank < 100:
		raise PercentileRangeError(rank)


def _percentile_value(sorted_samples: Sequence[Sample], rank: Real) -> Sample:
	# NIST handbook "type 6": k = p(n + 1), interpolate between the k-th and (k+1)-th
	# order statistics. R gives the same with quantile(..., type = 6).
	k = rank / 100 * (len(sorted_samples) + 1)
	if k < 1:
		return sorted_samples[0]

	whole = math.floor(k)
	index = max(0, whole - 1)
	rest = sorted_samples[index:index + 2]
	if len(rest) == 2:
		lower, upper = rest
		return lower + (k - whole) * (upper - lower)
	# top of the range: nothing left to interpolate toward
	return float(rest[0])


def sorted_percentiles(sorted_samples: Sequence[Sample], ranks: Union[Real, Iterable[Real]]) -> PercentileMap:
	"""Percentiles of samples already known to be sorted and non-empty (no coercion, no sort)."""
	ranks = _rank_list(ranks)
	for rank in ranks:
		_validate_rank(rank)
	return {rank: _percentile_value(sorted_samples, rank) for rank in ranks}


def percentiles(
		samples: SampleLike,
		ranks: Union[Real, Iterable[Real]],
		options: OptionsLike = None,
		**known: Any
) -> PercentileMap:
	"""
	Values below which the given percentages of the samples lie.

	Interpolation follows the NIST engineering statistics handbook (R's ``type=6``):
	with ``n`` samples the rank ``p`` sits at position ``k = p/100 * (n + 1)``
	of the sorted samples. ``k < 1`` yields the smallest sample as is; otherwise
	the value is interpolated linearly between positions ``floor(k)`` and
	``floor(k) + 1`` and returned as a float.

	Examples
	--------
	>>> percentiles([5, 3, 4, 5, 1, 3, 1, 3], [50, 75, 99])
	{50: 3.0, 75: 4.75, 99: 5.0}
	>>> percentiles([5, 3, 4, 5, 1, 3, 1, 3], 12.5)
	{12.5: 1.0}

	:param samples: Non-empty samples.
	:param ranks: A single rank or several ranks, each strictly between 0 and 100.
	:param options: Options; only ``sorted`` is read here.
	:return: Map from every requested rank to its value.
	:raises EmptyInputError: If ``samples`` is empty.
	:raises PercentileRangeError: If any rank is ``<= 0`` or ``>= 100`` (nothing is computed then).
	"""
	xs = coerce_samples(samples)
	opts = resolve_options(options, known)
	return sorted_percentiles(maybe_sort(xs, opts), ranks)


def percentile(samples: SampleLike, rank: Real, options: OptionsLike = None, **known: Any) -> Sample:
	"""Single-rank shortcut for :func:`percentiles`."""
	return percentiles(samples, rank, options, **known)[rank]


def median(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> Sample:
	"""
	The 50th percentile.

	A supplied ``percentiles`` map containing rank 50 is used as is; otherwise the
	median is computed (sorting only then, and only unless ``sorted`` is set).

	>>> median([1, 2, 3, 4, 5, 6, 8, 9])
	4.5
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	if opts.percentiles is not None and MEDIAN_PERCENTILE in opts.percentiles:
		return opts.percentiles[MEDIAN_PERCENTILE]
	return sorted_percentiles(maybe_sort(require_samples(xs), opts), MEDIAN_PERCENTILE)[MEDIAN_PERCENTILE]
