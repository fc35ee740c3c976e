# src/samplestats/stats/aggregate.py

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..errors import StatisticsError
from ..logutil import get_logger
from .coerce import Sample, SampleLike, coerce_samples
from .distribution import FrequencyDistribution, Mode, frequency_distribution, mode
from .moments import average, standard_deviation, standard_deviation_ratio, variance
from .options import ExclusionPolicy, Options, OptionsLike, resolve_options
from .quantile import (
	FIRST_QUARTILE, MEDIAN_PERCENTILE, THIRD_QUARTILE,
	PercentileMap, median, sorted_percentiles,
)
from .sorting import maybe_sort
from .tukey import OutlierBounds, fences, partition

LOG = get_logger(__name__)

__all__ = ["Statistics", "compute_all", "statistics"]

_ALWAYS_COMPUTED = (FIRST_QUARTILE, MEDIAN_PERCENTILE, THIRD_QUARTILE)


@dataclass(frozen=True)
class Statistics:
	"""
	Every statistic :func:`compute_all` produces for one sample collection.

	``lower_outlier_bound``, ``upper_outlier_bound`` and ``outliers`` always
	describe the full input, even when the remaining fields were computed with
	the outliers excluded.
	"""

	total: Sample
	average: float
	variance: float
	standard_deviation: float
	standard_deviation_ratio: float
	median: Sample
	percentiles: PercentileMap
	frequency_distribution: FrequencyDistribution
	mode: Mode
	minimum: Sample
	maximum: Sample
	lower_outlier_bound: float
	upper_outlier_bound: float
	outliers: List[Sample] = field(default_factory=list)
	sample_size: int = 0

	@property
	def outlier_bounds(self) -> OutlierBounds:
		return self.lower_outlier_bound, self.upper_outlier_bound

	def as_dict(self) -> Dict[str, Any]:
		"""Shallow ``dict`` of all fields (maps and lists are copied)."""
		out = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
		out["percentiles"] = dict(self.percentiles)
		out["frequency_distribution"] = dict(self.frequency_distribution)
		out["outliers"] = list(self.outliers)
		if isinstance(self.mode, list):
			out["mode"] = list(self.mode)
		return out


def _percentiles_for(sorted_samples: List[Sample], opts: Options) -> PercentileMap:
	ranks = list(_ALWAYS_COMPUTED)
	for rank in opts.percentile_ranks:
		if rank not in ranks:
			ranks.append(rank)
	return sorted_percentiles(sorted_samples, ranks)


def _bounds(pcts: PercentileMap) -> OutlierBounds:
	return fences(pcts[FIRST_QUARTILE], pcts[THIRD_QUARTILE])


def _exclude_repeatedly(
		rest: List[Sample],
		opts: Options
) -> Tuple[List[Sample], PercentileMap]:
	"""Drop outliers of the shrinking set until none are left (never down to nothing)."""
	current = rest
	pcts = _percentiles_for(current, opts)
	rounds = 1
	while True:
		outs, remaining = partition(current, _bounds(pcts))
		if not outs:
			break
		if not remaining:
			LOG.debug("Exclusion round %d would remove every sample; keeping %d", rounds + 1, len(current))
			break
		rounds += 1
		LOG.debug("Exclusion round %d removed %d outlier(s)", rounds, len(outs))
		current = remaining
		pcts = _percentiles_for(current, opts)
	return current, pcts


def _full_statistics(
		sorted_samples: List[Sample],
		pcts: PercentileMap,
		outs: List[Sample],
		bounds: OutlierBounds
) -> Statistics:
	# every intermediate is computed once and handed on
	tot = sum(sorted_samples)
	size = len(sorted_samples)
	known = Options(total=tot, sample_size=size, percentiles=pcts)

	# float rounding of total / size can step past the extremes ([0.1] * 3)
	mean = float(min(max(average(None, known), sorted_samples[0]), sorted_samples[-1]))
	known = dataclasses.replace(known, average=mean)
	var = variance(sorted_samples, known)
	known = dataclasses.replace(known, variance=var)
	std = standard_deviation(None, known)
	known = dataclasses.replace(known, standard_deviation=std)
	freqs = frequency_distribution(sorted_samples)

	lower, upper = bounds
	return Statistics(
		total=tot,
		average=mean,
		variance=var,
		standard_deviation=std,
		standard_deviation_ratio=standard_deviation_ratio(None, known),
		median=median(None, known),
		percentiles=pcts,
		frequency_distribution=freqs,
		mode=mode(None, frequency_distribution=freqs),
		minimum=sorted_samples[0],
		maximum=sorted_samples[-1],
		lower_outlier_bound=lower,
		upper_outlier_bound=upper,
		outliers=outs,
		sample_size=size,
	)


def compute_all(samples: SampleLike, options: OptionsLike = None, **known: Any) -> Statistics:
	"""
	Calculate every statistic for the given samples.

	Options read here:

	- ``percentiles``: extra ranks to report; 25, 50 and 75 are always computed.
	- ``exclude_outliers``: ``False``/``"none"`` (default), ``True``/``"once"``
	  or ``"repeatedly"``. With ``"once"`` the statistics are computed from the
	  samples left after removing the outliers; ``"repeatedly"`` keeps removing
	  the outliers of what is left until none remain or nothing would be left.
	  Outlier bounds and the outlier list always describe the full input.
	- ``sorted`` (``sorted?`` in mappings): the samples are already sorted.

	Examples
	--------
	>>> stats = compute_all([50, 50, 450, 450, 450, 500, 500, 500, 600, 900])
	>>> stats.total, stats.average, stats.median, stats.outliers
	(4450, 445.0, 475.0, [50, 50, 900])
	>>> compute_all([50, 50, 450, 450, 450, 500, 500, 500, 600, 900], exclude_outliers=True).sample_size
	7

	:raises EmptyInputError: If ``samples`` is empty.
	:raises PercentileRangeError: If an extra rank is not strictly between 0 and 100.
	"""
	xs = coerce_samples(samples)
	opts = resolve_options(options, known)
	try:
		sorted_samples = maybe_sort(xs, opts)
		pcts = _percentiles_for(sorted_samples, opts)
		bounds = _bounds(pcts)
		# `rest` stays sorted
		outs, rest = partition(sorted_samples, bounds)

		policy = opts.exclude_outliers
		if policy is ExclusionPolicy.NONE or not outs:
			return _full_statistics(sorted_samples, pcts, outs, bounds)

		LOG.debug("Excluding %d outlier(s) of %d samples (policy=%s)", len(outs), len(sorted_samples), policy.value)
		if policy is ExclusionPolicy.REPEATEDLY:
			kept, kept_pcts = _exclude_repeatedly(rest, opts)
		else:
			kept, kept_pcts = rest, _percentiles_for(rest, opts)
		return _full_statistics(kept, kept_pcts, outs, bounds)
	except StatisticsError as exc:
		LOG.error("compute_all() failed: %s", exc)
		raise


statistics = compute_all
