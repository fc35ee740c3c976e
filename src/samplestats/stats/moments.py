# src/samplestats/stats/moments.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sized

from ..errors import EmptyInputError
from ..imports import numpy as np  # type: ignore
from .coerce import Sample, SampleLike, coerce_samples, optional_samples, require_samples
from .options import Options, OptionsLike, resolve_options

__all__ = [
	"total", "sample_size", "average",
	"variance", "standard_deviation", "standard_deviation_ratio",
	"WelfordState", "welford_update", "welford_variance",
	"minimum", "maximum",
]


def total(samples: SampleLike) -> Sample:
	"""
	All samples added together (integers stay integers).

	>>> total([10, 10.5, 5])
	25.5
	"""
	return sum(coerce_samples(samples))


def sample_size(samples: Optional[Sized]) -> int:
	"""Number of samples; the only operation that accepts empty input (returns ``0``)."""
	if samples is None:
		return 0
	return len(samples)


def average(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> float:
	"""
	Arithmetic mean.

	If both ``total`` and ``sample_size`` are supplied the samples are not looked at
	and may be ``None``.

	>>> average([600, 470, 170, 430, 300])
	394.0
	>>> average(None, total=100, sample_size=5)
	20.0
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	return _average(xs, opts)


def _average(xs: Optional[list], opts: Options) -> float:
	tot = opts.total if opts.total is not None else sum(require_samples(xs))
	size = _size(xs, opts)
	return tot / size


def _size(xs: Optional[list], opts: Options) -> int:
	size = opts.sample_size if opts.sample_size is not None else len(require_samples(xs))
	# a supplied size of 0 stands for empty input as well
	if size == 0:
		raise EmptyInputError()
	return size


def variance(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> float:
	"""
	Sample variance with Bessel's correction, computed in two passes.

	Reuses supplied ``sample_size`` and ``average``; with ``sample_size`` and ``m2``
	(sum of squared deviations) both supplied no pass over the samples is made.
	A single sample has a variance of ``0.0``.

	>>> variance([4, 9, 11, 12, 17, 5, 8, 12, 12])
	16.0
	>>> variance([42])
	0.0

	:raises EmptyInputError: If the samples are needed and empty, or ``sample_size`` is 0.
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	if opts.variance is not None:
		return float(opts.variance)

	size = _size(xs, opts)
	if size == 1:
		return 0.0
	if opts.m2 is not None:
		return opts.m2 / (size - 1)

	xs = require_samples(xs)
	mean = opts.average if opts.average is not None else _average(xs, opts)
	with np.errstate(all="ignore"):
		squared = float(np.sum((np.asarray(xs, dtype=float) - mean) ** 2))
	return squared / (size - 1)


def standard_deviation(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> float:
	"""
	Square root of the variance, in the unit of the samples.

	>>> standard_deviation(None, variance=16.0)
	4.0
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	if opts.standard_deviation is not None:
		return float(opts.standard_deviation)
	return math.sqrt(variance(xs, opts))


def standard_deviation_ratio(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> float:
	"""
	Standard deviation relative to the absolute average (coefficient of variation).

	Defined as ``0.0`` when the average is zero.

	>>> standard_deviation_ratio([-4, -9, -11, -12, -17, -5, -8, -12, -12])
	0.4
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	mean = opts.average if opts.average is not None else _average(xs, opts)
	if opts.standard_deviation is not None:
		std = opts.standard_deviation
	else:
		std = standard_deviation(xs, opts.replace(average=mean))
	if mean == 0:
		return 0.0
	return abs(std / mean)


# --- single pass (Welford) ---
@dataclass(frozen=True)
class WelfordState:
	"""
	Running count, mean and sum of squared deviations (``m2``).

	Each :meth:`update` folds in one sample without revisiting earlier ones;
	the result matches the two-pass :func:`variance` up to rounding.
	"""

	count: int = 0
	mean: float = 0.0
	m2: float = 0.0

	def update(self, sample: Sample) -> "WelfordState":
		count = self.count + 1
		delta = sample - self.mean
		mean = self.mean + delta / count
		return WelfordState(count, mean, self.m2 + delta * (sample - mean))

	@property
	def total(self) -> float:
		return self.mean * self.count

	@property
	def variance(self) -> float:
		if self.count < 2:
			return 0.0
		return self.m2 / (self.count - 1)

	@property
	def standard_deviation(self) -> float:
		return math.sqrt(self.variance)

	@classmethod
	def from_samples(cls, samples: Iterable[Sample], start: Optional["WelfordState"] = None) -> "WelfordState":
		state = start if start is not None else cls()
		for sample in samples:
			state = state.update(sample)
		return state

	@classmethod
	def from_options(cls, options: OptionsLike = None, **known: Any) -> "WelfordState":
		"""
		Seed a state from ``sample_size``, ``m2`` and ``average`` (or ``total``).

		Without a ``sample_size`` the state is empty.

		:raises EmptyInputError: If ``sample_size`` is 0.
		"""
		opts = resolve_options(options, known)
		if opts.sample_size is None:
			return cls()
		if opts.sample_size == 0:
			raise EmptyInputError()
		if opts.average is not None:
			mean = float(opts.average)
		elif opts.total is not None:
			mean = opts.total / opts.sample_size
		else:
			raise ValueError("Seeding a running variance needs `average` or `total` next to `sample_size`")
		return cls(opts.sample_size, mean, float(opts.m2 or 0.0))


def welford_update(state: WelfordState, sample: Sample) -> WelfordState:
	"""Fold one sample into ``state`` (``(prior_state, new_sample) -> new_state``)."""
	return state.update(sample)


def welford_variance(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> float:
	"""
	Sample variance computed in a single pass (Welford's algorithm).

	When the options carry a prior accumulator (``sample_size`` with ``m2`` and
	``average`` or ``total``) the samples are treated as *new* data added on top of it.

	>>> round(welford_variance([4, 9, 11, 12, 17, 5, 8, 12, 12]), 9)
	16.0
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	start = WelfordState.from_options(opts) if opts.m2 is not None else WelfordState()
	if xs is None and start.count == 0:
		require_samples(xs)
	return WelfordState.from_samples(xs or (), start).variance


def minimum(samples: SampleLike) -> Sample:
	"""The smallest sample."""
	return min(coerce_samples(samples))


def maximum(samples: SampleLike) -> Sample:
	"""The biggest sample."""
	return max(coerce_samples(samples))
