# src/samplestats/stats/samplestat.py

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Iterable, List, Literal, Optional, Tuple, Union

from .aggregate import Statistics, compute_all
from .coerce import Sample, SampleLike, coerce_samples
from .distribution import Mode, mode
from .moments import variance, welford_variance
from .quantile import PercentileMap, median, percentiles
from .summary import describe
from .tukey import outliers

__all__ = ["SampleStat"]

VarianceStrategy = Literal["two_pass", "welford"]


@dataclass
class SampleStat:
	"""
	Optional thin wrapper for stateful workflows.

	Examples
	--------
	>>> ss = SampleStat([9, 9, 10, 10, 10, 11, 12, 36])
	>>> ss.percentiles([25, 50, 75])
	{25: 9.25, 50: 10.0, 75: 11.75}
	>>> ss.outliers()
	([36], [9, 9, 10, 10, 10, 11, 12])

	Notes
	-----
	- ``data`` may be anything :func:`~samplestats.stats.coerce.coerce_samples`
	  accepts; ``column`` picks the column of a DataFrame.
	- If you prefer stateless usage, call module-level functions instead.
	"""

	data: SampleLike
	column: Optional[Union[int, str]] = None

	def samples(self) -> List[Sample]:
		"""Return the samples as a list of Python numbers."""
		return coerce_samples(self.data, column=self.column)

	def statistics(self, **options: Any) -> Statistics:
		"""Every statistic at once (see :func:`~samplestats.stats.aggregate.compute_all`)."""
		return compute_all(self.samples(), options)

	def describe(self, **options: Any) -> Dict[str, Any]:
		return describe(self.samples(), options)

	def percentiles(self, ranks: Union[Real, Iterable[Real]]) -> PercentileMap:
		return percentiles(self.samples(), ranks)

	def median(self) -> Sample:
		return median(self.samples())

	def mode(self) -> Mode:
		return mode(self.samples())

	def outliers(self) -> Tuple[List[Sample], List[Sample]]:
		"""``(outliers, remaining)`` in input order."""
		return outliers(self.samples())

	def variance(self, *, strategy: VarianceStrategy = "two_pass") -> float:
		"""Sample variance using the two-pass or the single-pass (Welford) strategy."""
		if strategy == "two_pass":
			return variance(self.samples())
		if strategy == "welford":
			return welford_variance(self.samples())
		raise ValueError(f"Unknown variance strategy: {strategy!r}")
