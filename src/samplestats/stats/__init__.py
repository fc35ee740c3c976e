# src/samplestats/stats/__init__.py
"""
Descriptive statistics split by concern.

Every statistic that depends on another one accepts the already known value
as an option, so nothing is computed twice:

    >>> from samplestats.stats import average, variance
    >>> mean = average([4, 9, 11, 12, 17, 5, 8, 12, 12])
    >>> variance([4, 9, 11, 12, 17, 5, 8, 12, 12], average=mean, sample_size=9)
    16.0
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
	# functions
	"coerce_samples",
	"resolve_options", "options_from_mapping",
	"maybe_sort",
	"percentiles", "percentile", "median",
	"outlier_bounds", "outliers",
	"total", "sample_size", "average", "variance", "welford_variance", "welford_update",
	"standard_deviation", "standard_deviation_ratio", "minimum", "maximum",
	"frequency_distribution", "mode",
	"compute_all", "statistics",
	"describe", "describe_table",
	# classes
	"Options", "ExclusionPolicy", "WelfordState", "Statistics", "SampleStat",
]

_MOD_OF = {
	"coerce_samples": "samplestats.stats.coerce",
	"resolve_options": "samplestats.stats.options",
	"options_from_mapping": "samplestats.stats.options",
	"Options": "samplestats.stats.options",
	"ExclusionPolicy": "samplestats.stats.options",
	"maybe_sort": "samplestats.stats.sorting",
	"percentiles": "samplestats.stats.quantile",
	"percentile": "samplestats.stats.quantile",
	"median": "samplestats.stats.quantile",
	"outlier_bounds": "samplestats.stats.tukey",
	"outliers": "samplestats.stats.tukey",
	"total": "samplestats.stats.moments",
	"sample_size": "samplestats.stats.moments",
	"average": "samplestats.stats.moments",
	"variance": "samplestats.stats.moments",
	"welford_variance": "samplestats.stats.moments",
	"welford_update": "samplestats.stats.moments",
	"WelfordState": "samplestats.stats.moments",
	"standard_deviation": "samplestats.stats.moments",
	"standard_deviation_ratio": "samplestats.stats.moments",
	"minimum": "samplestats.stats.moments",
	"maximum": "samplestats.stats.moments",
	"frequency_distribution": "samplestats.stats.distribution",
	"mode": "samplestats.stats.distribution",
	"compute_all": "samplestats.stats.aggregate",
	"statistics": "samplestats.stats.aggregate",
	"Statistics": "samplestats.stats.aggregate",
	"describe": "samplestats.stats.summary",
	"describe_table": "samplestats.stats.summary",
	"SampleStat": "samplestats.stats.samplestat",
}


def __getattr__(name: str):
	if name in _MOD_OF:
		mod = import_module(_MOD_OF[name])
		return getattr(mod, name)
	raise AttributeError(f"module 'samplestats.stats' has no attribute {name!r}")


if TYPE_CHECKING:
	from .coerce import coerce_samples
	from .options import Options, ExclusionPolicy, resolve_options, options_from_mapping
	from .sorting import maybe_sort
	from .quantile import percentiles, percentile, median
	from .tukey import outlier_bounds, outliers
	from .moments import (
		total, sample_size, average, variance, welford_variance, welford_update, WelfordState,
		standard_deviation, standard_deviation_ratio, minimum, maximum,
	)
	from .distribution import frequency_distribution, mode
	from .aggregate import Statistics, compute_all, statistics
	from .summary import describe, describe_table
	from .samplestat import SampleStat
