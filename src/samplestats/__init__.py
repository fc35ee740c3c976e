"""
samplestats: descriptive statistics that never compute a value twice.

Top-level API keeps imports lazy:

    from samplestats import compute_all
    stats = compute_all([50, 50, 450, 450, 450, 500, 500, 500, 600, 900])
    stats.median, stats.outliers      # (475.0, [50, 50, 900])

    from samplestats import SampleStat
    SampleStat(series).statistics(exclude_outliers="repeatedly")

    from samplestats import configure_logging
    configure_logging(console_level="DEBUG")
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("samplestats")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# main facades
	"compute_all", "statistics", "Statistics", "SampleStat",
	"Options", "ExclusionPolicy",
	"configure_logging",
	# errors
	"StatisticsError", "EmptyInputError", "PercentileRangeError", "OptionsError",
	# namespaces
	"imports", "logutil", "stats", "errors",
]

# --- lazy maps ---------------------------------------------------------------
_STATS_EXPORTS = {"compute_all", "statistics", "Statistics", "SampleStat", "Options", "ExclusionPolicy"}
_ERROR_EXPORTS = {"StatisticsError", "EmptyInputError", "PercentileRangeError", "OptionsError"}
_NAMESPACES = {"imports", "logutil", "stats", "errors"}


def __getattr__(name: str):
	if name == "configure_logging":
		return import_module("samplestats.logutil").configure_logging
	if name in _NAMESPACES:
		return import_module(f"samplestats.{name}")
	if name in _STATS_EXPORTS:
		return getattr(import_module("samplestats.stats"), name)
	if name in _ERROR_EXPORTS:
		return getattr(import_module("samplestats.errors"), name)

	raise AttributeError(f"module 'samplestats' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from . import imports, logutil, stats, errors  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
	from .errors import StatisticsError, EmptyInputError, PercentileRangeError, OptionsError  # noqa: F401
	from .stats import compute_all, statistics, Statistics, SampleStat, Options, ExclusionPolicy  # noqa: F401
