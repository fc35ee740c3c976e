# src/samplestats/errors.py

from __future__ import annotations

__all__ = [
	"EMPTY_INPUT_MESSAGE",
	"StatisticsError",
	"EmptyInputError",
	"PercentileRangeError",
	"OptionsError",
]

EMPTY_INPUT_MESSAGE = (
	"Passed an empty list ([]) to calculate statistics from, "
	"please pass a list containing at least one number."
)


class StatisticsError(ValueError):
	"""Base class for all errors raised by samplestats."""


class EmptyInputError(StatisticsError):
	"""
	Raised when a statistic is requested for an empty sample collection.

	Only :func:`samplestats.stats.moments.sample_size` accepts empty input
	(and returns ``0``).
	"""

	def __init__(self, message: str = EMPTY_INPUT_MESSAGE) -> None:
		super().__init__(message)


class PercentileRangeError(StatisticsError):
	"""Raised when a percentile rank is not strictly between 0 and 100."""

	def __init__(self, rank: object) -> None:
		super().__init__(f"percentile must be between 0 and 100, got: {rank!r}")
		self.rank = rank


class OptionsError(StatisticsError):
	"""Unknown option key, wrongly typed option value or unknown exclusion policy."""
