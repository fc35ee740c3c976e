# src/samplestats/stats/sorting.py

from __future__ import annotations

from typing import List, Sequence

from .coerce import Sample
from .options import Options

__all__ = ["maybe_sort"]


def maybe_sort(samples: Sequence[Sample], options: Options) -> List[Sample]:
	"""
	Sort ascending unless the caller asserted ``options.sorted``.

	The assertion is trusted, not verified: unsorted input flagged as sorted
	silently produces wrong percentiles.
	"""
	if options.sorted:
		return samples if isinstance(samples, list) else list(samples)
	return sorted(samples)
