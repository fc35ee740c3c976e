# src/samplestats/stats/distribution.py

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional, Union

from ..errors import EmptyInputError
from .coerce import Sample, SampleLike, coerce_samples, optional_samples, require_samples
from .options import OptionsLike, resolve_options

__all__ = ["FrequencyDistribution", "Mode", "frequency_distribution", "mode"]

FrequencyDistribution = Dict[Sample, int]

# None: nothing repeats; a bare sample: one most frequent value; a list: tie
Mode = Union[None, Sample, List[Sample]]


def frequency_distribution(samples: SampleLike) -> FrequencyDistribution:
	"""
	How often each distinct sample occurs.

	Keys follow the order of first occurrence.

	>>> frequency_distribution([1, 2, 4.23, 7, 2, 99])
	{1: 1, 2: 2, 4.23: 1, 7: 1, 99: 1}
	"""
	return dict(Counter(coerce_samples(samples)))


def mode(samples: Optional[SampleLike], options: OptionsLike = None, **known: Any) -> Mode:
	"""
	The sample(s) occurring most often.

	Returns ``None`` when no sample occurs at least twice, the sample itself when
	it is the single most frequent one, and a list of all tied samples otherwise
	(in the key order of the frequency distribution). A supplied
	``frequency_distribution`` is used instead of counting.

	>>> mode([5, 3, 4, 5, 1, 3, 1, 3])
	3
	>>> mode([1, 2, 3, 4, 5]) is None
	True
	>>> sorted(mode([5, 3, 4, 5, 1, 3, 1]))
	[1, 3, 5]

	:raises EmptyInputError: If the samples, or a supplied distribution, are empty.
	"""
	xs = optional_samples(samples)
	opts = resolve_options(options, known)
	counts = opts.frequency_distribution
	if counts is None:
		counts = frequency_distribution(require_samples(xs))

	if not counts:
		raise EmptyInputError()
	top = max(counts.values())
	if top < 2:
		return None
	modes = [value for value, count in counts.items() if count == top]
	return modes[0] if len(modes) == 1 else modes
