# src/samplestats/stats/options.py

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..errors import OptionsError

__all__ = [
	"ExclusionPolicy",
	"Options",
	"OptionsLike",
	"KeySpec",
	"make_choices_validator",
	"options_from_mapping",
	"resolve_options",
]

Validator = Callable[[Any], None]


class ExclusionPolicy(str, Enum):
	"""How :func:`~samplestats.stats.aggregate.compute_all` treats outliers."""

	NONE = "none"
	ONCE = "once"
	REPEATEDLY = "repeatedly"

	@classmethod
	def coerce(cls, value: Union[bool, str, "ExclusionPolicy", None]) -> "ExclusionPolicy":
		"""
		Map booleans and policy names onto a policy.

		``False``/``None`` → ``NONE``, ``True`` → ``ONCE``; strings are matched
		case-insensitively against the policy values.

		:raises OptionsError: For anything else.
		"""
		if isinstance(value, cls):
			return value
		if value is None or value is False:
			return cls.NONE
		if value is True:
			return cls.ONCE
		if isinstance(value, str):
			try:
				return cls(value.strip().lower())
			except ValueError:
				pass
		allowed = ", ".join(repr(p.value) for p in cls)
		raise OptionsError(f"exclude_outliers must be a bool or one of {allowed}, got {value!r}")


@dataclass(frozen=True)
class Options:
	"""
	Already known results plus the few switches the operations read.

	Every value field is optional: an operation uses what is present and
	computes what is missing from the samples. :func:`compute_all` threads
	its intermediates to the sub-computations through this structure.

	:param total: Sum of the samples.
	:param sample_size: Number of samples.
	:param average: Arithmetic mean.
	:param variance: Sample variance (Bessel-corrected).
	:param m2: Sum of squared deviations from the mean (Welford accumulator).
	:param standard_deviation: Square root of the variance.
	:param percentiles: Known percentile map (rank → value).
	:param percentile_ranks: Extra ranks :func:`compute_all` should report.
	:param outlier_bounds: Known ``(lower, upper)`` Tukey fences.
	:param frequency_distribution: Known value → count map.
	:param sorted: Caller asserts the samples are sorted ascending (not verified).
	:param exclude_outliers: Outlier exclusion policy for :func:`compute_all`.
	"""

	total: Optional[Real] = None
	sample_size: Optional[int] = None
	average: Optional[float] = None
	variance: Optional[float] = None
	m2: Optional[float] = None
	standard_deviation: Optional[float] = None
	percentiles: Optional[Mapping[Real, Real]] = None
	percentile_ranks: Tuple[Real, ...] = ()
	outlier_bounds: Optional[Tuple[Real, Real]] = None
	frequency_distribution: Optional[Mapping[Real, int]] = None
	sorted: bool = False
	exclude_outliers: ExclusionPolicy = ExclusionPolicy.NONE

	def __post_init__(self) -> None:
		object.__setattr__(self, "exclude_outliers", ExclusionPolicy.coerce(self.exclude_outliers))
		object.__setattr__(self, "percentile_ranks", tuple(self.percentile_ranks))

	def replace(self, **changes: Any) -> "Options":
		"""Return a copy with ``changes`` applied (keys as accepted by :func:`options_from_mapping`)."""
		return dataclasses.replace(self, **_normalize(changes))


OptionsLike = Union[Options, Mapping[str, Any], None]


# ------------------------------- KeySpec -----------------------------------
@dataclass
class KeySpec:
	"""
	Validation rule for one option key.

	:param expected_type: Allowed type (or tuple of types) for the value.
	:param validator: Optional callable receiving the value; must raise on invalid content.
	"""
	expected_type: Union[type, Tuple[type, ...]]
	validator: Optional[Validator] = None

	def check(self, key: str, value: Any) -> None:
		if isinstance(value, bool) and bool not in _as_tuple(self.expected_type):
			raise OptionsError(f"Option {key!r} expects {_type_names(self.expected_type)}, got bool")
		if not isinstance(value, self.expected_type):
			raise OptionsError(
				f"Option {key!r} expects {_type_names(self.expected_type)}, got {type(value).__name__}"
			)
		if self.validator is not None:
			try:
				self.validator(value)
			except (TypeError, ValueError) as exc:
				raise OptionsError(f"Option {key!r}: {exc}") from exc


def make_choices_validator(choices: Iterable[Any]) -> Validator:
	"""
	Build a validator that ensures the value is one of the allowed *choices*.

	:param choices: Iterable of allowed values (compared using equality).
	:return: A callable that raises ``ValueError`` if the value is not allowed.
	"""
	allowed = list(choices)

	def _validator(value: Any) -> None:
		probe = value.lower() if isinstance(value, str) else value
		if probe not in allowed:
			raise ValueError(f"value {value!r} not in allowed set {allowed!r}")

	return _validator


def _as_tuple(t: Union[type, Tuple[type, ...]]) -> Tuple[type, ...]:
	return t if isinstance(t, tuple) else (t,)


def _type_names(t: Union[type, Tuple[type, ...]]) -> str:
	return " or ".join(x.__name__ for x in _as_tuple(t))


def _non_negative(value: Any) -> None:
	if value < 0:
		raise ValueError(f"must be >= 0, got {value!r}")


def _pair(value: Any) -> None:
	if len(value) != 2 or not all(isinstance(v, Real) for v in value):
		raise ValueError(f"expected a (lower, upper) pair of numbers, got {value!r}")


_KEY_SPECS: Dict[str, KeySpec] = {
	"total": KeySpec(Real),
	"sample_size": KeySpec(int, _non_negative),
	"average": KeySpec(Real),
	"variance": KeySpec(Real, _non_negative),
	"m2": KeySpec(Real, _non_negative),
	"standard_deviation": KeySpec(Real, _non_negative),
	"percentiles": KeySpec(Mapping),
	"percentile_ranks": KeySpec(tuple),
	"outlier_bounds": KeySpec((tuple, list), _pair),
	"frequency_distribution": KeySpec(Mapping),
	"sorted": KeySpec(bool),
	"exclude_outliers": KeySpec(
		(bool, str, ExclusionPolicy),
		make_choices_validator([True, False] + [p for p in ExclusionPolicy] + [p.value for p in ExclusionPolicy]),
	),
}

# alternative spellings seen in callers' option mappings
_ALIASES = {
	"sorted?": "sorted",
	"outliers_bounds": "outlier_bounds",
}


def _ranks(value: Any) -> Tuple[Real, ...]:
	if isinstance(value, Real) and not isinstance(value, bool):
		return (value,)
	if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
		raise OptionsError(f"Option 'percentiles' expects a mapping, a number or a list of numbers, got {value!r}")
	ranks = tuple(value)
	for rank in ranks:
		if isinstance(rank, bool) or not isinstance(rank, Real):
			raise OptionsError(f"Percentile ranks must be numbers, got {rank!r}")
	return ranks


def _normalize(raw: Mapping[str, Any]) -> Dict[str, Any]:
	"""Validate option keys/values and convert them to :class:`Options` field values."""
	out: Dict[str, Any] = {}
	for key, value in raw.items():
		name = _ALIASES.get(key, key)
		if name not in _KEY_SPECS:
			known = ", ".join(sorted(set(_KEY_SPECS) | set(_ALIASES)))
			raise OptionsError(f"Unknown option {key!r}; known options: {known}")
		if value is None:
			continue
		# `percentiles` is overloaded: a map of known values, or ranks to compute
		if name == "percentiles" and not isinstance(value, Mapping):
			out["percentile_ranks"] = out.get("percentile_ranks", ()) + _ranks(value)
			continue
		if name == "percentile_ranks":
			value = _ranks(value)
		_KEY_SPECS[name].check(key, value)
		if name == "exclude_outliers":
			value = ExclusionPolicy.coerce(value)
		elif name == "outlier_bounds":
			value = tuple(value)
		out[name] = value
	return out


def options_from_mapping(mapping: Mapping[str, Any]) -> Options:
	"""
	Build :class:`Options` from a plain mapping.

	Accepts the option names ``total``, ``sample_size``, ``average``, ``variance``,
	``m2``, ``standard_deviation``, ``percentiles``, ``outlier_bounds``,
	``frequency_distribution``, ``sorted?`` (or ``sorted``) and ``exclude_outliers``.
	``percentiles`` given as a mapping is a known percentile map; given as a number
	or a list it names extra ranks to compute. ``None`` values count as absent.

	:raises OptionsError: On unknown keys or invalid values.
	"""
	if not isinstance(mapping, Mapping):
		raise OptionsError(f"Options must be a mapping, got {type(mapping).__name__}")
	return Options(**_normalize(mapping))


def resolve_options(options: OptionsLike = None, known: Optional[Mapping[str, Any]] = None) -> Options:
	"""
	Merge an :class:`Options`/mapping with keyword overrides.

	:param options: ``None``, an :class:`Options` instance or a mapping.
	:param known: Keyword overrides (take precedence over ``options``).
	:return: A fresh :class:`Options`.
	"""
	if options is None:
		base = Options()
	elif isinstance(options, Options):
		base = options
	else:
		base = options_from_mapping(options)
	if known:
		return base.replace(**known)
	return base
