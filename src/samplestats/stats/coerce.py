# src/samplestats/stats/coerce.py
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from numbers import Real
from typing import Any, List, Optional, Union

from ..errors import EmptyInputError
from ..imports import numpy as np  # type: ignore
from ..imports import pandas as pd  # type: ignore
from ..logutil import get_logger

LOG = get_logger(__name__)

__all__ = ["Sample", "SampleLike", "coerce_samples", "optional_samples", "require_samples"]

Sample = Union[int, float]
SampleLike = Union[Sequence[Sample], Iterable[Sample], "np.ndarray", "pd.Series", "pd.DataFrame", Mapping[Any, Sample]]  # type: ignore[name-defined]


# --- Core Conversion Helpers ---
def _check_numeric(values: List[Any]) -> List[Sample]:
	"""Raise a user-friendly error if any value is not a real number."""
	for value in values:
		if isinstance(value, bool) or not isinstance(value, Real):
			raise ValueError(f"Expected numeric samples, got {value!r} ({type(value).__name__})")
	return values


def _from_ndarray(a: Any) -> List[Sample]:
	numpy = np.if_imported()
	if a.ndim != 1:
		raise ValueError(f"Expected 1D array-like; got ndim={a.ndim}")
	if not numpy.issubdtype(a.dtype, numpy.number):
		raise ValueError(f"Expected numeric data, got dtype={a.dtype!r}")
	# tolist() hands back Python ints/floats, so integer totals stay integers
	return a.tolist()


def _from_dataframe(df: Any, column: Optional[Union[int, str]]) -> List[Sample]:
	if df.shape[1] == 1 and column is None:
		return _from_ndarray(df.iloc[:, 0].to_numpy())
	if column is None:
		raise ValueError(
			f"DataFrame has {df.shape[1]} columns; please specify `column` (name or 0-based index)."
		)
	try:
		col = df.iloc[:, column] if isinstance(column, int) else df[column]
	except (IndexError, KeyError) as exc:
		LOG.error("Failed to select column %r: %s", column, exc)
		raise ValueError(f"Invalid column selector: {column!r}") from exc
	return _from_ndarray(col.to_numpy())


def _convert(data: Any, column: Optional[Union[int, str]]) -> List[Sample]:
	if isinstance(data, (list, tuple)):
		return _check_numeric(list(data))

	numpy = np.if_imported()
	if numpy is not None and isinstance(data, numpy.ndarray):
		return _from_ndarray(data)

	pandas = pd.if_imported()
	if pandas is not None:
		if isinstance(data, pandas.Series):
			return _from_ndarray(data.to_numpy())
		if isinstance(data, pandas.DataFrame):
			return _from_dataframe(data, column)

	if isinstance(data, Mapping):
		return _check_numeric(list(data.values()))

	if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Iterable):
		raise ValueError(f"Unsupported sample container: {type(data)}")

	return _check_numeric(list(data))


def coerce_samples(data: SampleLike, *, column: Optional[Union[int, str]] = None) -> List[Sample]:
	"""
	Convert a sample container to a non-empty list of Python numbers.

	Accepts: list/tuple/any iterable, 1D numpy array, pandas Series,
	a single-column DataFrame (or any DataFrame plus ``column``) and
	mappings (values are used in insertion order).
	The original numeric types are kept: integer input stays integer.

	:param data: Input samples.
	:param column: Column selector when ``data`` is a DataFrame.
	:return: List of samples in input order.
	:raises EmptyInputError: On ``None`` or empty input.
	:raises ValueError: On unsupported containers or non-numeric values.
	"""
	if data is None:
		raise EmptyInputError()
	values = _convert(data, column)
	if not values:
		raise EmptyInputError()
	return values


def optional_samples(data: Optional[SampleLike]) -> Optional[List[Sample]]:
	"""
	Coerce ``data`` unless it is ``None``.

	``None`` is how callers say "everything I need is in the options";
	an empty container is still an error.
	"""
	if data is None:
		return None
	return coerce_samples(data)


def require_samples(samples: Optional[List[Sample]]) -> List[Sample]:
	"""Return ``samples`` or raise :class:`EmptyInputError` when they are missing."""
	if samples is None:
		raise EmptyInputError()
	return samples
