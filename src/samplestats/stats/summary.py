# src/samplestats/stats/summary.py

from __future__ import annotations

from typing import Any, Dict, List

from ..logutil import get_logger
from .aggregate import compute_all
from .coerce import SampleLike
from .options import OptionsLike

from ..imports import numpy as np  # type: ignore
from ..imports import pandas as pd  # type: ignore

LOG = get_logger(__name__)

__all__ = ["SUMMARY_COLUMNS", "describe", "describe_table"]

SUMMARY_COLUMNS = [
	"total",
	"average",
	"variance",
	"standard_deviation",
	"standard_deviation_ratio",
	"median",
	"minimum",
	"maximum",
	"lower_outlier_bound",
	"upper_outlier_bound",
	"outlier_count",
	"sample_size",
]


def describe(samples: SampleLike, options: OptionsLike = None, **known: Any) -> Dict[str, Any]:
	"""
	All statistics of :func:`~samplestats.stats.aggregate.compute_all` as a plain ``dict``.

	:param samples: Non-empty samples.
	:param options: Options forwarded to ``compute_all``.
	:return: Field name → value.
	"""
	return compute_all(samples, options, **known).as_dict()


def describe_table(df: "pd.DataFrame", *, axis: int = 0, **options: Any) -> "pd.DataFrame":
	"""
	Per-column (``axis=0``) or per-row (``axis=1``) summary of a DataFrame.

	NaN cells are dropped before each vector is described, an all-NaN vector
	raises :class:`~samplestats.errors.EmptyInputError`.

	:param df: DataFrame with numeric content.
	:param axis: The axis to describe (0=columns, 1=rows).
	:param options: Options forwarded to ``compute_all`` (e.g. ``exclude_outliers``).
	:return: DataFrame indexed by column/row label with the :data:`SUMMARY_COLUMNS`.
	"""
	pandas = pd.if_imported()
	if pandas is None or not isinstance(df, pandas.DataFrame):
		raise ValueError("describe_table requires a pandas DataFrame as input")
	if axis not in (0, 1):
		raise ValueError(f"axis must be 0 or 1, got {axis!r}")

	frame = df if axis == 0 else df.T
	rows: List[Dict[str, Any]] = []
	try:
		for label in frame.columns:
			record = compute_all(frame[label].dropna(), options)
			row = {name: getattr(record, name) for name in SUMMARY_COLUMNS if name != "outlier_count"}
			row["outlier_count"] = len(record.outliers)
			rows.append(row)
	except Exception as exc:
		LOG.exception("describe_table failed (axis=%s): %s", axis, exc)
		raise

	table = pd.DataFrame(rows, columns=SUMMARY_COLUMNS, index=pd.Index(list(frame.columns), name="column" if axis == 0 else "row"))
	numeric = [c for c in SUMMARY_COLUMNS if c not in ("outlier_count", "sample_size")]
	table[numeric] = table[numeric].astype(np.float64)
	return table
