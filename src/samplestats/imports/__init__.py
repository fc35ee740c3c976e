# src/samplestats/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

# Convenience lazy proxies; plain list input never touches them
np = numpy = lazy_module("numpy", install="pip install numpy", reason="array input and summary tables")
pd = pandas = lazy_module("pandas", install="pip install pandas", reason="Series/DataFrame input and summary tables")

__all__ = [
	"LazyModule", "lazy_module",
	"np", "numpy", "pd", "pandas",
]
