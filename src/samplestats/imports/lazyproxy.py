# src/samplestats/imports/lazyproxy.py

from __future__ import annotations

import importlib
import sys
from types import ModuleType
from typing import Any, Optional

__all__ = ["LazyModule", "lazy_module"]


class LazyModule:
	"""
	Proxy that imports a module on first attribute access.

	Notes
	-----
	* A missing module raises an ImportError carrying the install hint.
	* :meth:`if_imported` lets type checks skip modules nobody has imported yet:
	  an object cannot be a ``numpy.ndarray`` unless numpy is already in
	  :data:`sys.modules`.
	"""
	def __init__(
			self,
			name: str,
			*,
			install: Optional[str] = None,
			reason: Optional[str] = None
	) -> None:
		self._name = name
		self._mod: Optional[ModuleType] = None
		self._install = install
		self._reason = reason

	@property
	def name(self) -> str:
		return self._name

	def _load(self) -> ModuleType:
		if self._mod is None:
			try:
				self._mod = importlib.import_module(self._name)
			except ImportError as exc:
				parts = [f"Dependency module '{self._name}' is not installed."]
				if self._reason:
					parts.append(f"Needed for {self._reason}.")
				if self._install:
					parts.append(f"Install with '{self._install}'.")
				raise ImportError(" ".join(parts)) from exc
		return self._mod

	def if_imported(self) -> Optional[ModuleType]:
		"""Return the module if something already imported it, else ``None`` (never imports)."""
		if self._mod is not None:
			return self._mod
		mod = sys.modules.get(self._name)
		if mod is not None:
			self._mod = mod
		return mod

	def __getattr__(self, item: str) -> Any:
		return getattr(self._load(), item)

	def __repr__(self) -> str:
		state = "not loaded" if self._mod is None else f"loaded={self._mod!r}"
		return f"<LazyModule name={self._name!r} {state}>"


def lazy_module(
		name: str, *, install: Optional[str] = None, reason: Optional[str] = None
) -> LazyModule:
	"""
	Create a lazy module proxy.

	:param name: Fully qualified module name.
	:param install: Optional installation hint for the ImportError message.
	:param reason: Optional context why the dependency is needed.
	:return: :class:`LazyModule` instance.
	"""
	return LazyModule(name, install=install, reason=reason)
