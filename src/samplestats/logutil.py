# src/samplestats/logutil.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional, Union

__all__ = ["PACKAGE_LOGGER", "get_logger", "configure_logging"]

PathLike = Union[str, Path]

PACKAGE_LOGGER = "samplestats"

ConsoleLevelName = Literal[
	"CRITICAL",
	"FATAL",
	"ERROR",
	"WARNING",
	"WARN",
	"INFO",
	"DEBUG",
	"NOTSET",
]

LevelLike = Union[int, ConsoleLevelName]


def _normalize_level(value: LevelLike, *, param_name: str) -> int:
	if isinstance(value, int):
		return value

	resolved = logging.getLevelName(value.upper())
	if isinstance(resolved, int):
		return resolved

	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
	"""
	Return a package logger.

	The top-level ``samplestats`` logger gets a single console handler the first
	time it is requested; module loggers (``samplestats.stats.*``) carry no
	handler of their own and propagate to it.

	:param name: Logger name.
	:return: The logger.
	"""
	log = logging.getLogger(name)
	root = log if name == PACKAGE_LOGGER else logging.getLogger(PACKAGE_LOGGER)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
		root.addHandler(handler)
		root.setLevel(logging.INFO)
		root.propagate = False
	return log


def configure_logging(
		*,
		name: str = PACKAGE_LOGGER,
		console_level: ConsoleLevelName = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None
) -> logging.Logger:
	"""
	Configure the package logger (console and optional file output).

	Calling it again adjusts the console handler in place and never attaches a
	second handler for the same log file.

	:param name: Logger name.
	:param console_level: Console handler level.
	:param file_path: Optional log file path to add a file handler (appended to).
	:param file_level: File handler level (int or level name,
					   defaults to console-level if None).
	:return: The configured logger.
	"""
	console_level_value = _normalize_level(console_level, param_name="console_level")
	file_level_value = (
		_normalize_level(file_level, param_name="file_level")
		if file_level is not None
		else console_level_value
	)

	log = get_logger(name)
	log.setLevel(min(console_level_value, file_level_value if file_path else console_level_value))
	log.propagate = False

	fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

	consoles = [
		handler for handler in log.handlers
		# FileHandler subclasses StreamHandler
		if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
	]
	if not consoles:
		consoles = [logging.StreamHandler()]
		log.addHandler(consoles[0])
	for handler in consoles:
		handler.setLevel(console_level_value)
		handler.setFormatter(fmt)

	if file_path:
		path = Path(file_path)
		path.parent.mkdir(parents=True, exist_ok=True)
		if not any(getattr(h, "baseFilename", None) == str(path.resolve()) for h in log.handlers):
			file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
			file_handler.setLevel(file_level_value)
			file_handler.setFormatter(fmt)
			log.addHandler(file_handler)

	return log
