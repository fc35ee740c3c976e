"""Tests for :mod:`samplestats.logutil`."""

from __future__ import annotations

import logging

import pytest

from samplestats import compute_all, configure_logging
from samplestats.logutil import PACKAGE_LOGGER, get_logger


@pytest.fixture()
def clean_logger():
	log = logging.getLogger("samplestats_test")
	yield "samplestats_test"
	for handler in list(log.handlers):
		handler.close()
		log.removeHandler(handler)


def test_module_loggers_propagate_to_package_logger():
	child = get_logger("samplestats.stats.aggregate")
	assert not child.handlers
	assert get_logger().handlers
	assert get_logger().name == PACKAGE_LOGGER


def test_configure_logging_with_file(tmp_path, clean_logger):
	path = tmp_path / "logs" / "run.log"
	log = configure_logging(name=clean_logger, console_level="WARNING", file_path=path, file_level="DEBUG")
	assert log.level == logging.DEBUG
	log.debug("hello file")
	for handler in log.handlers:
		handler.flush()
	assert "hello file" in path.read_text(encoding="utf-8")

	# configuring twice does not duplicate the file handler
	configure_logging(name=clean_logger, file_path=path)
	assert sum(isinstance(h, logging.FileHandler) for h in log.handlers) == 1


def test_reconfiguring_adjusts_the_console_handler(clean_logger):
	log = configure_logging(name=clean_logger, console_level="ERROR")
	log = configure_logging(name=clean_logger, console_level="DEBUG")
	consoles = [h for h in log.handlers if not isinstance(h, logging.FileHandler)]
	assert len(consoles) == 1
	assert consoles[0].level == logging.DEBUG
	assert log.level == logging.DEBUG
	assert log.propagate is False


def test_unknown_level_name(clean_logger):
	with pytest.raises(ValueError):
		configure_logging(name=clean_logger, console_level="LOUD")  # type: ignore[arg-type]


def test_exclusion_rounds_are_logged_at_debug(caplog):
	log = logging.getLogger(PACKAGE_LOGGER)
	log.propagate = True
	try:
		with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
			compute_all([50, 50, 450, 450, 450, 500, 500, 500, 600, 900], exclude_outliers="repeatedly")
	finally:
		log.propagate = False
	assert any("Excluding 3 outlier(s)" in rec.getMessage() for rec in caplog.records)
