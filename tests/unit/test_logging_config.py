"""Tests for structured logging setup."""

from __future__ import annotations

import json
import logging

import pytest

from laborlens.core.logging_config import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord("laborlens.ingest", logging.WARNING, __file__, 10,
                               "No week-ending date found", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_core_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "laborlens.ingest"
        assert entry["message"] == "No week-ending date found"
        assert "file_name" not in entry

    def test_report_context_fields(self):
        entry = json.loads(JSONFormatter().format(_record(file_name="week.xlsx", fallback_rows=2)))
        assert entry["file_name"] == "week.xlsx"
        assert entry["fallback_rows"] == "2"


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger("laborlens")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    logger.setLevel(saved[0])
    logger.handlers, logger.propagate = saved[1], saved[2]


class TestSetupLogging:
    def test_configures_package_logger(self):
        setup_logging("debug", json_output=True)
        logger = logging.getLogger("laborlens")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("laborlens").handlers) == 1
