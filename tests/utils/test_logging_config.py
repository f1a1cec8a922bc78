"""Tests for utils/logging_config.py - JSON log output and root logger setup."""

import json
import logging
import sys

import pytest

from utils.logging_config import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("api.actions", logging.ERROR, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:

    def test_core_fields(self):
        log = json.loads(JSONFormatter().format(_record()))

        assert log["level"] == "ERROR"
        assert log["logger"] == "api.actions"
        assert log["message"] == "hello"
        assert "timestamp" in log

    def test_known_extras_included(self):
        log = json.loads(JSONFormatter().format(_record(invoice_id="inv1", status_code=303)))

        assert log["invoice_id"] == "inv1"
        assert log["status_code"] == 303

    def test_unknown_extras_ignored(self):
        log = json.loads(JSONFormatter().format(_record(secret="x")))
        assert "secret" not in log

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        log = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: boom" in log["exception"]


class TestSetupLogging:

    def test_sets_level(self, restore_root):
        setup_logging("WARNING")
        assert restore_root.level == logging.WARNING

    def test_repeated_calls_do_not_stack_handlers(self, restore_root):
        before = len(restore_root.handlers)

        setup_logging()
        setup_logging(fmt="text")

        assert len(restore_root.handlers) == before + 1
        assert not isinstance(restore_root.handlers[-1].formatter, JSONFormatter)

    def test_json_format(self, restore_root):
        setup_logging(fmt="json")
        assert isinstance(restore_root.handlers[-1].formatter, JSONFormatter)
