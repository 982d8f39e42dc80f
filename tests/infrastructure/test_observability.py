"""Structured Logging - JSON formatter output and handler setup."""

import json
import logging

import pytest

from user_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "user_api.test", logging.INFO, __file__, 1, "user deleted", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "user_api.test"
    assert payload["message"] == "user deleted"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(_record(user_id=7, secret="x")))
    assert payload["user_id"] == 7
    assert "secret" not in payload


@pytest.fixture
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def test_setup_logging_does_not_stack_handlers(restore_root_logging):
    setup_logging("DEBUG", "json")
    handler = setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "user_api"]
    assert ours == [handler]
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
