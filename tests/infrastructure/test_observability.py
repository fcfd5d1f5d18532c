"""Structured Logging — tests for the JSON formatter."""

import json
import logging

from userprofile.infrastructure.observability import JSONFormatter


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        name="userprofile.test", level=logging.WARNING, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "userprofile.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="USER_NOT_FOUND", user_id=3, unrelated="x"),
    ))
    assert log["error_code"] == "USER_NOT_FOUND"
    assert log["user_id"] == 3
    assert "unrelated" not in log
