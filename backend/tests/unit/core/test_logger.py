"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from todolist.core.logger import JSONFormatter, RequestIdFilter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("WARNING")


def test_json_formatter_includes_extras() -> None:
    record = logging.LogRecord("todolist.test", logging.INFO, __file__, 1, "hello %s", ("ada",), None)
    record.event = "account.registered"
    record.user_id = 7

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "hello ada"
    assert payload["level"] == "INFO"
    assert payload["event"] == "account.registered"
    assert payload["user_id"] == 7
    assert "endpoint" not in payload


def test_request_id_echoed_on_response(client) -> None:
    response = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_filter_keeps_caller_value() -> None:
    record = logging.LogRecord("todolist.test", logging.INFO, __file__, 1, "hi", None, None)
    record.request_id = "req-42"

    assert RequestIdFilter().filter(record)
    assert record.request_id == "req-42"


def test_request_id_filter_off_request_is_none() -> None:
    record = logging.LogRecord("todolist.test", logging.INFO, __file__, 1, "hi", None, None)

    assert RequestIdFilter().filter(record)
    assert record.request_id is None
