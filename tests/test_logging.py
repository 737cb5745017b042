import json
import logging

import pytest
from pythonjsonlogger import jsonlogger

from core.logging_config import setup_logging


@pytest.fixture
def json_logging(settings, monkeypatch):
    monkeypatch.setattr(settings, "LOG_FORMAT", "json")
    setup_logging()
    yield logging.getLogger()
    monkeypatch.undo()
    setup_logging()


def test_json_format_selected(json_logging):
    formatters = [handler.formatter for handler in json_logging.handlers]
    assert any(isinstance(formatter, jsonlogger.JsonFormatter) for formatter in formatters)


def test_json_record_fields(json_logging):
    formatter = next(
        handler.formatter for handler in json_logging.handlers
        if isinstance(handler.formatter, jsonlogger.JsonFormatter)
    )
    record = logging.LogRecord("routers.posts", logging.INFO, __file__, 1, "Deleted post %s", ("abc",), None)

    payload = json.loads(formatter.format(record))
    assert payload["message"] == "Deleted post abc"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "routers.posts"
    assert "timestamp" in payload


def test_console_format_by_default(settings):
    setup_logging()
    formatters = [handler.formatter for handler in logging.getLogger().handlers]
    assert not any(isinstance(formatter, jsonlogger.JsonFormatter) for formatter in formatters)
