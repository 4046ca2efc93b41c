"""Тесты форматтеров логирования"""
import json
import logging

from structocr import logging_config
from structocr.logging_config import JSONFormatter, get_log_format, get_log_level


def _record(**extra):
    record = logging.LogRecord(
        name="structocr.client",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="POST %s",
        args=("https://x.test/v1/vin",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    data = json.loads(JSONFormatter().format(_record(endpoint="vin", status_code=200)))
    assert data["message"] == "POST https://x.test/v1/vin"
    assert data["level"] == "DEBUG"
    assert data["endpoint"] == "vin"
    assert data["status_code"] == 200
    assert "duration_ms" not in data


def test_level_and_format_from_env(monkeypatch):
    monkeypatch.setenv("STRUCTOCR_LOG_LEVEL", "debug")
    monkeypatch.setenv("STRUCTOCR_LOG_FORMAT", "JSON")
    assert get_log_level() == logging.DEBUG
    assert get_log_format() == "json"
    assert get_log_level("warning") == logging.WARNING


def test_setup_logging_is_idempotent(monkeypatch):
    monkeypatch.setattr(logging_config, "_logging_initialized", False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        logging_config.setup_logging("INFO", "json")
        handlers = root.handlers[:]
        logging_config.setup_logging("DEBUG", "text")
        assert root.handlers == handlers
        assert isinstance(handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
