# src/exception_transformer/tests/test_logging/test_formatters.py
import json
import logging
import sys

from exception_transformer.core.logging.formatters import ColorFormatter, JsonFormatter


def make_record():
    # create a LogRecord that simulates formatting with args
    return logging.LogRecord("exception_transformer", logging.INFO, __file__, 10, "hello %s", ("tester",), None)


def test_json_formatter_basic_fields():
    rec = make_record()
    rec.custom = "value"
    rec.exception_type = "ValidationError"
    fmt = JsonFormatter(env="testing", service="svc")

    data = json.loads(fmt.format(rec))

    assert data["message"] == "hello tester"
    assert data["level"] == "INFO"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["exception_type"] == "ValidationError"
    assert data["custom"] == "value"
    assert "timestamp" in data
    assert "version" in data


def test_json_formatter_skips_standard_record_attributes():
    data = json.loads(JsonFormatter(env="testing", service="svc").format(make_record()))

    assert "args" not in data
    assert "msg" not in data
    assert "levelno" not in data
    assert data["exception_type"] == "-"


def test_json_formatter_non_serializable_extra():
    rec = make_record()

    class X:
        def __repr__(self):
            return "<X>"

    rec.obj = X()
    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))

    assert data["obj"] == "<X>"


def test_json_formatter_includes_exc_info():
    try:
        raise ValueError("boom")
    except ValueError:
        rec = logging.LogRecord("exception_transformer", logging.ERROR, __file__, 10, "failed", None, sys.exc_info())

    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))

    assert "ValueError: boom" in data["exc_info"]


def test_color_formatter_line():
    rec = make_record()
    rec.exception_type = "ValidationError"

    line = ColorFormatter().format(rec)

    assert "hello tester" in line
    assert "ValidationError" in line
    assert ColorFormatter.COLOR_CODES["INFO"] in line
    assert line.count(ColorFormatter.COLOR_CODES["RESET"]) == 1
