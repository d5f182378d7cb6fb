# src/hrms/tests/test_logging/test_formatters.py
import json
import logging

from hrms.core.logging.formatters import ColorFormatter, JsonFormatter


def make_record():
    return logging.LogRecord("hrms.repositories", logging.INFO, __file__, 10, "repo.create.success", (), None)


def test_json_formatter_basic_fields():
    rec = make_record()
    rec.model = "Branch"
    rec.duration_ms = 3
    rec.request_id = "req-1"

    data = json.loads(JsonFormatter(env="testing", service="svc").format(rec))

    assert data["message"] == "repo.create.success"
    assert data["level"] == "INFO"
    assert data["logger"] == "hrms.repositories"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["request_id"] == "req-1"
    assert "timestamp" in data
    assert "version" in data
    # extras are flattened into the line
    assert data["model"] == "Branch"
    assert data["duration_ms"] == 3


def test_json_formatter_non_serializable_extra():
    rec = make_record()

    class X:
        def __repr__(self):
            return "<X>"

    rec.obj = X()
    data = json.loads(JsonFormatter(env="dev").format(rec))

    assert data["obj"] == "<X>"
    assert data["service"] == "hrms-api"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        import sys
        rec = logging.LogRecord("hrms", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    data = json.loads(JsonFormatter().format(rec))
    assert "ValueError: boom" in data["exc_info"]


def test_color_formatter_layout():
    rec = make_record()
    rec.request_id = "rid-42"

    line = ColorFormatter().format(rec)

    assert "INFO" in line
    assert "hrms.repositories" in line
    assert "rid-42" in line
    assert line.endswith("repo.create.success")


def test_color_formatter_appends_extras():
    rec = make_record()
    rec.model = "Branch"
    rec.id = 7

    line = ColorFormatter().format(rec)

    assert line.endswith("repo.create.success model=Branch id=7")


def test_json_formatter_source_location():
    rec = make_record()

    data = json.loads(JsonFormatter().format(rec))

    assert data["source"].endswith(":10")
