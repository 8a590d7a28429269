"""Tests for core.logging_config module."""

import json
import logging
import sys

from core.logging_config import StructuredFormatter


def _record(msg="Fetched 3 matches", **extra):
    record = logging.LogRecord(
        name="core.schedule.sources",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_as_json():
    """Test the standard fields are present."""
    data = json.loads(StructuredFormatter().format(_record()))

    assert data["level"] == "INFO"
    assert data["logger"] == "core.schedule.sources"
    assert data["message"] == "Fetched 3 matches"
    assert data["line"] == 10
    assert "timestamp" in data
    assert "exception" not in data


def test_includes_extra_fields():
    """Test user_id and command extras are carried."""
    record = _record(user_id=42, command="games")
    data = json.loads(StructuredFormatter().format(record))

    assert data["user_id"] == 42
    assert data["command"] == "games"
    assert "channel_id" not in data


def test_includes_exception():
    """Test exception tracebacks are serialized."""
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    data = json.loads(StructuredFormatter().format(record))
    assert "RuntimeError: boom" in data["exception"]
