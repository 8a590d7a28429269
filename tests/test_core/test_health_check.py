"""Tests for core.health_check module."""

import pendulum
import pytest

from core import health_check


@pytest.fixture
def temp_health_file(tmp_path, monkeypatch):
    """Point the heartbeat at a temporary file."""
    path = tmp_path / "bot_health.txt"
    monkeypatch.setattr(health_check, "HEALTH_CHECK_FILE", path)
    return path


def test_read_missing_file(temp_health_file):
    assert health_check.read_health_check() is None


def test_update_then_read(temp_health_file):
    """Test the heartbeat round-trips as a recent UTC time."""
    health_check.update_health_check()

    stamp = health_check.read_health_check()

    assert stamp is not None
    assert (pendulum.now("UTC") - stamp).in_seconds() < 60


def test_read_garbage(temp_health_file):
    """Test an unreadable heartbeat is reported as missing."""
    temp_health_file.write_text("not a timestamp\n")
    assert health_check.read_health_check() is None
