"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pendulum
import pytest

from core.rate_limit import _cooldowns
from factories import API_TOKEN


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    monkeypatch.setenv("DISCORD_TOKEN", "x" * 60)
    monkeypatch.setenv("FOOTBALL_DATA_TOKEN", API_TOKEN)
    monkeypatch.setenv("DISPLAY_TIMEZONE", "UTC")
    monkeypatch.setenv("COMMAND_COOLDOWN_SECONDS", "30")
    monkeypatch.delenv("BYPASS_USER_IDS", raising=False)


@pytest.fixture(autouse=True)
def reset_cooldowns():
    """Reset command cooldowns between tests."""
    _cooldowns.clear()
    yield
    _cooldowns.clear()


@pytest.fixture
def fixed_now():
    """Tuesday 4 June 2024, midday UTC."""
    return pendulum.datetime(2024, 6, 4, 12, 0, tz="UTC")


@pytest.fixture
def mock_interaction():
    """Create a mock Discord interaction."""
    interaction = MagicMock()
    interaction.user.id = 12345
    interaction.guild_id = 67890
    interaction.followup = AsyncMock()
    interaction.response = AsyncMock()
    return interaction
