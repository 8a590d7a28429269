"""Tests for command cooldowns."""

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import pendulum
import pytest

from core.rate_limit import CooldownTracker, _format_wait, rate_limit


class TestFormatWait:
    """Tests for the _format_wait helper."""

    def test_seconds(self):
        assert _format_wait(1) == "1s"
        assert _format_wait(59) == "59s"

    def test_minutes(self):
        assert _format_wait(60) == "1m"
        assert _format_wait(150) == "2m"


class TestCooldownTracker:
    """Tests for CooldownTracker."""

    def test_first_call_allowed(self):
        tracker = CooldownTracker()
        assert tracker.try_acquire("k", timedelta(seconds=30)) == 0

    def test_second_call_blocked(self):
        """Test a repeat inside the interval reports the wait."""
        tracker = CooldownTracker()
        tracker.try_acquire("k", timedelta(seconds=30))

        wait = tracker.try_acquire("k", timedelta(seconds=30))

        assert 0 < wait <= 30

    def test_allowed_after_interval(self):
        """Test the key frees up once the interval has passed."""
        tracker = CooldownTracker()
        start = pendulum.datetime(2024, 6, 5, 12, 0, 0, tz="UTC")

        with patch("core.rate_limit.pendulum.now", return_value=start):
            tracker.try_acquire("k", timedelta(seconds=30))
        with patch(
            "core.rate_limit.pendulum.now",
            return_value=start.add(seconds=31),
        ):
            assert tracker.try_acquire("k", timedelta(seconds=30)) == 0

    def test_keys_are_independent(self):
        tracker = CooldownTracker()
        tracker.try_acquire("a", timedelta(seconds=30))
        assert tracker.try_acquire("b", timedelta(seconds=30)) == 0


class TestRateLimitDecorator:
    """Tests for the rate_limit decorator."""

    @pytest.mark.asyncio
    async def test_second_call_gets_cooldown_reply(self, mock_interaction):
        """Test the handler runs once and the repeat is refused."""
        handler = AsyncMock()

        @rate_limit(interval=timedelta(seconds=30))
        async def cmd(interaction):
            await handler(interaction)

        await cmd(mock_interaction)
        await cmd(mock_interaction)

        handler.assert_awaited_once()
        message = mock_interaction.followup.send.call_args[0][0]
        assert "Slow down" in message
        assert mock_interaction.followup.send.call_args[1]["ephemeral"] is True

    @pytest.mark.asyncio
    async def test_per_user(self, mock_interaction):
        """Test different users do not share a cooldown."""
        handler = AsyncMock()

        @rate_limit(interval=timedelta(seconds=30))
        async def cmd(interaction):
            await handler(interaction)

        await cmd(mock_interaction)
        mock_interaction.user.id = 99999
        await cmd(mock_interaction)

        assert handler.await_count == 2

    @pytest.mark.asyncio
    async def test_bypass_users(self, mock_interaction):
        """Test users in BYPASS_USER_IDS skip the cooldown."""
        handler = AsyncMock()

        @rate_limit(interval=timedelta(seconds=30))
        async def cmd(interaction):
            await handler(interaction)

        with patch.dict("os.environ", {"BYPASS_USER_IDS": "12345"}):
            await cmd(mock_interaction)
            await cmd(mock_interaction)

        assert handler.await_count == 2
        mock_interaction.followup.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_interval_from_settings(self, mock_interaction):
        """Test the default interval comes from COMMAND_COOLDOWN_SECONDS."""
        handler = AsyncMock()

        @rate_limit()
        async def cmd(interaction):
            await handler(interaction)

        with patch.dict(
            "os.environ",
            {"COMMAND_COOLDOWN_SECONDS": "120", "BYPASS_USER_IDS": ""},
        ):
            await cmd(mock_interaction)
            await cmd(mock_interaction)

        handler.assert_awaited_once()
        # 119 whole seconds remain right after the first call
        assert "(1m)" in mock_interaction.followup.send.call_args[0][0]
