"""Per-user cooldowns for commands that call the match provider.

football-data.org's free tier allows a handful of requests per minute, and
every /live or /games call costs one.
"""

import logging
from collections.abc import Callable
from datetime import timedelta
from functools import wraps
from typing import Any

import discord
import pendulum

from config import settings
from config.constants import ERROR_RATE_LIMITED

logger = logging.getLogger(__name__)


class CooldownTracker:
    """In-memory record of when each key last ran."""

    def __init__(self):
        self._last_calls: dict[str, pendulum.DateTime] = {}

    def try_acquire(self, key: str, interval: timedelta) -> int:
        """Claim the key if its cooldown has elapsed.

        Args:
            key: Cooldown key (e.g. "live_command:1234").
            interval: Minimum time between runs.

        Returns:
            0 if the key was claimed, otherwise seconds left to wait.
        """
        now = pendulum.now("UTC")
        last_call = self._last_calls.get(key)
        if last_call is not None:
            elapsed = (now - last_call).total_seconds()
            remaining = interval.total_seconds() - elapsed
            if remaining > 0:
                return max(1, int(remaining))
        self._last_calls[key] = now
        return 0

    def clear(self) -> None:
        self._last_calls.clear()


_cooldowns = CooldownTracker()


def _format_wait(seconds: int) -> str:
    """Format a wait as "45s" or "2m"."""
    if seconds >= 60:
        return f"{seconds // 60}m"
    return f"{seconds}s"


def _cooldown_key(
    func_name: str,
    interaction: discord.Interaction,
    per_user: bool,
    per_guild: bool,
) -> str:
    parts = [func_name]
    if per_guild and interaction.guild_id:
        parts.append(str(interaction.guild_id))
    if per_user:
        parts.append(str(interaction.user.id))
    return ":".join(parts)


def rate_limit(
    *,
    per_user: bool = True,
    per_guild: bool = False,
    interval: timedelta | None = None,
    message: str = ERROR_RATE_LIMITED,
):
    """Decorator enforcing a cooldown on a Discord command handler.

    Args:
        per_user: Key the cooldown on the calling user.
        per_guild: Key the cooldown on the guild (server).
        interval: Cooldown length (default: COMMAND_COOLDOWN_SECONDS).
        message: Reply sent when the cooldown is active.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(
            interaction: discord.Interaction, *args: Any, **kwargs: Any
        ) -> Any:
            if interaction.user.id in settings.get_bypass_user_ids():
                return await func(interaction, *args, **kwargs)

            cooldown = interval or timedelta(
                seconds=settings.get_cooldown_seconds()
            )
            key = _cooldown_key(func.__name__, interaction, per_user, per_guild)
            wait = _cooldowns.try_acquire(key, cooldown)
            if wait:
                logger.info(
                    f"Cooldown hit for {func.__name__} by {interaction.user} "
                    f"(key={key}, {wait}s left)",
                    extra={"user_id": interaction.user.id},
                )
                await interaction.followup.send(
                    f"{message} ({_format_wait(wait)})", ephemeral=True
                )
                return None

            return await func(interaction, *args, **kwargs)

        return wrapper

    return decorator
