"""Decorators for Discord command handlers."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

import discord

from config.constants import ERROR_FETCH
from core.schedule import FetchError

logger = logging.getLogger(__name__)


def async_command(*, error_message: str):
    """Decorator for async Discord command handlers.

    Handles:
    - Reporting provider failures (FetchError) to the user
    - Logging and a generic reply for anything else

    Args:
        error_message: Message sent when the command fails unexpectedly.

    Example:
        @async_command(error_message="Failed to load matches")
        async def my_command(interaction: discord.Interaction) -> None:
            matches = await fetch_week_matches(token)
            await interaction.followup.send(...)
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(
            interaction: discord.Interaction, *args: Any, **kwargs: Any
        ) -> None:
            try:
                await func(interaction, *args, **kwargs)
            except FetchError as e:
                logger.error(
                    f"Fetch failed in {func.__name__}: {e}",
                    extra={"command": func.__name__},
                )
                await interaction.followup.send(
                    ERROR_FETCH.format(message=e.message)
                )
            except Exception as e:
                logger.error(
                    f"Error in {func.__name__}: {e}",
                    exc_info=True,
                    extra={"command": func.__name__},
                )
                await interaction.followup.send(error_message)

        return wrapper

    return decorator
