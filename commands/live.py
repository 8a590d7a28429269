"""Discord slash command showing the current live match."""

import logging

import discord

from commands.decorators import async_command
from config import settings
from config.constants import ERROR_GENERIC
from core.rate_limit import rate_limit
from core.schedule import fetch_week_matches, format_live_message, select_live

logger = logging.getLogger(__name__)


@async_command(error_message=ERROR_GENERIC)
@rate_limit()
async def live_command(interaction: discord.Interaction) -> None:
    """Handle /live slash command.

    Args:
        interaction: Discord interaction from slash command.
    """
    token = settings.get_required("FOOTBALL_DATA_TOKEN")
    timezone = settings.get_timezone()

    matches = await fetch_week_matches(token)
    live_matches = select_live(matches)
    logger.info(
        f"{len(live_matches)} live matches out of {len(matches)}",
        extra={"user_id": interaction.user.id, "command": "live"},
    )

    await interaction.followup.send(format_live_message(live_matches, timezone))
