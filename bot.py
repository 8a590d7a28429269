"""Matchday Discord Bot - Main entry point.

A Discord bot that shows live soccer scores and the week's fixtures from
football-data.org.
"""

import asyncio
import logging
import signal

import discord
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from discord.ext import commands

from commands.games import games_command
from commands.help import help_command
from commands.live import live_command
from config import settings
from config.constants import DEFAULT_COOLDOWN_SECONDS
from config.paths import LOG_FILE
from config.validation import validate_config
from core.health_check import update_health_check
from core.logging_config import configure_logging

configure_logging(LOG_FILE)
logger = logging.getLogger(__name__)

# Configure bot with minimal required intents
intents = discord.Intents.default()
description = "Live soccer scores and this week's fixtures."
bot = commands.Bot(
    command_prefix="!", description=description, intents=intents
)

scheduler = AsyncIOScheduler()


def load_configuration() -> str:
    """Load configuration from .env file or run setup wizard.

    Returns:
        The Discord bot token.

    Raises:
        ValueError: If configuration is missing or invalid.
    """
    if not settings.exists():
        logger.info("No configuration found, running setup wizard")
        settings.setup_interactive()

    try:
        token = settings.get_required("DISCORD_TOKEN")
        config = {
            "DISCORD_TOKEN": token,
            "FOOTBALL_DATA_TOKEN": settings.get_required(
                "FOOTBALL_DATA_TOKEN"
            ),
            "DISPLAY_TIMEZONE": settings.get_timezone(),
            "COMMAND_COOLDOWN_SECONDS": settings.get(
                "COMMAND_COOLDOWN_SECONDS", DEFAULT_COOLDOWN_SECONDS
            ),
        }
        validation_errors = validate_config(config)

        if validation_errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {err}" for err in validation_errors
            )
            logger.error(error_msg)
            raise ValueError(error_msg)

        logger.info(
            "Configuration loaded and validated successfully "
            f"(timezone {config['DISPLAY_TIMEZONE']})"
        )
        return token

    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise


async def safe_defer(interaction: discord.Interaction) -> bool:
    """Defer an interaction so slow provider calls don't expire it.

    Args:
        interaction: Discord interaction to defer.

    Returns:
        True if defer succeeded, False if it failed.
    """
    try:
        await interaction.response.defer()
        return True
    except discord.NotFound:
        logger.warning(
            f"Interaction {interaction.id} expired before it was deferred"
        )
        return False
    except discord.HTTPException as e:
        logger.error(f"HTTP error deferring interaction {interaction.id}: {e}")
        return False


# Command registration
@bot.tree.command(name="live", description="Show the match being played now")
async def live(interaction: discord.Interaction) -> None:
    """Show the first live match."""
    if not await safe_defer(interaction):
        return
    await live_command(interaction)


@bot.tree.command(name="games", description="This week's matches by day")
async def games(interaction: discord.Interaction) -> None:
    """Show matches for a day, with tabs for the rest of the week."""
    if not await safe_defer(interaction):
        return
    await games_command(interaction)


@bot.tree.command(name="help", description="List the bot's commands")
async def help_(interaction: discord.Interaction) -> None:
    """Show the help message."""
    if not await safe_defer(interaction):
        return
    await help_command(interaction)


@bot.event
async def on_ready() -> None:
    """Event handler for bot ready state."""
    logger.info(f"Logged in as {bot.user} (ID: {bot.user.id})")

    try:
        synced = await bot.tree.sync()
        logger.info(f"Synced {len(synced)} slash command(s)")
    except discord.HTTPException as e:
        logger.error(f"Failed to sync commands: {e}")

    # on_ready fires again after reconnects
    if not scheduler.running:
        scheduler.add_job(update_health_check, CronTrigger(minute="*"))
        scheduler.start()
        logger.info("Health check updates every minute")


@bot.tree.error
async def on_app_command_error(
    interaction: discord.Interaction,
    error: discord.app_commands.AppCommandError,
) -> None:
    """Global error handler for slash commands."""
    if isinstance(error, discord.app_commands.CommandNotFound):
        return

    logger.error(f"App command error: {error}", exc_info=True)

    try:
        error_msg = "Something went wrong running that command."
        if not interaction.response.is_done():
            await interaction.response.send_message(error_msg, ephemeral=True)
        else:
            await interaction.followup.send(error_msg, ephemeral=True)
    except discord.HTTPException as e:
        logger.error(f"Failed to send error message: {e}")


async def shutdown(sig):
    """Cleanup tasks on shutdown.

    Args:
        sig: Signal received (SIGTERM or SIGINT).
    """
    logger.info(f"Received exit signal {sig.name}...")

    if scheduler.running:
        scheduler.shutdown(wait=False)

    tasks = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
    logger.info(f"Cancelling {len(tasks)} outstanding tasks")
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)

    await bot.close()
    logger.info("Bot shutdown complete")


async def main(token: str) -> None:
    """Run the bot until a shutdown signal arrives."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(
            sig, lambda s=sig: asyncio.create_task(shutdown(s))
        )
    async with bot:
        await bot.start(token)


if __name__ == "__main__":
    discord_token = load_configuration()
    try:
        asyncio.run(main(discord_token))
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    finally:
        logger.info("Bot stopped")
