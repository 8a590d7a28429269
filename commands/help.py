"""Help command implementation."""

import discord

HELP_MESSAGE = (
    "📋 **Available Commands**\n\n"
    "**Matches:**\n"
    "`/live` - Show the match being played right now\n"
    "`/games` - Matches from yesterday to four days ahead, "
    "grouped by competition\n\n"
    "**Other:**\n"
    "`/help` - Show this help message"
)


async def help_command(interaction: discord.Interaction) -> None:
    """Show all available bot commands.

    Args:
        interaction: Discord interaction object.
    """
    await interaction.followup.send(HELP_MESSAGE, ephemeral=True)
