"""Discord slash command listing a day's matches with date tab buttons."""

import logging

import discord

from commands.decorators import async_command
from config import settings
from config.constants import DEFAULT_TAB_INDEX, ERROR_GENERIC, TABS_VIEW_TIMEOUT
from core.rate_limit import rate_limit
from core.schedule import (
    DateTab,
    Match,
    fetch_week_matches,
    format_day_message,
    generate_date_tabs,
    group_by_day,
)
from core.utils.dates import local_now

logger = logging.getLogger(__name__)

TABS_PER_ROW = 3


class DateTabsView(discord.ui.View):
    """Row of day buttons over one fetched snapshot of matches.

    Switching tabs re-renders from the snapshot; it never refetches.
    """

    def __init__(
        self,
        matches: list[Match],
        tabs: list[DateTab],
        timezone: str,
        selected: int = DEFAULT_TAB_INDEX,
        timeout: float = TABS_VIEW_TIMEOUT,
    ):
        super().__init__(timeout=timeout)
        self.matches = tuple(matches)
        self.tabs = tabs
        self.timezone = timezone
        self.selected = selected
        self.message: discord.Message | None = None

        for index, tab in enumerate(tabs):
            button = discord.ui.Button(label=tab.label, row=index // TABS_PER_ROW)
            button.callback = self._tab_callback(index)
            self.add_item(button)
        self._style_buttons()

    def _tab_callback(self, index: int):
        async def callback(interaction: discord.Interaction) -> None:
            self.select(index)
            await interaction.response.edit_message(
                content=self.render(), view=self
            )

        return callback

    def _style_buttons(self) -> None:
        for index, button in enumerate(self.children):
            is_selected = index == self.selected
            button.style = (
                discord.ButtonStyle.primary
                if is_selected
                else discord.ButtonStyle.secondary
            )
            button.disabled = is_selected

    @property
    def current_tab(self) -> DateTab:
        return self.tabs[self.selected]

    def select(self, index: int) -> None:
        """Switch to the tab at index."""
        self.selected = index
        self._style_buttons()

    def render(self) -> str:
        """Message content for the selected tab."""
        tab = self.current_tab
        grouped = group_by_day(self.matches, tab.date_string)
        return format_day_message(grouped, tab, self.timezone)

    async def on_timeout(self) -> None:
        for button in self.children:
            button.disabled = True
        if self.message is not None:
            try:
                await self.message.edit(view=self)
            except discord.HTTPException as e:
                logger.warning(f"Could not disable expired tab buttons: {e}")


@async_command(error_message=ERROR_GENERIC)
@rate_limit()
async def games_command(interaction: discord.Interaction) -> None:
    """Handle /games slash command.

    Args:
        interaction: Discord interaction from slash command.
    """
    token = settings.get_required("FOOTBALL_DATA_TOKEN")
    timezone = settings.get_timezone()
    now = local_now(timezone)

    matches = await fetch_week_matches(token, now=now)
    view = DateTabsView(matches, generate_date_tabs(now), timezone)
    logger.info(
        f"Showing {len(matches)} matches, starting on {view.current_tab.label}",
        extra={"user_id": interaction.user.id, "command": "games"},
    )

    view.message = await interaction.followup.send(
        view.render(), view=view, wait=True
    )
