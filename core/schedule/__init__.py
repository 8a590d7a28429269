"""Schedule module - fetching, slicing and formatting a week of matches.

- Fetching one week from football-data.org (single request)
- Building the day tabs
- Selecting live matches and grouping a day by competition
- Formatting messages for Discord
"""

from core.schedule.formatter import (
    format_day_message,
    format_live_message,
    format_match_line,
    format_score_or_time,
)
from core.schedule.models import DateTab, Match
from core.schedule.sources import FetchError, fetch_week_matches
from core.schedule.tabs import generate_date_tabs
from core.schedule.views import filter_by_day, group_by_day, select_live
from core.utils.dates import format_local_time

__all__ = [
    "DateTab",
    "Match",
    "FetchError",
    "fetch_week_matches",
    "generate_date_tabs",
    "select_live",
    "filter_by_day",
    "group_by_day",
    "format_local_time",
    "format_score_or_time",
    "format_match_line",
    "format_live_message",
    "format_day_message",
]
