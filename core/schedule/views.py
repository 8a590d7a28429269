"""Derived views over a fetched match snapshot.

Pure functions: they never mutate their input and hold no state, so the
same snapshot can be re-sliced as often as the user switches tabs.
"""

from collections.abc import Iterable

from config.constants import NOT_LIVE_STATUSES
from core.schedule.models import Match


def is_live(match: Match) -> bool:
    """Anything neither scheduled nor finished counts as live."""
    return match.status not in NOT_LIVE_STATUSES


def select_live(matches: Iterable[Match]) -> list[Match]:
    """Keep matches currently in progress, in input order.

    Unknown provider statuses are treated as live.
    """
    return [match for match in matches if is_live(match)]


def filter_by_day(matches: Iterable[Match], date_string: str) -> list[Match]:
    """Keep matches whose kickoff timestamp starts with date_string."""
    return [match for match in matches if match.day == date_string]


def group_by_day(
    matches: Iterable[Match], date_string: str
) -> dict[str, list[Match]]:
    """Group one day's matches by competition.

    Competitions appear in first-seen order and matches keep their input
    order within each competition.

    Args:
        matches: Fetched matches.
        date_string: Day key in YYYY-MM-DD form.

    Returns:
        Mapping of competition name to that day's matches.
    """
    grouped: dict[str, list[Match]] = {}
    for match in filter_by_day(matches, date_string):
        grouped.setdefault(match.competition, []).append(match)
    return grouped
