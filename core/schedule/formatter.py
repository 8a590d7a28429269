"""Match message formatters for Discord."""

import logging

from config.constants import (
    LIVE_BADGE,
    LIVE_HEADER,
    MESSAGE_LIMIT,
    NO_LIVE_MATCHES,
    NO_MATCHES_ON_DAY,
    SCORE_STATUSES,
    STATUS_IN_PLAY,
)
from core.schedule.models import DateTab, Match
from core.utils.dates import format_local_time

logger = logging.getLogger(__name__)


def format_score_or_time(match: Match, timezone: str | None = None) -> str:
    """Score for started or finished matches, local kickoff time otherwise.

    Args:
        match: Match to describe.
        timezone: Display timezone for the kickoff time.

    Returns:
        "2 - 1" style score, or "08:00 PM" style time ("" if the kickoff
        timestamp is unreadable).
    """
    if match.status in SCORE_STATUSES:
        return f"{match.home_score} - {match.away_score}"
    return format_local_time(match.date, timezone)


def format_match_line(match: Match, timezone: str | None = None) -> str:
    """One-line match card: teams, score or time, and a LIVE marker."""
    line = f"⚽ {match.home_team} vs {match.away_team}"
    detail = format_score_or_time(match, timezone)
    if detail:
        line += f" **{detail}**"
    if match.status == STATUS_IN_PLAY:
        line += f" {LIVE_BADGE}"
    return line


def format_live_message(
    live_matches: list[Match], timezone: str | None = None
) -> str:
    """Message for the live screen: the first live match only.

    Args:
        live_matches: Output of select_live().
        timezone: Display timezone.

    Returns:
        Formatted message.
    """
    if not live_matches:
        return NO_LIVE_MATCHES

    match = live_matches[0]
    return "\n".join(
        [
            LIVE_HEADER,
            f"🏆 {match.competition}",
            format_match_line(match, timezone),
        ]
    )


def format_day_message(
    grouped: dict[str, list[Match]],
    tab: DateTab,
    timezone: str | None = None,
) -> str:
    """Message for one day tab, matches listed under their competition.

    Output is cut to Discord's message limit; dropped matches are counted
    in a trailing line.

    Args:
        grouped: Output of group_by_day() for the tab's day.
        tab: Selected tab.
        timezone: Display timezone.

    Returns:
        Formatted message.
    """
    if not grouped:
        return NO_MATCHES_ON_DAY.format(label=tab.label)

    lines = [f"📅 **{tab.label}**"]
    for competition, matches in grouped.items():
        lines.append("")
        lines.append(f"🏆 **{competition}**")
        for match in matches:
            lines.append(format_match_line(match, timezone))

    return _fit_to_limit(lines)


def _fit_to_limit(lines: list[str], limit: int = MESSAGE_LIMIT) -> str:
    message = "\n".join(lines)
    if len(message) <= limit:
        return message

    kept: list[str] = []
    size = 0
    # Leave room for the trailer line
    budget = limit - 40
    for line in lines:
        if size + len(line) + 1 > budget:
            break
        kept.append(line)
        size += len(line) + 1

    # A competition header must keep at least one match under it
    while len(kept) > 1 and not kept[-1].startswith("⚽"):
        kept.pop()

    dropped = sum(1 for line in lines[len(kept):] if line.startswith("⚽"))
    logger.info(f"Day message truncated, {dropped} matches dropped")
    if dropped:
        kept.append(f"... and {dropped} more")
    return "\n".join(kept)
