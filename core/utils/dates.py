"""Date and time helpers for the schedule pipeline.

Kickoff times travel through the bot as naive UTC strings in the form
``YYYY-MM-DD HH:MM:SS``. Calendar days (fetch window, date tabs) are
computed in the display timezone, which defaults to the host's zone.
"""

import logging

import pendulum
from pendulum.tz.exceptions import InvalidTimezone

from config import settings
from config.constants import (
    KICKOFF_FORMAT,
    LOCALE,
    UTC_TIMESTAMP_FORMAT,
    WINDOW_LENGTH_DAYS,
    WINDOW_START_OFFSET,
)

logger = logging.getLogger(__name__)


def resolve_timezone(timezone: str | None = None) -> str:
    """Return the given timezone name, or the configured display zone."""
    return timezone or settings.get_timezone()


def local_now(timezone: str | None = None) -> pendulum.DateTime:
    """Current time in the display timezone.

    Args:
        timezone: Timezone name (default: configured display timezone)

    Returns:
        Timezone-aware pendulum datetime
    """
    return pendulum.now(resolve_timezone(timezone))


def date_key(day: pendulum.Date) -> str:
    """Format a calendar day as the YYYY-MM-DD bucket key."""
    return day.to_date_string()


def week_window(now: pendulum.DateTime) -> tuple[str, str]:
    """Compute the provider query window for a given moment.

    The window starts yesterday and spans seven days, both ends taken
    from the calendar day of ``now`` in its own timezone.

    Args:
        now: Reference moment (timezone-aware)

    Returns:
        Tuple of (date_from, date_to) as YYYY-MM-DD strings
    """
    date_from = now.date().add(days=WINDOW_START_OFFSET)
    date_to = date_from.add(days=WINDOW_LENGTH_DAYS)
    return date_key(date_from), date_key(date_to)


def normalize_utc_date(raw: str) -> str:
    """Turn a provider ISO timestamp into the stored kickoff form.

    "2024-06-05T14:00:00Z" becomes "2024-06-05 14:00:00". The value is
    kept in UTC; no conversion happens here.

    Args:
        raw: Provider timestamp with literal T separator and Z suffix

    Returns:
        Timestamp in YYYY-MM-DD HH:MM:SS form
    """
    return raw.replace("T", " ").replace("Z", "")


def parse_utc_timestamp(value: str) -> pendulum.DateTime:
    """Parse a stored kickoff timestamp as a UTC datetime.

    Args:
        value: Timestamp in YYYY-MM-DD HH:MM:SS form

    Returns:
        Pendulum datetime in UTC

    Raises:
        ValueError: If value does not match the stored form
    """
    try:
        return pendulum.from_format(value, UTC_TIMESTAMP_FORMAT, tz="UTC")
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid UTC timestamp: {value!r}") from e


def format_local_time(utc_timestamp: str, timezone: str | None = None) -> str:
    """Format a UTC kickoff timestamp as local "hh:mm AM/PM".

    Never raises: a malformed timestamp or an unknown timezone yields an
    empty string so the rest of a match can still be shown.

    Args:
        utc_timestamp: Timestamp in YYYY-MM-DD HH:MM:SS form (UTC)
        timezone: Target timezone (default: configured display timezone)

    Returns:
        Time string such as "02:00 PM", or "" if parsing fails
    """
    try:
        kickoff = parse_utc_timestamp(utc_timestamp)
        local = kickoff.in_timezone(resolve_timezone(timezone))
    except (ValueError, InvalidTimezone) as e:
        logger.debug(f"Cannot format kickoff time: {e}")
        return ""
    return local.format(KICKOFF_FORMAT, locale=LOCALE)
