"""Match data source - football-data.org v4 matches endpoint."""

import asyncio
import json
import logging
from typing import Any

import aiohttp
import pendulum

from config.constants import (
    AUTH_HEADER,
    MATCHES_API_URL,
    UNKNOWN_TEAM,
)
from core.schedule.models import Match
from core.utils.dates import local_now, normalize_utc_date, week_window

logger = logging.getLogger(__name__)

MALFORMED_BODY = "empty or malformed body"


class FetchError(Exception):
    """Raised when the week's matches cannot be fetched or parsed.

    Attributes:
        status: HTTP status code, or None for transport/parse failures.
        message: Human-readable reason, suitable for showing to users.
    """

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        self.message = message
        if status is not None:
            super().__init__(f"HTTP {status}: {message}")
        else:
            super().__init__(message)


def build_request_params(date_from: str, date_to: str) -> dict[str, str]:
    """Query string for the matches endpoint."""
    return {"dateFrom": date_from, "dateTo": date_to}


def build_headers(token: str) -> dict[str, str]:
    """Request headers carrying the API credential."""
    return {AUTH_HEADER: token}


def _score(value: Any) -> int:
    # Unplayed matches report null scores; unreadable values count as 0
    if value is None or isinstance(value, bool):
        return 0
    try:
        score = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(score, 0)


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"'{field}' is not a string")
    return value


def normalize_match(raw: dict) -> Match:
    """Convert one provider match element into a Match.

    Missing, null or unreadable scores become 0 and missing crests
    become "". Any other missing field, or a status or competition name
    that is not a string, is treated as a malformed element.

    Args:
        raw: Element of the provider's "matches" array.

    Returns:
        Normalized Match.

    Raises:
        AttributeError, KeyError, TypeError, ValueError: If a required
            field is missing or has the wrong type.
    """
    home = raw["homeTeam"]
    away = raw["awayTeam"]
    full_time = raw["score"]["fullTime"]
    competition = raw["competition"]

    return Match(
        home_team=home["name"] or UNKNOWN_TEAM,
        away_team=away["name"] or UNKNOWN_TEAM,
        date=normalize_utc_date(raw["utcDate"]),
        status=_text(raw["status"], "status"),
        home_score=_score(full_time.get("home")),
        away_score=_score(full_time.get("away")),
        home_badge=home.get("crest") or "",
        away_badge=away.get("crest") or "",
        competition=_text(competition["name"], "competition.name"),
    )


def parse_matches_payload(body: str) -> list[Match]:
    """Parse a provider response body into matches, in provider order.

    Args:
        body: Raw response text.

    Returns:
        List of normalized matches (possibly empty).

    Raises:
        FetchError: If the body is empty, not JSON, or not shaped as
            expected.
    """
    if not body or not body.strip():
        raise FetchError(MALFORMED_BODY)

    try:
        data = json.loads(body)
        elements = data["matches"]
        if not isinstance(elements, list):
            raise TypeError("'matches' is not an array")
        return [normalize_match(element) for element in elements]
    except (
        json.JSONDecodeError,
        AttributeError,
        KeyError,
        TypeError,
        ValueError,
    ) as e:
        logger.error(f"Failed to parse matches payload: {e}", exc_info=True)
        raise FetchError(MALFORMED_BODY) from e


def _provider_message(body: str, fallback: str) -> str:
    """Pull the provider's error message out of an error response."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return fallback
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return fallback


async def _request(
    session: aiohttp.ClientSession,
    params: dict[str, str],
    headers: dict[str, str],
) -> str:
    async with session.get(
        MATCHES_API_URL, params=params, headers=headers
    ) as response:
        body = await response.text()
        if not 200 <= response.status < 300:
            message = _provider_message(body, response.reason or "")
            logger.error(
                f"Matches request failed: HTTP {response.status} {message}"
            )
            raise FetchError(message, status=response.status)
        logger.info(f"Matches fetched successfully ({len(body)} bytes)")
        return body


async def fetch_week_matches(
    token: str,
    *,
    session: aiohttp.ClientSession | None = None,
    now: pendulum.DateTime | None = None,
) -> list[Match]:
    """Fetch every match from yesterday through the next six days.

    Issues exactly one request; no retries and no caching.

    Args:
        token: football-data.org API token.
        session: Optional aiohttp session to reuse. A short-lived one is
            opened when omitted.
        now: Reference moment for the date window (default: now in the
            display timezone).

    Returns:
        Matches in provider order.

    Raises:
        FetchError: On transport failure, non-2xx status, or malformed body.
    """
    date_from, date_to = week_window(now or local_now())
    params = build_request_params(date_from, date_to)
    headers = build_headers(token)
    logger.info(f"Fetching matches from {date_from} to {date_to}")

    try:
        if session is not None:
            body = await _request(session, params, headers)
        else:
            async with aiohttp.ClientSession() as own_session:
                body = await _request(own_session, params, headers)
    except aiohttp.ClientError as e:
        logger.error(f"HTTP request failed: {e}", exc_info=True)
        raise FetchError(f"network error: {e}") from e
    except asyncio.TimeoutError as e:
        logger.error("HTTP request timed out")
        raise FetchError("request timed out") from e

    matches = parse_matches_payload(body)
    logger.info(f"Found {len(matches)} matches")
    return matches
