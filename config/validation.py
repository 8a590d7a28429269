"""Configuration validation utilities."""

import logging
import re
from typing import Any

import pendulum

logger = logging.getLogger(__name__)

# football-data.org issues 32-character hexadecimal tokens
_API_TOKEN_PATTERN = re.compile(r"^[0-9a-fA-F]{32}$")


def validate_discord_token(token: str) -> bool:
    """Validate Discord bot token format.

    Args:
        token: Discord bot token to validate.

    Returns:
        True if token format is valid, False otherwise.
    """
    # Discord tokens are base64 encoded, typically 59+ chars
    return (
        len(token) > 50
        and not token.startswith("your_")
        and not token.startswith("YOUR_")
    )


def validate_api_token(token: str) -> bool:
    """Validate football-data.org API token format.

    Args:
        token: API token to validate.

    Returns:
        True if the token is 32 hexadecimal characters.
    """
    return bool(_API_TOKEN_PATTERN.match(token))


def validate_timezone(name: str) -> bool:
    """Check that a timezone name is known to pendulum.

    Args:
        name: IANA timezone name (e.g. "Europe/Lisbon").

    Returns:
        True if the timezone can be loaded.
    """
    if not name:
        return False
    try:
        pendulum.timezone(name)
    except Exception:
        return False
    return True


def validate_cooldown_seconds(seconds: str) -> bool:
    """Validate the command cooldown is a positive integer.

    Args:
        seconds: Cooldown value to validate.

    Returns:
        True if the value is a positive integer, False otherwise.
    """
    if not seconds.isdigit():
        return False
    return int(seconds) > 0


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate all configuration values.

    Args:
        config: Dictionary of configuration key-value pairs.

    Returns:
        List of validation error messages (empty if all valid).
    """
    errors = []

    if not validate_discord_token(config.get("DISCORD_TOKEN", "")):
        errors.append(
            "Invalid DISCORD_TOKEN format (must be >50 chars "
            "and not be a placeholder)"
        )

    if not validate_api_token(config.get("FOOTBALL_DATA_TOKEN", "")):
        errors.append(
            "Invalid FOOTBALL_DATA_TOKEN format "
            "(must be 32 hexadecimal characters)"
        )

    timezone = config.get("DISPLAY_TIMEZONE", "UTC")
    if not validate_timezone(timezone):
        errors.append(f"Unknown DISPLAY_TIMEZONE: {timezone!r}")

    cooldown = config.get("COMMAND_COOLDOWN_SECONDS", "30")
    if not validate_cooldown_seconds(cooldown):
        errors.append("COMMAND_COOLDOWN_SECONDS must be a positive integer")

    if errors:
        logger.error(f"Configuration validation failed: {errors}")
    else:
        logger.info("Configuration validation passed")

    return errors
