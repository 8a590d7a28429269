"""Environment-based settings loaded from the project's .env file."""

import logging
import os

import pendulum
from dotenv import load_dotenv, set_key

from config.constants import DEFAULT_COOLDOWN_SECONDS
from config.paths import ENV_FILE

logger = logging.getLogger(__name__)

env_path = ENV_FILE

load_dotenv(env_path)

# Keys asked for by the setup wizard, with their prompts and defaults
_SETUP_PROMPTS = (
    ("DISCORD_TOKEN", "Discord bot token", None),
    ("FOOTBALL_DATA_TOKEN", "football-data.org API token", None),
    ("DISPLAY_TIMEZONE", "Display timezone (blank for host zone)", ""),
    (
        "COMMAND_COOLDOWN_SECONDS",
        "Seconds between /live or /games per user",
        DEFAULT_COOLDOWN_SECONDS,
    ),
)


def exists() -> bool:
    """Check whether the .env configuration file exists.

    Returns:
        True if the file exists, False otherwise.
    """
    return env_path.exists()


def get(key: str, default: str | None = None) -> str | None:
    """Read a configuration value from the environment.

    Args:
        key: Environment variable name.
        default: Value returned when the variable is not set.

    Returns:
        The configured value or the default.
    """
    return os.environ.get(key, default)


def get_required(key: str) -> str:
    """Read a configuration value that must be present.

    Args:
        key: Environment variable name.

    Returns:
        The configured value.

    Raises:
        ValueError: If the variable is missing or empty.
    """
    value = os.environ.get(key)
    if not value:
        raise ValueError(f"Required environment variable {key} is not set")
    return value


def get_timezone() -> str:
    """Timezone used for date tabs, fetch windows and kickoff times.

    Returns:
        DISPLAY_TIMEZONE if set, otherwise the host's local timezone name.
    """
    configured = get("DISPLAY_TIMEZONE", "")
    if configured and configured.strip():
        return configured.strip()
    return pendulum.local_timezone().name


def get_cooldown_seconds() -> int:
    """Per-user cooldown between match commands, in seconds."""
    return int(get("COMMAND_COOLDOWN_SECONDS", DEFAULT_COOLDOWN_SECONDS))


def get_bypass_user_ids() -> set[int]:
    """Parse BYPASS_USER_IDS into a set of Discord user IDs.

    Returns:
        Set of user IDs, empty when unset or malformed.
    """
    raw = get("BYPASS_USER_IDS", "")
    if not raw or not raw.strip():
        return set()
    try:
        return {int(part.strip()) for part in raw.split(",") if part.strip()}
    except ValueError:
        logger.warning(f"Ignoring malformed BYPASS_USER_IDS: {raw!r}")
        return set()


def setup_interactive() -> None:
    """Prompt for the bot's settings and write them to .env."""
    print("Matchday bot setup\n")
    env_path.touch(exist_ok=True)
    for key, prompt, default in _SETUP_PROMPTS:
        suffix = f" [{default}]" if default else ""
        value = input(f"{prompt}{suffix}: ").strip()
        if not value and default is not None:
            value = default
        set_key(str(env_path), key, value)
        os.environ[key] = value
    logger.info(f"Configuration written to {env_path}")
