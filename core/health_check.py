"""Heartbeat file for external monitoring (cron, systemd, uptime checks)."""

import logging

import pendulum

from config.paths import HEALTH_CHECK_FILE

logger = logging.getLogger(__name__)


def update_health_check() -> None:
    """Write the current UTC time to the heartbeat file."""
    try:
        stamp = pendulum.now("UTC").to_iso8601_string()
        HEALTH_CHECK_FILE.write_text(f"{stamp}\n")
        logger.debug(f"Health check updated: {stamp}")
    except OSError as e:
        logger.error(f"Failed to update health check file: {e}")


def read_health_check() -> pendulum.DateTime | None:
    """Read the last heartbeat.

    Returns:
        Last heartbeat time, or None if missing or unreadable.
    """
    try:
        if not HEALTH_CHECK_FILE.exists():
            return None
        return pendulum.parse(HEALTH_CHECK_FILE.read_text().strip())
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read health check file: {e}")
        return None
