"""Centralized file path configuration.

All file paths used by the bot are defined here for easy maintenance
and testing.
"""

from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Configuration
ENV_FILE = PROJECT_ROOT / ".env"

# Monitoring files (stored in project root)
LOG_FILE = PROJECT_ROOT / "bot.log"
HEALTH_CHECK_FILE = PROJECT_ROOT / "bot_health.txt"
