"""Logging setup: readable console output plus JSON lines on disk."""

import json
import logging
import logging.handlers
from pathlib import Path

import pendulum

# Extra attributes callers may attach via logger.info(..., extra={...})
EXTRA_FIELDS = ("user_id", "channel_id", "command")


class StructuredFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Meant for the rotating log file, where lines are read back with jq or
    shipped to a log aggregator.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": pendulum.now("UTC").to_iso8601_string(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data)


def configure_logging(log_file: Path, level: int = logging.INFO) -> None:
    """Attach console and rotating JSON file handlers to the root logger.

    Args:
        log_file: Path of the JSON log file.
        level: Minimum level for both handlers.
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    file_handler = logging.handlers.RotatingFileHandler(
        str(log_file),
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(StructuredFormatter())

    logging.basicConfig(level=level, handlers=[console_handler, file_handler])
