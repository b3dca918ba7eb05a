"""Logging configuration for rent-game.

Game modules attach context to their records through the standard
``extra`` argument, using the keys in ``GAME_FIELDS``::

    logger.info("Bought house %s", house_id, extra={"house_id": house_id, "money": money})

Both formatters pick those fields up: the JSON formatter as top-level keys,
the standard formatter as trailing ``key=value`` pairs.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

GAME_FIELDS = ("house_id", "action", "task", "at_ms", "money", "rating")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for rent-game.

    Logs go to stderr so that stdout stays free for the console sink.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter: logging.Formatter = JsonFormatter() if format_type == "json" else GameFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("rent_game").setLevel(log_level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def game_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Game context attached to ``record``, in ``GAME_FIELDS`` order."""
    return {key: getattr(record, key) for key in GAME_FIELDS if hasattr(record, key)}


class GameFormatter(logging.Formatter):
    """Line formatter that appends game context as ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = game_fields(record)
        if not fields:
            return line

        context = " ".join(f"{key}={value}" for key, value in fields.items())
        head, sep, tail = line.partition("\n")
        return f"{head} | {context}{sep}{tail}"


class JsonFormatter(logging.Formatter):
    """JSON log formatter; game context becomes top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(game_fields(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Money is a Decimal
        return json.dumps(log_data, default=str)
