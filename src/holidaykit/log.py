"""
holidaykit Logging

Module loggers live under the "holidaykit" namespace. The CLI and the API
call configure_logging() once from settings; library code never adds
handlers itself.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "holidaykit"

# Extra attributes copied into JSON log lines when present
EXTRA_FIELDS = (
    "country_code",
    "year",
    "holiday_count",
    "entry_id",
    "path",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", fmt: str = "text") -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler.

    Args:
        level: Level name (DEBUG, INFO, ...)
        fmt: "json" for structured lines, "text" for plain ones

    Returns:
        The configured "holidaykit" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for existing in list(logger.handlers):
        if getattr(existing, "_holidaykit_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    handler._holidaykit_handler = True
    logger.addHandler(handler)
    return logger
