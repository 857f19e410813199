"""Logging configuration driven by application settings."""

import json
import logging
from datetime import UTC, datetime

_HANDLER_NAME = "app"
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the application log handler on the root logger.

    Calling it again replaces the handler it installed before, leaving
    handlers added by others (e.g. pytest's capture) untouched.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: "json" or "text"

    Returns:
        The installed handler

    Raises:
        ValueError: If the level or format is not recognised.

    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    if fmt not in {"json", "text"}:
        raise ValueError(f"Invalid log format: {fmt}")

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)
    return handler
