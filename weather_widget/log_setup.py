"""Logging setup for the widget service."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict


class JsonConsoleFormatter(logging.Formatter):
    """Simple JSON formatter for structured console logs."""

    def format(self, record: logging.LogRecord) -> str:
        event: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, default=str)


def setup_logger(name: str = "weather_widget", level: str = "INFO") -> logging.Logger:
    """Configure the package logger once; module loggers propagate up to it."""
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
