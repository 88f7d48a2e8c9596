"""
Logging setup for the calculator.

Plain console lines for local runs, one JSON object per line when
FUNDCALC_LOG_JSON is set. Call setup_logging() once from an entry point and
use get_logger(__name__) everywhere else.
"""

import json
import logging
import sys
from typing import Optional

from .config import FUNDCALC_LOG_JSON, FUNDCALC_LOG_LEVEL

ROOT_LOGGER_NAME = "fundcalc"


class PlainFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, "%H:%M:%S")
        module = record.name.split(".")[-1][:15]
        line = f"{timestamp} {record.levelname:8} {module:15} {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


_configured = False


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolve_level(level or FUNDCALC_LOG_LEVEL))
    if _configured:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if FUNDCALC_LOG_JSON else PlainFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    # Everything hangs under the "fundcalc" logger so one handler covers the app.
    short = name.split(".", 1)[-1] if name.startswith("fundapp.") else name
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{short}")
