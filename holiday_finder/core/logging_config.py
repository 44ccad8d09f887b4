"""
Logging configuration for holiday-finder.

Provides consistent logging setup for both the web service (JSON format for
log aggregation) and the CLI (human-readable format).

Usage:
    from holiday_finder.core.logging_config import setup_logging, get_logger

    setup_logging()  # Auto-detects from LOG_JSON
    logger = get_logger(__name__)

    logger.info("Loaded countries", extra={'count': 120})
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

TRUTHY = {'1', 'true', 'yes', 'on'}

# LogRecord attributes that are not caller-supplied `extra` data
RECORD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields passed through `extra=` on the logging call."""
    return {k: v for k, v in vars(record).items() if k not in RECORD_ATTRS}


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line, for log aggregation in the web service.

        {"timestamp": "2025-01-15T10:30:00.000+00:00", "level": "INFO",
         "logger": "holiday_finder.services.holiday_search",
         "message": "Rendered 12 holidays", "country_code": "US"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(timespec='milliseconds'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        for key, value in extra_fields(record).items():
            log_obj.setdefault(key, value)

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        # Unserializable extras fall back to str()
        return json.dumps(log_obj, default=str)


class HumanFormatter(logging.Formatter):
    """
    Terminal output for the CLI:

        2025-01-15 10:30:00 INFO  [services.holiday_search] Rendered 12 holidays (country_code=US)
    """

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'
    PACKAGE_PREFIX = 'holiday_finder.'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def _level(self, levelname: str) -> str:
        padded = levelname.ljust(5)
        if not self.use_colors:
            return padded
        return f"{self.LEVEL_COLORS.get(levelname, '')}{padded}{self.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        name = record.name
        if name.startswith(self.PACKAGE_PREFIX):
            name = name[len(self.PACKAGE_PREFIX):]

        extras = ', '.join(f"{k}={v}" for k, v in extra_fields(record).items())
        output = f"{timestamp} {self._level(record.levelname)} [{name}] {record.getMessage()}"
        if extras:
            output += f" ({extras})"

        if record.exc_info:
            output += f"\n{self.formatException(record.exc_info)}"

        return output


def setup_logging(
    json_format: Optional[bool] = None,
    level: Optional[str] = None
) -> None:
    """
    Configure logging for the application.

    Args:
        json_format: Use JSON format (True) or human-readable (False).
                    If None, reads the LOG_JSON env var (default: human-readable).
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to LOG_LEVEL env var or INFO.
    """
    if json_format is None:
        json_format = os.getenv('LOG_JSON', '').lower() in TRUTHY

    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')
    level = level.upper()

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(getattr(logging, level, logging.INFO))

    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter())

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
