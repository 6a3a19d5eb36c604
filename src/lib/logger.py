"""Logging utilities for the strip-comments plugin.

TIER 1: May import from core only.

Provides consistent logging across plugin modules using Python's
standard logging module (terminal strategy). Logs go to stderr so the
JSON written to stdout by the event entry points stays clean.
"""

import logging
import os
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOGGER_PREFIX = "stripcomments"
LOG_LEVEL_ENV = "STRIP_COMMENTS_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"

# Cache for loggers
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Get a configured logger for the plugin.

    Args:
        name: Logger name (will be prefixed with 'stripcomments.')
        level: Log level override (default: from STRIP_COMMENTS_LOG_LEVEL env or WARNING)

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger("action")
        >>> logger.warning("Send failed")
        20:55:39 | WARNING  | stripcomments.action | Send failed
    """
    full_name = f"{LOGGER_PREFIX}.{name}"

    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)

    # Only configure if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

        if level:
            logger.setLevel(getattr(logging, level))
        else:
            env_level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
            logger.setLevel(getattr(logging, env_level, logging.WARNING))

        logger.propagate = False

    _loggers[full_name] = logger
    return logger


def set_log_level(level: LogLevel) -> None:
    """Set log level for all plugin loggers.

    Args:
        level: New log level (DEBUG, INFO, WARNING, ERROR)
    """
    log_level = getattr(logging, level, logging.WARNING)
    for logger in _loggers.values():
        logger.setLevel(log_level)
