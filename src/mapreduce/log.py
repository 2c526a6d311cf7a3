"""Logger configuration for mapreduce."""

import logging
import os
import sys

from mapreduce.errors import ConfigError

__all__ = ["setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "mapreduce",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            falls back to MAPREDUCE_LOG_LEVEL, then WARNING; empty values count as unset
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ConfigError: If the level is not a known logging level name
    """
    level = level or os.getenv("MAPREDUCE_LOG_LEVEL") or "WARNING"
    levels = logging.getLevelNamesMapping()
    if level.upper() not in levels:
        raise ConfigError(f"Invalid log level: {level!r}", level)
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(levels[level.upper()])
        logger.propagate = False

    return logger
