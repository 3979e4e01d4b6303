"""Logging configuration.

Standard output carries the plugin response, so every log record goes to
standard error through a rich handler.
"""

import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "sqlc_gen_typescript"
LOG_LEVEL_ENV = "SQLC_GEN_TYPESCRIPT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger below the package logger."""
    return logging.getLogger(name)


def resolve_log_level(level: Union[str, int, None] = None) -> int:
    """Resolve a level name, falling back to the environment and the default.

    Args:
        level: Level name or number; None reads the environment variable.

    Returns:
        Numeric logging level.

    Raises:
        ValueError: If the level name is not a known logging level.
    """
    value = level if level is not None else os.environ.get(LOG_LEVEL_ENV, "")
    if isinstance(value, int):
        return value

    value = value.strip() or DEFAULT_LOG_LEVEL
    numeric = logging.getLevelName(value.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid log level: {value}")
    return numeric


def setup_logging(
    level: Union[str, int, None] = None, console: Optional[Console] = None
) -> logging.Logger:
    """Configure the package logger. Safe to call more than once.

    Args:
        level: Level name or number (default: environment, then WARNING).
        console: Rich console to log to (default: a stderr console).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    logger.debug("Logging configured at %s", logging.getLevelName(logger.level))
    return logger
