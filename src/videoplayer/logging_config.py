"""Logging configuration for the videoplayer package."""

import logging
import sys
from typing import Optional

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Package logger. Writes to stderr so it never interleaves with player output.
logger: logging.Logger = logging.getLogger("videoplayer")

console_handler = logging.StreamHandler(sys.stderr)
console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))


def _level_from_name(name: str) -> int:
    """Translate a level name such as ``"info"`` into a logging level."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging for the package.

    Safe to call more than once; the console handler is only attached once.

    Args:
        level: Level name to use. Defaults to the LOG_LEVEL setting.
    """
    numeric = _level_from_name(level or LOG_LEVEL)
    logger.setLevel(numeric)
    console_handler.setLevel(numeric)
    if console_handler not in logger.handlers:
        logger.addHandler(console_handler)
    logger.propagate = False


def enable_debug() -> None:
    """Enable debug logging.

    Sets both the logger and console handler to DEBUG level.
    """
    logger.setLevel(logging.DEBUG)
    console_handler.setLevel(logging.DEBUG)


def disable_debug() -> None:
    """Disable debug logging.

    Restores the logger and console handler to the configured level.
    """
    numeric = _level_from_name(LOG_LEVEL)
    logger.setLevel(numeric)
    console_handler.setLevel(numeric)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger, typically __name__. If None, returns the
            package logger.

    Returns:
        The package logger or one of its children for package modules,
        otherwise the plain logger of that name.
    """
    if not name or name in ("videoplayer", "src.videoplayer"):
        return logger
    if name.startswith("videoplayer."):
        return logging.getLogger(name)
    # Modules imported as src.videoplayer.* still log under the package logger
    if name.startswith("src.videoplayer."):
        return logging.getLogger(name[len("src."):])
    return logging.getLogger(name)
