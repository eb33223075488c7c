"""Logging setup for meshview."""

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(level: Union[int, str, None] = None) -> int:
    """
    Resolve a logging level from an argument or MESHVIEW_LOG_LEVEL.

    Names ("debug", "INFO") and numbers are accepted; anything unrecognized
    falls back to WARNING so formatting code stays quiet by default.
    """
    if level is None:
        level = os.environ.get("MESHVIEW_LOG_LEVEL", "WARNING")
    if isinstance(level, int):
        return level

    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: Union[int, str, None] = None, format_string: Optional[str] = None) -> logging.Logger:
    """
    Configure the "meshview" logger hierarchy.

    Args:
        level: Logging level or level name (default: MESHVIEW_LOG_LEVEL, else WARNING)
        format_string: Custom format string (optional)

    Returns:
        The package logger
    """
    logger = logging.getLogger("meshview")
    logger.setLevel(resolve_log_level(level))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the meshview hierarchy, e.g. "config" -> meshview.config."""
    return logging.getLogger(f"meshview.{name}")
