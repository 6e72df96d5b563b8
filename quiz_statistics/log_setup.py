"""Logging configuration for quiz_statistics.

The library only creates module loggers under the ``quiz_statistics``
hierarchy and never installs handlers on import. Applications that want
console output call `setup_logging` once.

Usage:
    from quiz_statistics.log_setup import setup_logging

    logger = setup_logging("DEBUG")
    logger.info("Computing statistics...")
"""
from __future__ import annotations

import logging
import sys
from typing import Union

from .constants import LOGGER_NAME


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """Attach a single console handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level, as int or name (e.g. "DEBUG")
        name: Logger name (default: "quiz_statistics")

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(getattr(h, "_quiz_statistics_console", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        handler._quiz_statistics_console = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
