"""Logging helpers shared by the core and storage modules."""

from __future__ import annotations

import logging

from ... import config

logger = logging.getLogger(config.APP_NAME)


def log(message: str, level: int = logging.INFO, force_console: bool = False) -> None:
    """Write a message to the package logger.

    Args:
        message: Text to log
        level: Standard logging level (logging.DEBUG, logging.WARNING, ...)
        force_console: Echo to the console even when DEBUG is off
    """
    logger.log(level, message)

    # Debug mode echoes everything so messages show up without a handler
    if config.DEBUG or force_console:
        print(message)


def log_enabled(level: int) -> bool:
    """Check whether a message at this level would be written anywhere."""
    return config.DEBUG or logger.isEnabledFor(level)
