"""
Logging Configuration
=====================

Centralized logging for the filecorr package.

Usage:
    from filecorr.core.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Listing started")
"""

import logging
import sys
from typing import Union

PACKAGE_NAME = "filecorr"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured Logger instance
    """
    _ensure_configured()
    return logging.getLogger(name)


def _ensure_configured() -> None:
    """Configure the package logger if not already done."""
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    _configured = True


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level}")
    return value


def set_level(level: Union[int, str]) -> None:
    """
    Set the logging level for the filecorr package.

    Args:
        level: Logging level (e.g., logging.DEBUG, "WARNING")
    """
    _ensure_configured()
    logging.getLogger(PACKAGE_NAME).setLevel(resolve_level(level))
