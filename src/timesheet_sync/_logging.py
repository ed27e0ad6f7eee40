"""Provide the package logger.

Console output is the operator's only signal during a run: row warnings,
API responses and the closing summary all go through this logger.
"""
from __future__ import annotations

import logging
from typing import Final

from ._models import LogLevel


_LOGGER_NAME: Final[str] = "timesheet_sync"
_FORMAT: Final[str] = "%(asctime)s %(levelname)s timesheet_sync: %(message)s"


def get_logger() -> logging.Logger:
    """Return the package logger, attaching its console handler on first use."""

    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def set_log_level(level: LogLevel) -> None:
    """Apply a validated log level to the package logger."""

    get_logger().setLevel(getattr(logging, level.value))
