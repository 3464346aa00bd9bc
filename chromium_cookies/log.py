"""Logging setup for chromium_cookies."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from logging import Logger
from typing import Optional, Union

LOGGER_NAME = "chromium_cookies"


class UtcFormatter(logging.Formatter):
    """Formatter that renders timestamps in UTC using ISO-8601."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.isoformat(timespec="seconds")


def configure_logging(level: Union[int, str] = logging.WARNING) -> Logger:
    """
    Send the package's log records to stderr.

    Args:
        level: Logging level name or number

    Returns:
        The package root logger
    """
    formatter = UtcFormatter(
        fmt="%(asctime)sZ %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # stdout carries the JSON output, so logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: Optional[str] = None) -> Logger:
    """Return a child logger under the package namespace."""
    base = logging.getLogger(LOGGER_NAME)
    if name:
        return base.getChild(name)
    return base
