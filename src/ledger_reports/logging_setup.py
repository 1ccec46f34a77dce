# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Logging helpers for Ledger Reports.

Library modules call ``get_logger(__name__)`` and never add handlers. The
package logger (``"ledger_reports"``) carries a ``NullHandler`` so nothing is
printed until an application opts in. The CLI opts in through
``configure_logging()``, which installs one stream handler on the package
logger. Calling it again only updates the level.

The level can be given as an int, a level name (``"DEBUG"``) or a numeric
string. When it is omitted, ``LEDGER_REPORTS_LOG_LEVEL`` is read, then
``INFO`` applies.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER = "ledger_reports"
LEVEL_ENV_VAR = "LEDGER_REPORTS_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class _ReportsHandler(logging.StreamHandler):
    """Stream handler installed by ``configure_logging`` (one per process)."""


def parse_level(level: Union[int, str, None]) -> int:
    """
    Resolve a logging level.

    Raises
    ------
    ValueError
        If ``level`` is a string that names no logging level.
    """
    if level is None or (isinstance(level, str) and not level.strip()):
        level = os.getenv(LEVEL_ENV_VAR) or logging.INFO
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: Union[int, str, None] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Send package log records to ``stream`` (``sys.stderr`` by default).

    Returns the package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    numeric = parse_level(level)

    handler = next(
        (h for h in logger.handlers if isinstance(h, _ReportsHandler)), None
    )
    if handler is None:
        handler = _ReportsHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        # Records stop here; the root logger is left to the host application.
        logger.propagate = False

    logger.setLevel(numeric)
    handler.setLevel(numeric)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
