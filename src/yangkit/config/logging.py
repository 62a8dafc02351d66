# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging setup for yangkit with colored, level-aware output.

Library modules obtain loggers through :func:`get_logger` and never install
handlers; applications call :func:`setup_logging` once.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from yangkit.config.settings import PrinterSettings

# ###############
# Public Interface
# ###############

LOG_LEVEL_ENV = "YANGKIT_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        level = record.levelno
        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        return chalk.gray(message)


def resolve_log_level(value: str | None) -> int | None:
    """Translate a level name (``"DEBUG"``) or number (``"10"``) into a logging level.

    Returns None for an empty or unrecognised value.
    """
    if not value:
        return None
    name = value.strip().upper()
    if name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name)


def setup_logging(level: int | str | None = None) -> None:
    """Configure the root logger with colored output on stderr.

    Args:
        level: Logging level or level name. When None, the
            ``YANGKIT_LOG_LEVEL`` environment variable is consulted and
            WARNING is used if it is unset or invalid.
    """
    if isinstance(level, str):
        level = resolve_log_level(level)
    if level is None:
        level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV))
    if level is None:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def apply_settings(settings: PrinterSettings) -> None:
    """Configure logging from the ``log-level`` entry of the printer settings.

    Without a configured level the environment and WARNING default apply, as
    for :func:`setup_logging`.
    """
    setup_logging(settings.log_level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for *name*."""
    return logging.getLogger(name)
