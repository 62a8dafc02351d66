# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Printer settings and logging configuration for yangkit."""

from yangkit.config.logging import ChalkFormatter, apply_settings, get_logger, resolve_log_level, setup_logging
from yangkit.config.settings import (
    INCLUDE_REVISION_SOURCES,
    PrinterConfigError,
    PrinterSettings,
    load_printer_settings,
)

__all__ = [
    "ChalkFormatter",
    "INCLUDE_REVISION_SOURCES",
    "PrinterConfigError",
    "PrinterSettings",
    "apply_settings",
    "get_logger",
    "load_printer_settings",
    "resolve_log_level",
    "setup_logging",
]
