# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the printer settings file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from yangkit.config.logging import resolve_log_level

# ###############
# Public Interface
# ###############

INCLUDE_REVISION_SOURCES = ("include", "import")


class PrinterConfigError(Exception):
    """Raised when a printer settings file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class PrinterSettings:
    """Options controlling how a module is printed.

    Attributes:
        include_revision_source: Where the block form of an ``include``
            statement takes its revision date from. ``"include"`` uses the
            include's own date; ``"import"`` reproduces the legacy output that
            used the date of the import at the same position.
        log_level: Optional logging level name or number applied by
            ``yangkit.config.logging.apply_settings``.
    """

    include_revision_source: str = "include"
    log_level: str | None = None


def load_printer_settings(path: Path) -> PrinterSettings:
    """Load and parse a printer settings file.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A PrinterSettings instance populated from the file.

    Raises:
        PrinterConfigError: If the file cannot be read or the settings are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise PrinterConfigError(f"Printer settings file not found: {path}") from None
    except OSError as exc:
        raise PrinterConfigError(f"Cannot read printer settings file: {exc}") from exc

    return _parse_printer_settings(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = {"include-revision-source", "log-level"}


def _parse_printer_settings(text: str, source_label: str = "<string>") -> PrinterSettings:
    """Parse printer settings YAML text into a PrinterSettings.

    An empty document yields the default settings.

    Raises:
        PrinterConfigError: If the YAML is invalid or a field is malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PrinterConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return PrinterSettings()
    if not isinstance(data, dict):
        raise PrinterConfigError(f"{source_label}: printer settings must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise PrinterConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    include_revision_source = _optional_string(data, "include-revision-source", source_label) or "include"
    if include_revision_source not in INCLUDE_REVISION_SOURCES:
        raise PrinterConfigError(
            f"{source_label}: 'include-revision-source' must be one of "
            f"{', '.join(INCLUDE_REVISION_SOURCES)}, got '{include_revision_source}'"
        )

    log_level = _optional_string(data, "log-level", source_label)
    if log_level is not None and resolve_log_level(log_level) is None:
        raise PrinterConfigError(f"{source_label}: 'log-level' is not a logging level: '{log_level}'")

    return PrinterSettings(include_revision_source=include_revision_source, log_level=log_level)


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field from a mapping, raising PrinterConfigError on a wrong type."""
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, str):
        raise PrinterConfigError(f"{source_label}: '{key}' must be a string")
    return value
