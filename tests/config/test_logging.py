# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the logging setup."""

import logging
from collections.abc import Iterator

import pytest

from yangkit.config import PrinterSettings
from yangkit.config.logging import (
    LOG_LEVEL_ENV,
    ChalkFormatter,
    apply_settings,
    get_logger,
    resolve_log_level,
    setup_logging,
)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger's level and handlers after the test."""
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" warning ", logging.WARNING),
        ("15", 15),
        ("", None),
        (None, None),
        ("LOUD", None),
    ],
)
def test_resolve_log_level(value: str | None, expected: int | None) -> None:
    assert resolve_log_level(value) == expected


def test_setup_logging_with_level_name(restore_root_logger: logging.Logger) -> None:
    setup_logging("INFO")
    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, ChalkFormatter)


def test_setup_logging_replaces_handlers(restore_root_logger: logging.Logger) -> None:
    """Repeated setup leaves exactly one handler installed."""
    setup_logging(logging.DEBUG)
    setup_logging(logging.ERROR)
    assert restore_root_logger.level == logging.ERROR
    assert len(restore_root_logger.handlers) == 1


def test_setup_logging_reads_environment(
    restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    setup_logging()
    assert restore_root_logger.level == logging.DEBUG


def test_setup_logging_defaults_to_warning(
    restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    setup_logging()
    assert restore_root_logger.level == logging.WARNING


def test_setup_logging_keeps_notset_from_environment(
    restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A NOTSET level from the environment is applied rather than replaced by the default."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "0")
    restore_root_logger.setLevel(logging.ERROR)
    setup_logging()
    assert restore_root_logger.level == logging.NOTSET


def test_apply_settings_uses_configured_level(
    restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    apply_settings(PrinterSettings(log_level="debug"))
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1


def test_apply_settings_without_level_falls_back_to_environment(
    restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    apply_settings(PrinterSettings())
    assert restore_root_logger.level == logging.INFO


def test_formatter_keeps_message_text() -> None:
    """Colouring wraps the formatted message without altering its text."""
    formatter = ChalkFormatter("[%(levelname)s] %(message)s")
    record = logging.LogRecord("yangkit", logging.ERROR, __file__, 1, "sink failed", None, None)
    assert "[ERROR] sink failed" in formatter.format(record)


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("yangkit.printer").name == "yangkit.printer"
