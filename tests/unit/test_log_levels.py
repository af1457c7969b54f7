# topmark:header:start
#
#   project      : MvnCheck
#   file         : test_log_levels.py
#   file_relpath : tests/unit/test_log_levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for log level parsing (`mvncheck.config.logging`)."""

from __future__ import annotations

import logging

import pytest

from mvncheck.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)

from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("20", logging.INFO),
        ("", None),
        (None, None),
        ("chatty", None),
    ],
)
def test_parse_log_level(value: str | None, expected: int | None) -> None:
    """Names are case-insensitive; numbers pass through; unknown values are None."""
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The level comes from the environment variable."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert resolve_env_log_level() == logging.INFO


def test_trace_method(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers expose a ``trace`` method below DEBUG."""
    logger = get_logger("mvncheck.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="mvncheck.tests.trace"):
        logger.trace("tick %d", 1)

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(TRACE_LEVEL, "tick 1")]
