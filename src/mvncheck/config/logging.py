# topmark:header:start
#
#   project      : MvnCheck
#   file         : logging.py
#   file_relpath : src/mvncheck/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck logging with an extra TRACE level.

Internal logging only: user-facing output goes through the CLI console. The
module registers a ``TRACE`` level below ``DEBUG``, installs `MvnCheckLogger`
as the logger class and formats records with `yachalk` colors.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "MVNCHECK_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class MvnCheckLogger(logging.Logger):
    """Logger with a `trace()` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(MvnCheckLogger)


def _colorizer_for(level: int) -> Callable[[str], str]:
    if level >= logging.CRITICAL:
        return chalk.red_bright
    if level >= logging.ERROR:
        return chalk.red
    if level >= logging.WARNING:
        return chalk.yellow
    if level >= logging.INFO:
        return chalk.green
    if level >= logging.DEBUG:
        return chalk.gray
    if level >= TRACE_LEVEL:
        return chalk.blue
    return chalk.dim.red


class ChalkFormatter(logging.Formatter):
    """Formatter that colors the whole record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colorize it by severity.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized log line.
        """
        return _colorizer_for(record.levelno)(super().format(record))


def parse_log_level(value: str | None) -> int | None:
    """Translate a level name (``"TRACE"``, ``"warn"``) or number (``"10"``) into an int.

    Returns ``None`` for empty or unknown values.
    """
    if not value:
        return None
    token: str = value.strip().upper()
    if token.isdigit():
        return int(token)
    return _LEVEL_NAMES.get(token)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``MVNCHECK_LOG_LEVEL``, or None if unset."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a colored stdout handler.

    Args:
        level (int | None): Log level; when None the environment is consulted and
            the default is CRITICAL (effectively silent).
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> MvnCheckLogger:
    """Return the `MvnCheckLogger` registered under ``name``."""
    return cast("MvnCheckLogger", logging.getLogger(name))
