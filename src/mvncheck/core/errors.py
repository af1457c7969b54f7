# topmark:header:start
#
#   project      : MvnCheck
#   file         : errors.py
#   file_relpath : src/mvncheck/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for MvnCheck.

These are raised by the config and event layers. They carry no presentation
logic; the CLI maps them onto `mvncheck.cli.errors` exceptions and exit codes.
Build failures are never raised: pipeline steps report them as outcomes.
"""

from __future__ import annotations


class MvnCheckError(Exception):
    """Base error for MvnCheck."""


class ConfigError(MvnCheckError):
    """Raised when a configuration source is missing, unreadable or malformed."""


class EventError(MvnCheckError):
    """Raised when a push/tag event payload lacks repository or commit data."""
