# topmark:header:start
#
#   project      : MvnCheck
#   file         : __init__.py
#   file_relpath : src/mvncheck/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by the pipeline, config and CLI layers.

This package holds small, dependency-free building blocks: the library error
hierarchy and the process exit codes.
"""

from __future__ import annotations

from mvncheck.core.errors import ConfigError, EventError, MvnCheckError
from mvncheck.core.exit_codes import ExitCode

__all__ = [
    "ConfigError",
    "EventError",
    "ExitCode",
    "MvnCheckError",
]
