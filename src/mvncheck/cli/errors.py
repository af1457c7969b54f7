# topmark:header:start
#
#   project      : MvnCheck
#   file         : errors.py
#   file_relpath : src/mvncheck/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the MvnCheck CLI.

Raise these in commands to exit with a standardized message and exit code.
Library errors (`mvncheck.core.errors`) are translated at the command
boundary.
"""

from __future__ import annotations

from typing import IO, Any

import click

from mvncheck.core.exit_codes import ExitCode


class MvnCheckCliError(click.ClickException):
    """Base class for all MvnCheck CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console: Any = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class MvnCheckUsageError(MvnCheckCliError):
    """Invalid combination of flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class MvnCheckEventError(MvnCheckCliError):
    """Malformed or incomplete event payload."""

    exit_code = ExitCode.DATA_ERROR


class MvnCheckFileNotFoundError(MvnCheckCliError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MvnCheckIOError(MvnCheckCliError):
    """Error reading or writing files."""

    exit_code = ExitCode.IO_ERROR


class MvnCheckConfigError(MvnCheckCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR
