# topmark:header:start
#
#   project      : MvnCheck
#   file         : options.py
#   file_relpath : src/mvncheck/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options (verbosity, color, configuration) and their resolution logic."""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from mvncheck.cli.errors import MvnCheckUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return the program-output verbosity.

    ``-v`` and ``-q`` are mutually exclusive. Positive values add detail,
    negative values suppress non-essential output, 0 is the default.

    Raises:
        MvnCheckUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MvnCheckUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return min(verbose_count, 2)
    if quiet_count:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    JSON output is never colored. ``--color`` wins over ``FORCE_COLOR`` and
    ``NO_COLOR``; otherwise color follows whether stdout is a TTY.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the configuration file option and the per-key override options."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (default: mvncheck.toml in PROJECT_DIR, if present).",
    )(f)
    f = click.option("--name", "config_name", default=None, help="Configuration name.")(f)
    f = click.option(
        "--mvn", "mvn_args", default=None, help="Maven arguments, e.g. 'clean verify'."
    )(f)
    f = click.option("--java-version", default=None, help="JDK version installed with SDKMAN.")(f)
    f = click.option(
        "--settings-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Maven settings.xml copied into the project before the build.",
    )(f)
    f = click.option(
        "--command", "setup_command", default=None, help="Shell command run before setup."
    )(f)
    f = click.option("--sdkman-dir", default=None, help="SDKMAN installation root.")(f)
    return f
