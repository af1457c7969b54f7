# topmark:header:start
#
#   project      : MvnCheck
#   file         : main.py
#   file_relpath : src/mvncheck/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` for the subcommands. Internal logging is configured from the
``MVNCHECK_LOG_LEVEL`` environment variable, independently of ``-v``/``-q``.
"""

from __future__ import annotations

import click

from mvncheck.cli.commands.config import config_command
from mvncheck.cli.commands.extract import extract_command
from mvncheck.cli.commands.run import run_command
from mvncheck.cli.commands.version import version_command
from mvncheck.cli.console import ClickConsole
from mvncheck.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from mvncheck.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="MvnCheck: run Maven builds and report them as check runs.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the MvnCheck CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'mvncheck run [PROJECT_DIR]' to build a project.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(run_command)

cli.add_command(extract_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
