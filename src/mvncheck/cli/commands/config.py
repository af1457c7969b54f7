# topmark:header:start
#
#   project      : MvnCheck
#   file         : config.py
#   file_relpath : src/mvncheck/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck `config` command.

Prints the effective configuration for PROJECT_DIR after applying the
defaults, the configuration file and any CLI overrides. The TOML output is a
valid ``mvncheck.toml`` and can be saved as a starting point.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from mvncheck.cli.cli_types import EnumChoiceParam
from mvncheck.cli.config_resolver import resolve_config
from mvncheck.cli.emitters import ConfigFormat
from mvncheck.cli.errors import MvnCheckFileNotFoundError
from mvncheck.cli.options import common_config_options
from mvncheck.config.loaders import to_toml

if TYPE_CHECKING:
    from mvncheck.cli.console import ConsoleLike
    from mvncheck.config.model import Config


@click.command(
    name="config",
    help="Show the effective configuration for PROJECT_DIR (default: current directory).",
)
@click.argument(
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    required=False,
)
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(ConfigFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in ConfigFormat)}).",
)
def config_command(
    *,
    project_dir: Path,
    config_path: Path | None,
    config_name: str | None,
    mvn_args: str | None,
    java_version: str | None,
    settings_file: Path | None,
    setup_command: str | None,
    sdkman_dir: str | None,
    output_format: ConfigFormat | None,
) -> None:
    """Print the resolved configuration."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if not project_dir.is_dir():
        raise MvnCheckFileNotFoundError(f"Project directory not found: {project_dir}")

    config: Config = resolve_config(
        console,
        project_dir=project_dir,
        config_path=config_path,
        config_name=config_name,
        mvn_args=mvn_args,
        java_version=java_version,
        settings_file=settings_file,
        setup_command=setup_command,
        sdkman_dir=sdkman_dir,
    )

    if (output_format or ConfigFormat.TOML) == ConfigFormat.JSON:
        console.print(json.dumps(config.to_dict(), indent=2))
    else:
        console.print(to_toml(config), nl=False)
