# topmark:header:start
#
#   project      : MvnCheck
#   file         : version.py
#   file_relpath : src/mvncheck/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from mvncheck.cli.cli_types import EnumChoiceParam
from mvncheck.cli.emitters import VersionFormat
from mvncheck.constants import MVNCHECK_VERSION

if TYPE_CHECKING:
    from mvncheck.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of MvnCheck.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(VersionFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in VersionFormat)}).",
)
def version_command(*, output_format: VersionFormat | None = None) -> None:
    """Print the installed MvnCheck version."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: VersionFormat = output_format or VersionFormat.DEFAULT
    if fmt == VersionFormat.JSON:
        console.print(json.dumps({"version": MVNCHECK_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("MvnCheck version:", bold=True, underline=True))
        console.print(f"    {console.styled(MVNCHECK_VERSION, bold=True)}")
    else:
        console.print(console.styled(MVNCHECK_VERSION, bold=True))
