# topmark:header:start
#
#   project      : MvnCheck
#   file         : extract.py
#   file_relpath : src/mvncheck/cli/commands/extract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck `extract` command.

Runs the annotation extractor over a saved build log. Useful to check what a
build would report without running Maven, or to publish annotations from a
log produced elsewhere (``--format github``).

Exit status is 1 when at least one annotation was found, mirroring the build
step where any annotation fails the build.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from mvncheck.cli.cli_types import EnumChoiceParam
from mvncheck.cli.emitters import (
    AnnotationFormat,
    emit_annotations_default,
    emit_annotations_github,
    emit_annotations_json,
)
from mvncheck.config.logging import get_logger
from mvncheck.core.exit_codes import ExitCode
from mvncheck.diagnostic.extractor import extract_annotations

if TYPE_CHECKING:
    from mvncheck.cli.console import ConsoleLike
    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.diagnostic.model import Annotation

logger: MvnCheckLogger = get_logger(__name__)


@click.command(
    name="extract",
    help="Extract file/line annotations from a Maven build log ('-' reads STDIN).",
)
@click.argument(
    "logfile",
    type=click.File("r", encoding="utf-8", errors="replace"),
    default="-",
    required=False,
)
@click.option(
    "--prefix",
    default="",
    help="Workspace root stripped from reported paths.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(AnnotationFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in AnnotationFormat)}).",
)
def extract_command(
    *,
    logfile: IO[str],
    prefix: str,
    output_format: AnnotationFormat | None,
) -> None:
    """Print the annotations found in LOGFILE."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    log: str = logfile.read()
    annotations: list[Annotation] = extract_annotations(log)
    logger.info("Extracted %d annotation(s) from %s", len(annotations), logfile.name)

    fmt: AnnotationFormat = output_format or AnnotationFormat.DEFAULT
    if fmt == AnnotationFormat.JSON:
        emit_annotations_json(console, annotations, prefix=prefix)
    elif fmt == AnnotationFormat.GITHUB:
        emit_annotations_github(console, annotations, prefix=prefix)
    else:
        emit_annotations_default(console, annotations, prefix=prefix, verbosity=verbosity)

    ctx.exit(ExitCode.FAILURE if annotations else ExitCode.SUCCESS)
