# topmark:header:start
#
#   project      : MvnCheck
#   file         : run.py
#   file_relpath : src/mvncheck/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck `run` command.

Runs the Maven build pipeline against a local checkout. The event is read
from ``--event`` or synthesized from ``--owner``/``--repo``/``--sha``; check
runs are recorded in memory and printed at the end instead of being sent to a
hosting platform.

Exit status: 0 when the build succeeded or there was nothing to build
(no ``pom.xml``), 1 when the build failed.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from mvncheck.checks import RecordingCheckFactory
from mvncheck.cli.cli_types import EnumChoiceParam
from mvncheck.cli.config_resolver import resolve_config
from mvncheck.cli.emitters import RunOutputFormat, emit_run_default, emit_run_json, emit_run_markdown
from mvncheck.cli.errors import MvnCheckEventError, MvnCheckFileNotFoundError
from mvncheck.cli.options import common_config_options
from mvncheck.config.logging import get_logger
from mvncheck.core.errors import EventError
from mvncheck.events import event_commit, event_repo, load_event, make_push_event
from mvncheck.pipeline.context import EventContext, MvnParameters
from mvncheck.pipeline.pipelines import handle
from mvncheck.project import LocalProjectLoader

if TYPE_CHECKING:
    from mvncheck.cli.console import ConsoleLike
    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.config.model import Config
    from mvncheck.pipeline.outcomes import Outcome

logger: MvnCheckLogger = get_logger(__name__)

# Commit id used when neither --event nor --sha is given
LOCAL_SHA: str = "HEAD"
LOCAL_OWNER: str = "local"


def _resolve_event(
    event_path: Path | None,
    *,
    project_dir: Path,
    owner: str | None,
    repo: str | None,
    sha: str | None,
) -> dict[str, Any]:
    if event_path is not None:
        if owner or repo or sha:
            logger.warning("--owner/--repo/--sha are ignored when --event is given")
        data: dict[str, Any] = load_event(event_path)
    else:
        data = make_push_event(
            owner=owner or LOCAL_OWNER,
            name=repo or project_dir.resolve().name,
            sha=sha or LOCAL_SHA,
        )
    # Fail early on incomplete payloads rather than inside a step
    event_repo(data)
    event_commit(data)
    return data


@click.command(
    name="run",
    help="Run the Maven build pipeline on a local checkout (default: current directory).",
)
@click.argument(
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    required=False,
)
@click.option(
    "--event",
    "event_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON push/tag event payload.",
)
@common_config_options
@click.option("--owner", default=None, help="Repository owner (without --event).")
@click.option("--repo", default=None, help="Repository name (without --event).")
@click.option("--sha", default=None, help="Commit sha (without --event).")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(RunOutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in RunOutputFormat)}).",
)
def run_command(
    *,
    project_dir: Path,
    event_path: Path | None,
    config_path: Path | None,
    config_name: str | None,
    mvn_args: str | None,
    java_version: str | None,
    settings_file: Path | None,
    setup_command: str | None,
    sdkman_dir: str | None,
    owner: str | None,
    repo: str | None,
    sha: str | None,
    output_format: RunOutputFormat | None,
) -> None:
    """Build PROJECT_DIR and print the resulting check run."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

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

    try:
        data: dict[str, Any] = _resolve_event(
            event_path, project_dir=project_dir, owner=owner, repo=repo, sha=sha
        )
    except EventError as exc:
        raise MvnCheckEventError(str(exc)) from exc

    checks = RecordingCheckFactory()
    event_ctx = EventContext(
        data=data,
        config=config,
        projects=LocalProjectLoader(project_dir),
        checks=checks,
    )
    outcome: Outcome = handle(event_ctx, MvnParameters())

    fmt: RunOutputFormat = output_format or RunOutputFormat.DEFAULT
    if fmt == RunOutputFormat.JSON:
        emit_run_json(console, outcome, checks.last)
    elif fmt == RunOutputFormat.MARKDOWN:
        emit_run_markdown(console, outcome, checks.last)
    else:
        emit_run_default(console, outcome, checks.last, verbosity=verbosity)

    ctx.exit(outcome.exit_code)
