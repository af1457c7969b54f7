# topmark:header:start
#
#   project      : MvnCheck
#   file         : mvn.py
#   file_relpath : src/mvncheck/pipeline/steps/mvn.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run Maven and report its result.

The step:

1. tokenizes the configured argument string;
2. picks the executable (explicit first token, project wrapper, or ``mvn``);
3. appends default options the user did not already pass;
4. runs Maven with an explicit toolchain environment;
5. extracts annotations from the combined output.

A non-zero exit status *or* any extracted annotation fails the build.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mvncheck.checks import CheckAnnotation, Conclusion
from mvncheck.config.logging import get_logger
from mvncheck.constants import (
    BATCH_MODE_FLAG,
    DEFAULT_MVN_ARGS,
    JAVA_BIN_RELPATH,
    JAVA_HOME_RELPATH,
    LOCAL_REPOSITORY_RELPATH,
    MAVEN_BIN_RELPATH,
    MVN_COMMAND,
    MVN_WRAPPER_COMMAND,
    MVN_WRAPPER_NAME,
    QUIET_TRANSFER_FLAG,
    REPO_LOCAL_PROPERTY,
)
from mvncheck.diagnostic.extractor import extract_annotations
from mvncheck.pipeline.outcomes import success
from mvncheck.pipeline.status import status_reason
from mvncheck.process import build_env
from mvncheck.utils.args import tokenize_arg_string

from .base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.diagnostic.model import Annotation
    from mvncheck.pipeline.context import EventContext, MvnParameters
    from mvncheck.pipeline.outcomes import Outcome
    from mvncheck.process import SpawnResult
    from mvncheck.project import Project

logger: MvnCheckLogger = get_logger(__name__)

# First tokens recognized as an explicit Maven executable
EXPLICIT_EXECUTABLES: tuple[str, ...] = (MVN_COMMAND, MVN_WRAPPER_NAME, MVN_WRAPPER_COMMAND)

BATCH_MODE_FLAGS: tuple[str, ...] = (BATCH_MODE_FLAG, "--batch-mode")
SETTINGS_FLAGS: tuple[str, ...] = ("-s", "--settings")


def choose_executable(tokens: Sequence[str], *, has_wrapper: bool) -> tuple[str, list[str]]:
    """Return the Maven executable and the remaining arguments.

    An explicit ``mvn``, ``mvnw`` or ``./mvnw`` first token is taken as the
    executable and removed from the arguments (``mvnw`` is run as ``./mvnw``).
    Otherwise the project wrapper is used when present, else ``mvn``.
    """
    args: list[str] = list(tokens)
    if args and args[0] in EXPLICIT_EXECUTABLES:
        first: str = args.pop(0)
        return (MVN_COMMAND if first == MVN_COMMAND else MVN_WRAPPER_COMMAND), args
    return (MVN_WRAPPER_COMMAND if has_wrapper else MVN_COMMAND), args


def _option_key(option: str) -> str:
    return option.split("=", 1)[0]


def has_settings_flag(args: Sequence[str]) -> bool:
    """Return True if ``args`` already selects a settings file.

    Recognized forms: ``-s PATH``, ``-sPATH``, ``--settings PATH`` and
    ``--settings=PATH``.
    """
    for arg in args:
        if arg in SETTINGS_FLAGS or arg.startswith("--settings="):
            return True
        if arg.startswith("-s") and not arg.startswith("--") and len(arg) > 2:
            return True
    return False


def with_default_options(
    args: Sequence[str],
    *,
    project_dir: Path,
    settings_path: Path | None,
) -> list[str]:
    """Append the default Maven options that ``args`` does not already cover.

    Args:
        args (Sequence[str]): User arguments (without the executable).
        project_dir (Path): Project root; the local repository lives below it.
        settings_path (Path | None): Written settings file, if any.

    Returns:
        list[str]: ``args`` followed by the missing default options.
    """
    result: list[str] = list(args)
    if not any(a in BATCH_MODE_FLAGS for a in args):
        result.append(BATCH_MODE_FLAG)
    if not any(_option_key(a) == _option_key(QUIET_TRANSFER_FLAG) for a in args):
        result.append(QUIET_TRANSFER_FLAG)
    if not any(a.startswith(REPO_LOCAL_PROPERTY) for a in args):
        result.append(f"{REPO_LOCAL_PROPERTY}={project_dir / LOCAL_REPOSITORY_RELPATH}")
    if settings_path is not None and not has_settings_flag(args):
        result.append(f"--settings={settings_path}")
    return result


def toolchain_env(base: Mapping[str, str] | None, sdkman_dir: str) -> dict[str, str]:
    """Return the child environment with the SDKMAN Java and Maven in front of ``PATH``."""
    root: str = sdkman_dir.rstrip("/")
    return build_env(
        base,
        overrides={"JAVA_HOME": f"{root}/{JAVA_HOME_RELPATH}"},
        path_prepend=[f"{root}/{MAVEN_BIN_RELPATH}", f"{root}/{JAVA_BIN_RELPATH}"],
    )


@dataclass
class MvnStep(BaseStep):
    """Run the Maven build and conclude the check run."""

    name: str = "mvn"

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Invoke Maven; fail on a non-zero exit or on any annotation."""
        project: Project = params.require_project()
        tokens: list[str] = tokenize_arg_string(ctx.config.mvn or DEFAULT_MVN_ARGS)
        cmd, args = choose_executable(
            tokens, has_wrapper=project.path(MVN_WRAPPER_NAME).is_file()
        )
        args = with_default_options(
            args, project_dir=project.base_dir, settings_path=params.settings_path
        )

        result: SpawnResult = project.spawn(
            cmd, args, env=toolchain_env(ctx.environ, ctx.config.sdkman_dir)
        )
        annotations: list[Annotation] = extract_annotations(result.log)
        logger.info(
            "%s exited with %d, %d annotation(s)", cmd, result.status, len(annotations)
        )

        if not result.ok or annotations:
            prefix: str = str(project.base_dir)
            return self.report_spawn_failure(
                ctx,
                params,
                result,
                [CheckAnnotation.from_annotation(a, prefix=prefix) for a in annotations],
            )

        params.body.append(f"`{result.cmd_string}` successful")
        params.update_check(Conclusion.SUCCESS)
        return success(
            status_reason(f"Maven build of {ctx.repo.slug} succeeded", ctx.repo, ctx.commit)
        )
