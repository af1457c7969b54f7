# topmark:header:start
#
#   project      : MvnCheck
#   file         : jdk.py
#   file_relpath : src/mvncheck/pipeline/steps/jdk.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Install the requested JDK with SDKMAN."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mvncheck.constants import SDKMAN_INIT_RELPATH
from mvncheck.pipeline.outcomes import success
from mvncheck.process import build_env

from .base import BaseStep

if TYPE_CHECKING:
    from mvncheck.pipeline.context import EventContext, MvnParameters
    from mvncheck.pipeline.outcomes import Outcome
    from mvncheck.process import SpawnResult


def install_script(sdkman_dir: str, version: str) -> str:
    """Return the shell script that installs JDK ``version``; both values are shell-quoted."""
    init_script: str = shlex.quote(f"{sdkman_dir}/{SDKMAN_INIT_RELPATH}")
    return f"source {init_script} && sdk install java {shlex.quote(version)}"


@dataclass
class SetupJdkStep(BaseStep):
    """``sdk install java <version>``; a failure is fatal."""

    name: str = "setup jdk"

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Spawn the installer through ``bash -c``."""
        sdkman_dir: str = ctx.config.sdkman_dir
        result: SpawnResult = params.require_project().spawn(
            "bash",
            ["-c", install_script(sdkman_dir, ctx.config.version)],
            env=build_env(ctx.environ, overrides={"SDKMAN_DIR": sdkman_dir}),
        )
        if not result.ok:
            return self.report_spawn_failure(ctx, params, result)

        params.body.append(f"Installed JDK version `{ctx.config.version}`")
        params.update_check()
        return success()
