# topmark:header:start
#
#   project      : MvnCheck
#   file         : command.py
#   file_relpath : src/mvncheck/pipeline/steps/command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the configured setup command before the toolchain is installed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mvncheck.pipeline.outcomes import success
from mvncheck.process import build_env

from .base import BaseStep

if TYPE_CHECKING:
    from mvncheck.pipeline.context import EventContext, MvnParameters
    from mvncheck.pipeline.outcomes import Outcome
    from mvncheck.process import SpawnResult


@dataclass
class CommandStep(BaseStep):
    """``bash -c <command>`` in the project root."""

    name: str = "command"

    def run_when(self, ctx: EventContext, params: MvnParameters) -> bool:
        """Run only when a command is configured."""
        return bool(ctx.config.command)

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Spawn the command; a non-zero exit fails the pipeline."""
        command: str = ctx.config.command or ""
        result: SpawnResult = params.require_project().spawn(
            "bash", ["-c", command], env=build_env(ctx.environ)
        )
        if not result.ok:
            return self.report_spawn_failure(ctx, params, result)

        params.body.append(f"Setup command `{result.cmd_string}` successful")
        params.update_check()
        return success()
