# topmark:header:start
#
#   project      : MvnCheck
#   file         : base.py
#   file_relpath : src/mvncheck/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base classes for pipeline steps.

`BaseStep` provides the default gate (always run) and the shared failure
reporting used by the steps that spawn processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mvncheck.checks import Conclusion
from mvncheck.config.logging import get_logger
from mvncheck.pipeline.outcomes import failure
from mvncheck.pipeline.status import spawn_failure, status_reason

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mvncheck.checks import CheckAnnotation
    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.pipeline.context import EventContext, MvnParameters
    from mvncheck.pipeline.outcomes import Outcome
    from mvncheck.process import SpawnResult

logger: MvnCheckLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this and override ``run()`` and optionally ``run_when()``.

    Attributes:
        name (str): Stable step identifier for logs and failure reasons.
    """

    name: str

    def run_when(self, ctx: EventContext, params: MvnParameters) -> bool:
        """Return whether the step should run. Default: always."""
        return True

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Perform the step's work. Subclasses must implement this."""
        raise NotImplementedError(f"{type(self).__name__}.run() is not implemented")

    def report_spawn_failure(
        self,
        ctx: EventContext,
        params: MvnParameters,
        result: SpawnResult,
        annotations: Sequence[CheckAnnotation] = (),
    ) -> Outcome:
        """Record a failed process in the report and return the failure outcome.

        Appends the command line and its captured output to the body, concludes
        the check run as failed and attaches ``annotations``.
        """
        logger.warning("%s: `%s` exited with %d", self.name, result.cmd_string, result.status)
        params.body.append(spawn_failure(result))
        params.update_check(Conclusion.FAILURE, annotations)
        return failure(status_reason(f"`{result.cmd_string}` failed", ctx.repo, ctx.commit))

