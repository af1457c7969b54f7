# topmark:header:start
#
#   project      : MvnCheck
#   file         : runner.py
#   file_relpath : src/mvncheck/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run an ordered list of steps against one shared parameters record.

Steps run strictly in order. A failure or abort outcome ends the run and
becomes the terminal outcome; later steps never execute. When every step
completes, the last outcome is returned. A step that raises is reported as a
failure and concludes the check run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mvncheck.checks import Conclusion
from mvncheck.config.logging import get_logger
from mvncheck.pipeline.outcomes import failure, success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mvncheck.config.logging import MvnCheckLogger

    from .context import EventContext, MvnParameters
    from .contracts import Step
    from .outcomes import Outcome

logger: MvnCheckLogger = get_logger(__name__)


def _fail_on_exception(step: Step, params: MvnParameters, exc: Exception) -> Outcome:
    """Report an exception raised by ``step`` and return the failure outcome.

    The error is appended to the report and an open check run is concluded as
    failed. An error while updating the check run is logged; the step failure
    stays the terminal outcome.
    """
    reason: str = f"Step `{step.name}` raised {type(exc).__name__}: {exc}"
    params.body.append(reason)
    try:
        params.update_check(Conclusion.FAILURE)
    except Exception:  # noqa: BLE001
        logger.exception("Cannot conclude check run after step %s raised", step.name)
    return failure(reason)


def run_steps(
    ctx: EventContext,
    steps: Sequence[Step],
    params: MvnParameters,
) -> Outcome:
    """Execute ``steps`` sequentially over ``params``.

    Args:
        ctx (EventContext): The event being handled.
        steps (Sequence[Step]): Ordered steps.
        params (MvnParameters): Shared parameters, mutated in place by the steps.

    Returns:
        Outcome: The first failure or abort outcome, otherwise the last outcome
        (a plain success when no step ran).
    """
    outcome: Outcome = success()
    for step in steps:
        if not step.run_when(ctx, params):
            logger.info("Pipeline step %s skipped", step.name)
            continue

        logger.info("Pipeline step %s running", step.name)
        try:
            result: Outcome = step.run(ctx, params)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Pipeline step %s raised", step.name)
            return _fail_on_exception(step, params, exc)

        logger.debug("Pipeline step %s returned %s: %s", step.name, result.kind.value, result.reason)
        if result.is_failure:
            logger.info("Pipeline failed at %s: %s", step.name, result.reason)
            return result
        if result.is_abort:
            logger.info("Pipeline aborted at %s: %s", step.name, result.reason)
            return result
        outcome = result

    return outcome
