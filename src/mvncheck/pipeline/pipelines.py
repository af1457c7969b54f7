# topmark:header:start
#
#   project      : MvnCheck
#   file         : pipelines.py
#   file_relpath : src/mvncheck/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The Maven build pipeline.

``MVN_STEPS``: load → validate → command? → settings? → setup jdk → mvn

Steps are instantiated objects kept in an immutable tuple; per-run state lives
in a fresh `MvnParameters` created by `handle`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from mvncheck.config.logging import get_logger

from .context import MvnParameters
from .runner import run_steps
from .steps.command import CommandStep
from .steps.jdk import SetupJdkStep
from .steps.load import LoadStep
from .steps.mvn import MvnStep
from .steps.settings import SettingsStep
from .steps.validate import ValidateStep

if TYPE_CHECKING:
    from mvncheck.config.logging import MvnCheckLogger

    from .context import EventContext
    from .contracts import Step
    from .outcomes import Outcome

logger: MvnCheckLogger = get_logger(__name__)

MVN_STEPS: Final[tuple[Step, ...]] = (
    LoadStep(),  # Resolve the checkout
    ValidateStep(),  # Require pom.xml, open the check run
    CommandStep(),  # Optional setup command
    SettingsStep(),  # Optional .m2/settings.xml
    SetupJdkStep(),  # sdk install java <version>
    MvnStep(),  # Build and extract annotations
)


def handle(ctx: EventContext, params: MvnParameters | None = None) -> Outcome:
    """Run `MVN_STEPS` for one event.

    Args:
        ctx (EventContext): The event and its collaborators.
        params (MvnParameters | None): Parameters record to use; a fresh one when
            None. Passing one in lets callers inspect the state after the run.

    Returns:
        Outcome: The terminal outcome.
    """
    parameters: MvnParameters = params if params is not None else MvnParameters()
    outcome: Outcome = run_steps(ctx, MVN_STEPS, parameters)
    logger.info("Pipeline finished: %s (%s)", outcome.kind.value, outcome.reason)
    return outcome
