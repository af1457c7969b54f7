# topmark:header:start
#
#   project      : MvnCheck
#   file         : contracts.py
#   file_relpath : src/mvncheck/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contract for pipeline steps (runner-facing).

Lifecycle
---------
1) The runner calls ``step.run_when(ctx, params)`` to gate execution.
2) If allowed, it calls ``step.run(ctx, params)``, which may mutate
   ``params`` in place and returns an `Outcome`.
3) A failure or abort outcome ends the pipeline.

Steps are stateless definitions; all per-invocation state lives in the
parameters record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import EventContext, MvnParameters
    from .outcomes import Outcome


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass [`mvncheck.pipeline.steps.base.BaseStep`][].
    """

    name: str

    def run_when(self, ctx: EventContext, params: MvnParameters) -> bool:
        """Return whether the step should run.

        Args:
            ctx (EventContext): The event being handled.
            params (MvnParameters): The shared parameters record.

        Returns:
            bool: True to run the step; False to skip it without side effects.
        """
        ...

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Execute the step.

        Expected failures (non-zero exit codes, missing files) must be returned
        as failure outcomes, not raised.

        Args:
            ctx (EventContext): The event being handled.
            params (MvnParameters): The shared parameters record, mutated in place.

        Returns:
            Outcome: The step result.
        """
        ...
