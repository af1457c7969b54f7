# topmark:header:start
#
#   project      : MvnCheck
#   file         : outcomes.py
#   file_relpath : src/mvncheck/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Step and pipeline outcomes.

An `Outcome` is a tagged value:

    * ``CONTINUE``: the step succeeded; the pipeline moves on.
    * ``ABORT``: nothing to do; the pipeline stops without failing.
    * ``FAIL``: the step failed; the pipeline stops.

Outcomes are immutable. ``success("...").hidden().abort()`` builds a
non-failing, unreported stop signal.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from mvncheck.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Callable


class OutcomeKind(Enum):
    """Control-flow tag of an `Outcome`."""

    CONTINUE = "continue"
    ABORT = "abort"
    FAIL = "fail"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this kind."""
        return cast(
            "Callable[[str], str]",
            {
                OutcomeKind.CONTINUE: chalk.green,
                OutcomeKind.ABORT: chalk.gray,
                OutcomeKind.FAIL: chalk.red,
            }[self],
        )


@dataclass(frozen=True)
class Outcome:
    """Result of a step or of a whole pipeline.

    Attributes:
        kind (OutcomeKind): Control-flow tag.
        reason (str | None): Human-readable reason, if any.
        visible (bool): False when the outcome should not be reported to users.
    """

    kind: OutcomeKind
    reason: str | None = None
    visible: bool = True

    @property
    def is_failure(self) -> bool:
        """Return True for a failure outcome."""
        return self.kind == OutcomeKind.FAIL

    @property
    def is_abort(self) -> bool:
        """Return True for a non-failing stop signal."""
        return self.kind == OutcomeKind.ABORT

    @property
    def exit_code(self) -> ExitCode:
        """Return the process exit code for this outcome."""
        return ExitCode.FAILURE if self.is_failure else ExitCode.SUCCESS

    def hidden(self) -> Outcome:
        """Return a copy not meant to be reported."""
        return replace(self, visible=False)

    def abort(self) -> Outcome:
        """Return a copy that stops the pipeline; failures are returned unchanged."""
        if self.is_failure:
            return self
        return replace(self, kind=OutcomeKind.ABORT)


def success(reason: str | None = None) -> Outcome:
    """Return a successful outcome."""
    return Outcome(OutcomeKind.CONTINUE, reason)


def failure(reason: str) -> Outcome:
    """Return a failure outcome."""
    return Outcome(OutcomeKind.FAIL, reason)
