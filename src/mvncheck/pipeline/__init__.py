# topmark:header:start
#
#   project      : MvnCheck
#   file         : __init__.py
#   file_relpath : src/mvncheck/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build pipeline: ordered steps over one shared, mutable parameters record."""

from __future__ import annotations

from mvncheck.pipeline.context import EventContext, MvnParameters
from mvncheck.pipeline.outcomes import Outcome, OutcomeKind, failure, success
from mvncheck.pipeline.pipelines import MVN_STEPS, handle
from mvncheck.pipeline.runner import run_steps

__all__ = [
    "MVN_STEPS",
    "EventContext",
    "MvnParameters",
    "Outcome",
    "OutcomeKind",
    "failure",
    "handle",
    "run_steps",
    "success",
]
