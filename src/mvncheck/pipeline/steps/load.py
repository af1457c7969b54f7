# topmark:header:start
#
#   project      : MvnCheck
#   file         : load.py
#   file_relpath : src/mvncheck/pipeline/steps/load.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the project checkout for the event's repository."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mvncheck.config.logging import get_logger
from mvncheck.core.errors import MvnCheckError
from mvncheck.pipeline.outcomes import failure, success
from mvncheck.pipeline.status import status_reason

from .base import BaseStep

if TYPE_CHECKING:
    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.pipeline.context import EventContext, MvnParameters
    from mvncheck.pipeline.outcomes import Outcome
    from mvncheck.project import Project

logger: MvnCheckLogger = get_logger(__name__)


@dataclass
class LoadStep(BaseStep):
    """Load the project through the context's `ProjectLoader`."""

    name: str = "load"

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Set ``params.project``; a loader error fails the pipeline."""
        try:
            project: Project = ctx.projects.load(ctx.repo_id, ctx.commit.sha)
        except (OSError, MvnCheckError) as exc:
            logger.error("Cannot load %s: %s", ctx.repo.slug, exc)
            return failure(status_reason(f"Failed to load project: {exc}", ctx.repo, ctx.commit))
        params.project = project
        logger.debug("Loaded %r", project)
        return success()
