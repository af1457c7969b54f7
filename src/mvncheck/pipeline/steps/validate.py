# topmark:header:start
#
#   project      : MvnCheck
#   file         : validate.py
#   file_relpath : src/mvncheck/pipeline/steps/validate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Skip non-Maven projects; otherwise open the check run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mvncheck.constants import CHECK_INITIAL_BODY, CHECK_TITLE, POM_FILE_NAME
from mvncheck.pipeline.outcomes import success

from .base import BaseStep

if TYPE_CHECKING:
    from mvncheck.pipeline.context import EventContext, MvnParameters
    from mvncheck.pipeline.outcomes import Outcome
    from mvncheck.project import Project


@dataclass
class ValidateStep(BaseStep):
    """Require ``pom.xml`` at the project root, then create the check run."""

    name: str = "validate"

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Abort quietly without a descriptor; create the check run otherwise."""
        project: Project = params.require_project()
        if not project.path(POM_FILE_NAME).is_file():
            return success("Ignoring push to non-Maven project").hidden().abort()

        params.check = ctx.checks.create_check(
            project.id,
            sha=ctx.commit.sha,
            title=CHECK_TITLE,
            name=f"{ctx.skill_name}/{ctx.config.name}",
            body=CHECK_INITIAL_BODY,
        )
        params.body = []
        return success()
