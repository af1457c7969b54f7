# topmark:header:start
#
#   project      : MvnCheck
#   file         : context.py
#   file_relpath : src/mvncheck/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline context types.

`EventContext` is read-only input to every step: the event payload, the
resolved configuration and the external collaborators.

`MvnParameters` is the mutable record shared by reference across the steps of
one pipeline invocation. It is created fresh per invocation and discarded at
the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mvncheck.config.logging import get_logger
from mvncheck.constants import BODY_SEPARATOR, SKILL_NAME
from mvncheck.events import event_commit, event_repo
from mvncheck.project import RepoId

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from mvncheck.checks import Check, CheckAnnotation, CheckFactory, Conclusion
    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.config.model import Config
    from mvncheck.events import EventCommit, EventRepo
    from mvncheck.project import Project, ProjectLoader

logger: MvnCheckLogger = get_logger(__name__)


@dataclass(frozen=True)
class EventContext:
    """Everything a step may read about the event being handled.

    Attributes:
        data (Mapping[str, Any]): The push or tag event payload.
        config (Config): The effective configuration.
        projects (ProjectLoader): Resolves the repository into a `Project`.
        checks (CheckFactory): Creates check runs.
        skill_name (str): Prefix of the check-run name.
        environ (Mapping[str, str] | None): Base environment for child processes;
            the ambient environment when None.
    """

    data: Mapping[str, Any]
    config: Config
    projects: ProjectLoader
    checks: CheckFactory
    skill_name: str = SKILL_NAME
    environ: Mapping[str, str] | None = None

    @property
    def repo(self) -> EventRepo:
        """Return the repository named by the event."""
        return event_repo(self.data)

    @property
    def commit(self) -> EventCommit:
        """Return the commit named by the event."""
        return event_commit(self.data)

    @property
    def repo_id(self) -> RepoId:
        """Return the repository identity used by the collaborators."""
        repo: EventRepo = self.repo
        return RepoId(owner=repo.owner, name=repo.name, api_url=repo.api_url)


@dataclass
class MvnParameters:
    """Mutable state shared by the steps of one pipeline run.

    Attributes:
        project (Project | None): Set by the ``load`` step.
        check (Check | None): Set by the ``validate`` step.
        body (list[str]): Report paragraphs, in step order.
        settings_path (Path | None): Set when a ``settings.xml`` was written.
    """

    project: Project | None = None
    check: Check | None = None
    body: list[str] = field(default_factory=lambda: [])
    settings_path: Path | None = None

    def require_project(self) -> Project:
        """Return the loaded project.

        Raises:
            RuntimeError: If no step has loaded a project yet.
        """
        if self.project is None:
            raise RuntimeError("No project loaded")
        return self.project

    def body_text(self) -> str:
        """Return the report body, paragraphs joined by the separator."""
        return BODY_SEPARATOR.join(self.body)

    def update_check(
        self,
        conclusion: Conclusion | None = None,
        annotations: Sequence[CheckAnnotation] = (),
    ) -> None:
        """Push the current body (and optional conclusion/annotations) to the check run.

        Does nothing before a check run has been created.
        """
        if self.check is None:
            logger.debug("No check run yet; skipping update")
            return
        self.check.update(conclusion=conclusion, body=self.body_text(), annotations=annotations)
