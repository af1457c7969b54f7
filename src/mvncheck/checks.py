# topmark:header:start
#
#   project      : MvnCheck
#   file         : checks.py
#   file_relpath : src/mvncheck/checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Check-run boundary.

A check run is the structured commit status shown by the hosting platform.
The pipeline only talks to the `CheckFactory` and `Check` protocols; the
in-memory `RecordingCheckFactory` implements them for local runs and tests by
recording every update in order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, cast

from yachalk import chalk

from mvncheck.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.diagnostic.model import Annotation
    from mvncheck.project import RepoId

logger: MvnCheckLogger = get_logger(__name__)


class Conclusion(str, Enum):
    """Final state of a check run. ``None`` is used for "still pending"."""

    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this conclusion."""
        return cast(
            "Callable[[str], str]",
            {
                Conclusion.SUCCESS: chalk.green,
                Conclusion.FAILURE: chalk.red,
            }[self],
        )


@dataclass(frozen=True)
class CheckAnnotation:
    """Annotation record in the check-run API shape."""

    annotation_level: str
    path: str
    start_line: int
    end_line: int
    start_offset: int | None
    title: str
    message: str

    @classmethod
    def from_annotation(cls, annotation: Annotation, *, prefix: str = "") -> CheckAnnotation:
        """Convert an extracted `Annotation`, stripping ``prefix`` from its path.

        A missing line number is reported as line 1 since the API requires one.
        """
        line: int = annotation.line or 1
        return cls(
            annotation_level=annotation.severity.value,
            path=annotation.relative_to(prefix),
            start_line=line,
            end_line=line,
            start_offset=annotation.column,
            title=annotation.title,
            message=annotation.message,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {
            "annotation_level": self.annotation_level,
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "start_offset": self.start_offset,
            "title": self.title,
            "message": self.message,
        }


class Check(Protocol):
    """Handle on a created check run."""

    def update(
        self,
        *,
        conclusion: Conclusion | None,
        body: str,
        annotations: Sequence[CheckAnnotation] = (),
    ) -> None:
        """Replace the body and optionally set the conclusion and add annotations."""
        ...


class CheckFactory(Protocol):
    """Creates check runs on the hosting platform."""

    def create_check(
        self,
        repo_id: RepoId,
        *,
        sha: str,
        title: str,
        name: str,
        body: str,
    ) -> Check:
        """Create a check run for ``sha`` and return its handle."""
        ...


@dataclass(frozen=True)
class CheckUpdate:
    """One recorded `Check.update` call."""

    conclusion: Conclusion | None
    body: str
    annotations: tuple[CheckAnnotation, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {
            "conclusion": self.conclusion.value if self.conclusion else None,
            "body": self.body,
            "annotations": [a.to_dict() for a in self.annotations],
        }


@dataclass
class CheckRun:
    """In-memory check run that records its updates."""

    repo: str
    sha: str
    title: str
    name: str
    body: str
    conclusion: Conclusion | None = None
    annotations: list[CheckAnnotation] = field(default_factory=lambda: [])
    updates: list[CheckUpdate] = field(default_factory=lambda: [])

    def update(
        self,
        *,
        conclusion: Conclusion | None,
        body: str,
        annotations: Sequence[CheckAnnotation] = (),
    ) -> None:
        """Record the update and apply it to the current state."""
        self.updates.append(CheckUpdate(conclusion, body, tuple(annotations)))
        self.body = body
        if conclusion is not None:
            self.conclusion = conclusion
        self.annotations.extend(annotations)
        logger.debug(
            "Check %s updated: conclusion=%s, %d annotation(s)",
            self.name,
            conclusion.value if conclusion else None,
            len(annotations),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the final state and its history."""
        return {
            "repo": self.repo,
            "sha": self.sha,
            "title": self.title,
            "name": self.name,
            "conclusion": self.conclusion.value if self.conclusion else None,
            "body": self.body,
            "annotations": [a.to_dict() for a in self.annotations],
            "updates": [u.to_dict() for u in self.updates],
        }


@dataclass
class RecordingCheckFactory:
    """`CheckFactory` keeping created check runs in memory."""

    created: list[CheckRun] = field(default_factory=lambda: [])

    def create_check(
        self,
        repo_id: RepoId,
        *,
        sha: str,
        title: str,
        name: str,
        body: str,
    ) -> CheckRun:
        """Create and remember a `CheckRun`."""
        check = CheckRun(repo=repo_id.slug, sha=sha, title=title, name=name, body=body)
        self.created.append(check)
        logger.info("Created check %s on %s@%s", name, repo_id.slug, sha[:7])
        return check

    @property
    def last(self) -> CheckRun | None:
        """Return the most recently created check run, if any."""
        return self.created[-1] if self.created else None
