# topmark:header:start
#
#   project      : MvnCheck
#   file         : model.py
#   file_relpath : src/mvncheck/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Annotation types produced by the build log extractor.

Sections:
    * Severity: annotation levels understood by the check-run API, with
      terminal colors.
    * Annotation: immutable, positioned finding parsed from a build log.
    * AnnotationStats: aggregated per-severity counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class Severity(str, Enum):
    """Annotation level, using the check-run API vocabulary.

    Ordered by importance: FAILURE > WARNING > NOTICE.
    """

    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this severity.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.NOTICE: chalk.blue,
                Severity.WARNING: chalk.yellow,
                Severity.FAILURE: chalk.red_bright,
            }[self],
        )


# Build tool level tokens, e.g. "[ERROR]" or "[WARN]"
_LEVEL_TOKENS: dict[str, Severity] = {
    "ERROR": Severity.FAILURE,
    "FATAL": Severity.FAILURE,
    "WARN": Severity.WARNING,
    "WARNING": Severity.WARNING,
    "INFO": Severity.NOTICE,
    "NOTICE": Severity.NOTICE,
    "DEBUG": Severity.NOTICE,
}


def severity_for_level(token: str) -> Severity:
    """Map a build tool level token onto a `Severity`.

    Unknown tokens map to ``WARNING`` so that an unexpected level never hides
    a finding.

    Args:
        token (str): The level token without brackets (case-insensitive).

    Returns:
        Severity: The mapped severity.
    """
    return _LEVEL_TOKENS.get(token.strip().upper(), Severity.WARNING)


@dataclass(frozen=True)
class Annotation:
    """One finding parsed from build output.

    Attributes:
        severity (Severity): Mapped severity of the finding.
        path (str): File path as printed by the tool (often absolute).
        line (int | None): 1-based line number, if reported.
        column (int | None): 1-based column, if reported.
        title (str): Short classification, typically the reporting tool.
        message (str): Diagnostic text; continuation lines are joined with ``\\n``.
    """

    severity: Severity
    path: str
    line: int | None
    column: int | None
    title: str
    message: str

    def relative_to(self, prefix: str) -> str:
        """Return ``path`` with ``prefix`` (and the following ``/``) removed when present."""
        if not prefix:
            return self.path
        root: str = prefix.rstrip("/") + "/"
        return self.path[len(root) :] if self.path.startswith(root) else self.path

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this annotation."""
        return {
            "severity": self.severity.value,
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "title": self.title,
            "message": self.message,
        }


@dataclass(frozen=True)
class AnnotationStats:
    """Aggregated counts for annotations by severity."""

    n_notice: int
    n_warning: int
    n_failure: int

    @property
    def total(self) -> int:
        """Return the total count of annotations."""
        return self.n_notice + self.n_warning + self.n_failure

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return {
            Severity.NOTICE.value: self.n_notice,
            Severity.WARNING.value: self.n_warning,
            Severity.FAILURE.value: self.n_failure,
        }


def compute_annotation_stats(annotations: Iterable[Annotation]) -> AnnotationStats:
    """Return per-severity counts for ``annotations``."""
    items: list[Annotation] = list(annotations)
    return AnnotationStats(
        n_notice=sum(1 for a in items if a.severity == Severity.NOTICE),
        n_warning=sum(1 for a in items if a.severity == Severity.WARNING),
        n_failure=sum(1 for a in items if a.severity == Severity.FAILURE),
    )
