# topmark:header:start
#
#   project      : MvnCheck
#   file         : emitters.py
#   file_relpath : src/mvncheck/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render pipeline results and annotations for the CLI.

Human formats (``default``, ``markdown``) may use colors through the console;
machine formats (``json``, ``github``) never do.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any

from mvncheck.diagnostic.model import Severity, compute_annotation_stats

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mvncheck.checks import CheckRun
    from mvncheck.cli.console import ConsoleLike
    from mvncheck.diagnostic.model import Annotation, AnnotationStats
    from mvncheck.pipeline.outcomes import Outcome


class RunOutputFormat(str, Enum):
    """Output formats of ``mvncheck run``."""

    DEFAULT = "default"
    MARKDOWN = "markdown"
    JSON = "json"


class AnnotationFormat(str, Enum):
    """Output formats of ``mvncheck extract``."""

    DEFAULT = "default"
    JSON = "json"
    GITHUB = "github"


class VersionFormat(str, Enum):
    """Output formats of ``mvncheck version``."""

    DEFAULT = "default"
    JSON = "json"


class ConfigFormat(str, Enum):
    """Output formats of ``mvncheck config``."""

    TOML = "toml"
    JSON = "json"


# GitHub workflow-command levels
_GITHUB_LEVELS: dict[Severity, str] = {
    Severity.NOTICE: "notice",
    Severity.WARNING: "warning",
    Severity.FAILURE: "error",
}


def outcome_to_dict(outcome: Outcome) -> dict[str, Any]:
    """Return a JSON-friendly mapping of ``outcome``."""
    return {
        "kind": outcome.kind.value,
        "reason": outcome.reason,
        "visible": outcome.visible,
    }


def _location(path: str, line: int | None, column: int | None) -> str:
    loc: str = path
    if line is not None:
        loc += f":{line}"
        if column is not None:
            loc += f":{column}"
    return loc


# --- mvncheck run ---------------------------------------------------------------


def emit_run_default(
    console: ConsoleLike,
    outcome: Outcome,
    check: CheckRun | None,
    *,
    verbosity: int = 0,
) -> None:
    """Print the outcome and, when one was created, the final check run."""
    label: str = outcome.kind.color(outcome.kind.value)
    console.print(f"{console.styled('Outcome:', bold=True)} {label}")
    if outcome.reason and (outcome.visible or verbosity > 0):
        console.print(f"  {outcome.reason}")

    if check is None:
        if verbosity >= 0:
            console.print("No check run created.")
        return

    conclusion: str = (
        check.conclusion.color(check.conclusion.value) if check.conclusion else "pending"
    )
    console.print()
    console.print(f"{console.styled('Check run:', bold=True)} {check.name} ({conclusion})")
    if verbosity >= 0:
        console.print()
        console.print(check.body)
    if check.annotations:
        console.print()
        console.print(console.styled("Annotations:", bold=True))
        for ann in check.annotations:
            level: str = Severity(ann.annotation_level).color(ann.annotation_level)
            loc: str = _location(ann.path, ann.start_line, ann.start_offset)
            console.print(f"  {loc}: {level} [{ann.title}] {ann.message}")
    if verbosity > 0:
        console.print()
        console.print(f"{len(check.updates)} check update(s) sent.")


def emit_run_markdown(console: ConsoleLike, outcome: Outcome, check: CheckRun | None) -> None:
    """Print the outcome and check run as a Markdown document."""
    console.print("# MvnCheck\n")
    console.print(f"**Outcome:** {outcome.kind.value}\n")
    if outcome.reason:
        console.print(f"{outcome.reason}\n")
    if check is None:
        console.print("_No check run created._")
        return
    conclusion: str = check.conclusion.value if check.conclusion else "pending"
    console.print(f"## Check run `{check.name}` ({conclusion})\n")
    console.print(check.body)
    if check.annotations:
        console.print("\n## Annotations\n")
        console.print("| Level | Location | Title | Message |")
        console.print("|---|---|---|---|")
        for ann in check.annotations:
            message: str = ann.message.replace("\n", "<br>").replace("|", "\\|")
            loc: str = _location(ann.path, ann.start_line, ann.start_offset)
            console.print(f"| {ann.annotation_level} | `{loc}` | {ann.title} | {message} |")


def emit_run_json(console: ConsoleLike, outcome: Outcome, check: CheckRun | None) -> None:
    """Print the outcome and check run as one JSON document."""
    payload: dict[str, Any] = {
        "outcome": outcome_to_dict(outcome),
        "check": check.to_dict() if check is not None else None,
    }
    console.print(json.dumps(payload, indent=2))


# --- mvncheck extract -----------------------------------------------------------


def emit_annotations_default(
    console: ConsoleLike,
    annotations: Sequence[Annotation],
    *,
    prefix: str = "",
    verbosity: int = 0,
) -> None:
    """Print one line per annotation followed by per-severity counts."""
    for ann in annotations:
        level: str = ann.severity.color(ann.severity.value)
        loc: str = _location(ann.relative_to(prefix), ann.line, ann.column)
        console.print(f"{loc}: {level} [{ann.title}] {ann.message}")

    if verbosity < 0:
        return
    stats: AnnotationStats = compute_annotation_stats(annotations)
    if stats.total == 0:
        console.print(console.styled("No annotations found.", fg="green"))
        return
    console.print()
    console.print(
        f"{stats.total} annotation(s): "
        f"{Severity.FAILURE.color(str(stats.n_failure))} failure, "
        f"{Severity.WARNING.color(str(stats.n_warning))} warning, "
        f"{Severity.NOTICE.color(str(stats.n_notice))} notice"
    )


def emit_annotations_json(
    console: ConsoleLike,
    annotations: Sequence[Annotation],
    *,
    prefix: str = "",
) -> None:
    """Print annotations and their counts as one JSON document."""
    items: list[dict[str, Any]] = []
    for ann in annotations:
        item: dict[str, Any] = ann.to_dict()
        item["path"] = ann.relative_to(prefix)
        items.append(item)
    payload: dict[str, Any] = {
        "annotations": items,
        "summary": compute_annotation_stats(annotations).to_dict(),
    }
    console.print(json.dumps(payload, indent=2))


def _escape_data(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(text: str) -> str:
    return _escape_data(text).replace(":", "%3A").replace(",", "%2C")


def github_command(annotation: Annotation, *, prefix: str = "") -> str:
    """Return ``annotation`` as a GitHub Actions workflow command line."""
    props: list[str] = [f"file={_escape_property(annotation.relative_to(prefix))}"]
    if annotation.line is not None:
        props.append(f"line={annotation.line}")
    if annotation.column is not None:
        props.append(f"col={annotation.column}")
    props.append(f"title={_escape_property(annotation.title)}")
    level: str = _GITHUB_LEVELS[annotation.severity]
    return f"::{level} {','.join(props)}::{_escape_data(annotation.message)}"


def emit_annotations_github(
    console: ConsoleLike,
    annotations: Sequence[Annotation],
    *,
    prefix: str = "",
) -> None:
    """Print annotations as GitHub Actions workflow commands."""
    for ann in annotations:
        console.print(github_command(ann, prefix=prefix))
