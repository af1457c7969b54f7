# topmark:header:start
#
#   project      : MvnCheck
#   file         : status.py
#   file_relpath : src/mvncheck/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report text helpers shared by the build steps."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mvncheck.events import EventCommit, EventRepo
    from mvncheck.process import SpawnResult

# Length of abbreviated commit ids in report text
SHORT_SHA_LENGTH: int = 7


def status_reason(reason: str, repo: EventRepo, commit: EventCommit) -> str:
    """Suffix ``reason`` with the repository and abbreviated commit.

    The commit reference is rendered as a markdown link when the commit URL is
    known, e.g. ``Build failed on [acme/app@1a2b3c4](https://...)``.
    """
    ref: str = f"{repo.slug}@{commit.sha[:SHORT_SHA_LENGTH]}"
    if commit.url:
        return f"{reason} on [{ref}]({commit.url})"
    return f"{reason} on {ref}"


def spawn_failure(result: SpawnResult) -> str:
    """Return a report paragraph for a failed process, embedding its output verbatim."""
    log: str = result.log.rstrip("\n")
    return f"`{result.cmd_string}` failed with exit code {result.status}:\n\n```\n{log}\n```"
