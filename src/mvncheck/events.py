# topmark:header:start
#
#   project      : MvnCheck
#   file         : events.py
#   file_relpath : src/mvncheck/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read repository and commit identity from push/tag events.

Two payload shapes are supported:

    Push: ``{"Push": [{"repo": {...}, "after": {"sha": ..., "url": ...}}]}``
    Tag:  ``{"Tag": [{"commit": {"sha": ..., "url": ..., "repo": {...}}}]}``

The ``repo`` object carries ``owner``, ``name``, ``defaultBranch``,
``org.provider.apiUrl`` and ``channels``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mvncheck.core.errors import EventError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


@dataclass(frozen=True)
class EventRepo:
    """Repository the event refers to."""

    owner: str
    name: str
    default_branch: str | None = None
    api_url: str | None = None
    channels: tuple[str, ...] = ()

    @property
    def slug(self) -> str:
        """Return ``owner/name``."""
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class EventCommit:
    """Commit the event refers to."""

    sha: str
    url: str | None = None


def _first(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    items: Any = data.get(key)
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def _raw_repo(data: Mapping[str, Any]) -> Mapping[str, Any] | None:
    push: Mapping[str, Any] | None = _first(data, "Push")
    if push is not None and isinstance(push.get("repo"), dict):
        return push["repo"]
    tag: Mapping[str, Any] | None = _first(data, "Tag")
    if tag is not None:
        commit: Any = tag.get("commit")
        if isinstance(commit, dict) and isinstance(commit.get("repo"), dict):
            return commit["repo"]
    return None


def _raw_commit(data: Mapping[str, Any]) -> Mapping[str, Any] | None:
    push: Mapping[str, Any] | None = _first(data, "Push")
    if push is not None and isinstance(push.get("after"), dict):
        return push["after"]
    tag: Mapping[str, Any] | None = _first(data, "Tag")
    if tag is not None and isinstance(tag.get("commit"), dict):
        return tag["commit"]
    return None


def event_repo(data: Mapping[str, Any]) -> EventRepo:
    """Extract the repository from event data.

    Raises:
        EventError: If the payload carries no repository with owner and name.
    """
    raw: Mapping[str, Any] | None = _raw_repo(data)
    if raw is None or not raw.get("owner") or not raw.get("name"):
        raise EventError("Event carries no repository owner/name")
    org: Any = raw.get("org") or {}
    provider: Any = org.get("provider") or {} if isinstance(org, dict) else {}
    channels: Any = raw.get("channels") or []
    return EventRepo(
        owner=str(raw["owner"]),
        name=str(raw["name"]),
        default_branch=raw.get("defaultBranch"),
        api_url=provider.get("apiUrl") if isinstance(provider, dict) else None,
        channels=tuple(str(c.get("name")) for c in channels if isinstance(c, dict) and c.get("name")),
    )


def event_commit(data: Mapping[str, Any]) -> EventCommit:
    """Extract the commit from event data.

    Raises:
        EventError: If the payload carries no commit sha.
    """
    raw: Mapping[str, Any] | None = _raw_commit(data)
    if raw is None or not raw.get("sha"):
        raise EventError("Event carries no commit sha")
    return EventCommit(sha=str(raw["sha"]), url=raw.get("url"))


def make_push_event(
    *,
    owner: str,
    name: str,
    sha: str,
    url: str | None = None,
    default_branch: str | None = None,
) -> dict[str, Any]:
    """Build a minimal push payload, e.g. for local runs without a webhook."""
    repo: dict[str, Any] = {"owner": owner, "name": name}
    if default_branch:
        repo["defaultBranch"] = default_branch
    after: dict[str, Any] = {"sha": sha}
    if url:
        after["url"] = url
    return {"Push": [{"repo": repo, "after": after}]}


def load_event(path: Path) -> dict[str, Any]:
    """Read a JSON event payload from ``path``.

    Raises:
        EventError: If the file cannot be read or does not hold a JSON object.
    """
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise EventError(f"Cannot read event payload {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise EventError(f"Event payload {path} must be a JSON object")
    return data
