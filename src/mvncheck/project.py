# topmark:header:start
#
#   project      : MvnCheck
#   file         : project.py
#   file_relpath : src/mvncheck/project.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project handles: a checked-out repository plus a way to run commands in it.

`ProjectLoader` is the seam to the hosting platform. The local implementation
treats an existing directory as the checkout; cloning is not done here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from mvncheck.config.logging import get_logger
from mvncheck.process import build_env, spawn

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.process import SpawnResult, Spawner

logger: MvnCheckLogger = get_logger(__name__)


@dataclass(frozen=True)
class RepoId:
    """Repository identity.

    Attributes:
        owner (str): Repository owner (user or organization).
        name (str): Repository name.
        api_url (str | None): API base URL of the hosting provider, if known.
    """

    owner: str
    name: str
    api_url: str | None = None

    @property
    def slug(self) -> str:
        """Return ``owner/name``."""
        return f"{self.owner}/{self.name}"


class Project:
    """A repository checkout on the local filesystem."""

    def __init__(self, base_dir: Path, repo_id: RepoId, spawner: Spawner = spawn) -> None:
        self.base_dir: Path = base_dir
        self.id: RepoId = repo_id
        self._spawner: Spawner = spawner

    def __repr__(self) -> str:
        return f"Project({self.id.slug!r}, base_dir={str(self.base_dir)!r})"

    def path(self, *parts: str) -> Path:
        """Return a path below the project root."""
        return self.base_dir.joinpath(*parts)

    def spawn(
        self,
        cmd: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> SpawnResult:
        """Run ``cmd`` in the project root and capture its output.

        Args:
            cmd (str): Executable.
            args (Sequence[str]): Arguments.
            env (Mapping[str, str] | None): Complete child environment; the ambient
                environment (copied) when None.

        Returns:
            SpawnResult: The captured result.
        """
        return self._spawner(
            cmd,
            list(args),
            cwd=self.base_dir,
            env=env if env is not None else build_env(),
        )


class ProjectLoader(Protocol):
    """Resolve a repository identity and commit into a `Project`."""

    def load(self, repo_id: RepoId, sha: str) -> Project:
        """Return the project checked out at ``sha``."""
        ...


class LocalProjectLoader:
    """`ProjectLoader` backed by an existing local checkout."""

    def __init__(self, base_dir: Path, spawner: Spawner = spawn) -> None:
        self.base_dir: Path = base_dir
        self.spawner: Spawner = spawner

    def load(self, repo_id: RepoId, sha: str) -> Project:
        """Return a `Project` rooted at ``base_dir``.

        Raises:
            FileNotFoundError: If ``base_dir`` is not a directory.
        """
        if not self.base_dir.is_dir():
            raise FileNotFoundError(f"Project directory not found: {self.base_dir}")
        logger.debug("Loaded %s at %s from %s", repo_id.slug, sha, self.base_dir)
        return Project(self.base_dir.resolve(), repo_id, self.spawner)
