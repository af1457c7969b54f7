# topmark:header:start
#
#   project      : MvnCheck
#   file         : process.py
#   file_relpath : src/mvncheck/process.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Spawn external processes and capture their output.

All build tools run through `spawn`: stdout and stderr are merged into a
single ordered text stream that is read in full after the process exits.
There is no timeout; a hung process blocks the caller.

Environment handling is explicit: `build_env` returns a new mapping and never
touches `os.environ`.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from mvncheck.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from mvncheck.config.logging import MvnCheckLogger

logger: MvnCheckLogger = get_logger(__name__)

# Exit status reported when the executable cannot be started at all
SPAWN_ERROR_STATUS: int = 127


@dataclass(frozen=True)
class SpawnResult:
    """Outcome of one process invocation.

    Attributes:
        cmd (str): The executable.
        args (tuple[str, ...]): Arguments passed to the executable.
        status (int): Exit status.
        log (str): Combined stdout and stderr, in the order it was written.
    """

    cmd: str
    args: tuple[str, ...]
    status: int
    log: str

    @property
    def cmd_string(self) -> str:
        """Return the command line as shown to users."""
        return " ".join([self.cmd, *self.args])

    @property
    def ok(self) -> bool:
        """Return True if the process exited with status 0."""
        return self.status == 0


class Spawner(Protocol):
    """Callable that runs a process to completion; `spawn` is the default."""

    def __call__(
        self,
        cmd: str,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> SpawnResult:
        """Run ``cmd`` with ``args`` and return its result."""
        ...


def spawn(
    cmd: str,
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> SpawnResult:
    """Run ``cmd`` with ``args``, wait for it to exit and capture its output.

    Args:
        cmd (str): Executable name or path.
        args (Sequence[str]): Arguments.
        cwd (Path | None): Working directory; the current one when None.
        env (Mapping[str, str] | None): Complete environment for the child; the
            ambient environment when None.

    Returns:
        SpawnResult: Exit status and combined output. If the executable cannot
        be started, status is ``127`` and the log holds the error message.
    """
    argv: list[str] = [cmd, *args]
    logger.info("Running: %s", " ".join(argv))
    try:
        completed: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
            argv,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.error("Cannot start %s: %s", cmd, exc)
        return SpawnResult(cmd=cmd, args=tuple(args), status=SPAWN_ERROR_STATUS, log=str(exc))

    logger.debug("%s exited with status %d", cmd, completed.returncode)
    return SpawnResult(
        cmd=cmd,
        args=tuple(args),
        status=completed.returncode,
        log=completed.stdout or "",
    )


def build_env(
    base: Mapping[str, str] | None = None,
    *,
    overrides: Mapping[str, str] | None = None,
    path_prepend: Sequence[str] = (),
) -> dict[str, str]:
    """Return a new environment map for a child process.

    Args:
        base (Mapping[str, str] | None): Starting environment; a copy of
            `os.environ` when None.
        overrides (Mapping[str, str] | None): Variables to set or replace.
        path_prepend (Sequence[str]): Directories placed in front of ``PATH``,
            in the given order.

    Returns:
        dict[str, str]: The merged environment. ``base`` is not modified.
    """
    env: dict[str, str] = dict(os.environ if base is None else base)
    if overrides:
        env.update(overrides)
    if path_prepend:
        current: str = env.get("PATH", "")
        env["PATH"] = os.pathsep.join([*path_prepend, current]) if current else os.pathsep.join(
            path_prepend
        )
    return env
