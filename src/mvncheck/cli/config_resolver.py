# topmark:header:start
#
#   project      : MvnCheck
#   file         : config_resolver.py
#   file_relpath : src/mvncheck/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective MvnCheck configuration from Click parameters.

Bridges the options added by `common_config_options` and
`mvncheck.config.load_config`, translating library errors into CLI errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mvncheck.cli.errors import MvnCheckConfigError, MvnCheckIOError
from mvncheck.config.loaders import load_config
from mvncheck.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from mvncheck.cli.console import ConsoleLike
    from mvncheck.config.model import Config


def read_settings_file(path: Path | None) -> str | None:
    """Return the content of ``--settings-file``, or None when not given.

    Raises:
        MvnCheckIOError: If the file cannot be read.
    """
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MvnCheckIOError(f"Cannot read settings file {path}: {exc}") from exc


def resolve_config(
    console: ConsoleLike,
    *,
    project_dir: Path,
    config_path: Path | None,
    config_name: str | None,
    mvn_args: str | None,
    java_version: str | None,
    settings_file: Path | None,
    setup_command: str | None,
    sdkman_dir: str | None,
) -> Config:
    """Load the configuration for ``project_dir`` and report its warnings.

    Returns:
        Config: The frozen configuration.

    Raises:
        MvnCheckConfigError: If the configuration file is unreadable or invalid.
        MvnCheckIOError: If ``settings_file`` cannot be read.
    """
    try:
        config: Config = load_config(
            config_path,
            cwd=project_dir,
            overrides={
                "name": config_name,
                "mvn": mvn_args,
                "version": java_version,
                "settings": read_settings_file(settings_file),
                "command": setup_command,
                "sdkman_dir": sdkman_dir,
            },
        )
    except ConfigError as exc:
        raise MvnCheckConfigError(str(exc)) from exc
    for warning in config.warnings:
        console.warn(warning)
    return config
