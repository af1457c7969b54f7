# topmark:header:start
#
#   project      : MvnCheck
#   file         : model.py
#   file_relpath : src/mvncheck/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for a MvnCheck run.

Two types follow the mutable/frozen split used across the code base:

    * `MutableConfig` is a builder. Layers are merged into it in order
      (defaults, then the TOML file, then CLI overrides).
    * `Config` is the frozen snapshot handed to the pipeline. Derive a
      modified copy with `dataclasses.replace`.

Empty strings for optional options (``settings``, ``command``) mean "not
configured" and are normalized to ``None``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mvncheck.config.keys import Toml
from mvncheck.config.logging import get_logger
from mvncheck.constants import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_JAVA_VERSION,
    DEFAULT_MVN_ARGS,
    DEFAULT_SDKMAN_DIR,
)
from mvncheck.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mvncheck.config.logging import MvnCheckLogger

logger: MvnCheckLogger = get_logger(__name__)


def default_sdkman_dir() -> str:
    """Return ``$SDKMAN_DIR`` or the default SDKMAN root."""
    return os.environ.get("SDKMAN_DIR") or DEFAULT_SDKMAN_DIR


def _optional_text(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


@dataclass(frozen=True)
class Config:
    """Immutable configuration of one MvnCheck run.

    Attributes:
        name (str): Configuration name; the check run is named ``<skill>/<name>``.
        mvn (str): Raw Maven argument string.
        version (str): JDK version identifier passed to ``sdk install java``.
        settings (str | None): Verbatim ``settings.xml`` content, if any.
        command (str | None): Shell command run before the toolchain setup, if any.
        sdkman_dir (str): Root of the SDKMAN installation providing Java and Maven.
        warnings (tuple[str, ...]): Non-fatal problems found while loading.
    """

    name: str
    mvn: str
    version: str
    settings: str | None
    command: str | None
    sdkman_dir: str
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a TOML-compatible table (``None`` values omitted)."""
        table: dict[str, Any] = {
            Toml.KEY_NAME: self.name,
            Toml.KEY_MVN: self.mvn,
            Toml.KEY_VERSION: self.version,
            Toml.KEY_SETTINGS: self.settings,
            Toml.KEY_COMMAND: self.command,
            Toml.KEY_SDKMAN_DIR: self.sdkman_dir,
        }
        return {k: v for k, v in table.items() if v is not None}


@dataclass
class MutableConfig:
    """Mutable builder for `Config`."""

    name: str = DEFAULT_CONFIG_NAME
    mvn: str = DEFAULT_MVN_ARGS
    version: str = DEFAULT_JAVA_VERSION
    settings: str | None = None
    command: str | None = None
    sdkman_dir: str = field(default_factory=default_sdkman_dir)
    warnings: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def merge_table(self, table: Mapping[str, Any], *, source: str) -> MutableConfig:
        """Merge a ``[mvncheck]`` TOML table into this builder.

        Args:
            table (Mapping[str, Any]): Key/value pairs of the ``[mvncheck]`` table.
            source (str): Human-readable origin used in messages (usually a path).

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a known key holds a non-string value.
        """
        for key, value in table.items():
            if key not in Toml.ALL_KEYS:
                msg: str = f"{source}: unknown key '{key}' in [{Toml.SECTION_MVNCHECK}] ignored"
                logger.warning(msg)
                self.warnings.append(msg)
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    f"{source}: '{key}' must be a string, got {type(value).__name__}"
                )
            self._set(key, value)
        logger.debug("Merged config table from %s: %s", source, sorted(table))
        return self

    def apply_overrides(
        self,
        *,
        name: str | None = None,
        mvn: str | None = None,
        version: str | None = None,
        settings: str | None = None,
        command: str | None = None,
        sdkman_dir: str | None = None,
    ) -> MutableConfig:
        """Apply explicit (CLI) overrides; ``None`` leaves the current value untouched."""
        overrides: dict[str, str | None] = {
            Toml.KEY_NAME: name,
            Toml.KEY_MVN: mvn,
            Toml.KEY_VERSION: version,
            Toml.KEY_SETTINGS: settings,
            Toml.KEY_COMMAND: command,
            Toml.KEY_SDKMAN_DIR: sdkman_dir,
        }
        for key, value in overrides.items():
            if value is not None:
                self._set(key, value)
        return self

    def _set(self, key: str, value: str) -> None:
        if key in (Toml.KEY_SETTINGS, Toml.KEY_COMMAND):
            setattr(self, key, _optional_text(value))
        elif key == Toml.KEY_MVN:
            # An empty argument string falls back to the default goals
            self.mvn = value if value.strip() else DEFAULT_MVN_ARGS
        else:
            setattr(self, key, value)

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot."""
        return Config(
            name=self.name,
            mvn=self.mvn,
            version=self.version,
            settings=self.settings,
            command=self.command,
            sdkman_dir=self.sdkman_dir,
            warnings=tuple(self.warnings),
        )
