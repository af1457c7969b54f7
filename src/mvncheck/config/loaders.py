# topmark:header:start
#
#   project      : MvnCheck
#   file         : loaders.py
#   file_relpath : src/mvncheck/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load MvnCheck configuration from TOML.

Parsing is done with `tomlkit`; documents are unwrapped into plain `dict`
structures before they reach the config model.

Resolution order (later layers win):
    1. built-in defaults,
    2. the ``[mvncheck]`` table of the config file (``--config`` or
       ``mvncheck.toml`` in the working directory),
    3. explicit overrides (CLI options).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mvncheck.config.keys import Toml
from mvncheck.config.logging import get_logger
from mvncheck.config.model import MutableConfig
from mvncheck.constants import DEFAULT_CONFIG_FILE_NAME
from mvncheck.core.errors import ConfigError

if TYPE_CHECKING:
    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.config.model import Config

logger: MvnCheckLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse the TOML file at ``path``.

    Args:
        path (Path): The TOML file to read.

    Returns:
        dict[str, Any]: The parsed document as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def find_config_file(cwd: Path | None = None) -> Path | None:
    """Return ``mvncheck.toml`` in ``cwd`` (default: the working directory) if it exists."""
    candidate: Path = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


def load_config(
    config_path: Path | None = None,
    *,
    cwd: Path | None = None,
    overrides: dict[str, str | None] | None = None,
) -> Config:
    """Resolve the effective configuration.

    Args:
        config_path (Path | None): Explicit config file. When None, ``mvncheck.toml``
            is looked up in ``cwd``; a missing file is not an error.
        cwd (Path | None): Directory used for the implicit lookup.
        overrides (dict[str, str | None] | None): Keyword overrides passed to
            `MutableConfig.apply_overrides`.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If the config file is unreadable, malformed, or its
            ``[mvncheck]`` entry is not a table.
    """
    builder: MutableConfig = MutableConfig.from_defaults()

    path: Path | None = config_path or find_config_file(cwd)
    if path is not None:
        logger.info("Loading configuration from %s", path)
        document: dict[str, Any] = load_toml_dict(path)
        table: Any = document.get(Toml.SECTION_MVNCHECK, {})
        if not isinstance(table, dict):
            raise ConfigError(f"{path}: [{Toml.SECTION_MVNCHECK}] must be a table")
        builder.merge_table(table, source=str(path))
    else:
        logger.debug("No configuration file found; using defaults")

    if overrides:
        builder.apply_overrides(**overrides)
    return builder.freeze()


def to_toml(config: Config) -> str:
    """Render ``config`` as a ``mvncheck.toml`` document."""
    document: tomlkit.TOMLDocument = tomlkit.document()
    table = tomlkit.table()
    for key, value in config.to_dict().items():
        if isinstance(value, str) and "\n" in value:
            table.add(key, tomlkit.string(value, multiline=True))
        else:
            table.add(key, value)
    document.add(Toml.SECTION_MVNCHECK, table)
    return tomlkit.dumps(document)
