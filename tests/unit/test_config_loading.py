# topmark:header:start
#
#   project      : MvnCheck
#   file         : test_config_loading.py
#   file_relpath : tests/unit/test_config_loading.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration loading (`mvncheck.config`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from mvncheck.config import Config, MutableConfig, load_config, to_toml
from mvncheck.constants import DEFAULT_JAVA_VERSION, DEFAULT_MVN_ARGS
from mvncheck.core.errors import ConfigError

from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str, name: str = "mvncheck.toml") -> Path:
    path: Path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """No config file: built-in defaults, no warnings."""
    monkeypatch.setenv("SDKMAN_DIR", "/home/build/.sdkman")
    config: Config = load_config(cwd=tmp_path)

    assert config.name == "default"
    assert config.mvn == DEFAULT_MVN_ARGS
    assert config.version == DEFAULT_JAVA_VERSION
    assert config.settings is None
    assert config.command is None
    assert config.sdkman_dir == "/home/build/.sdkman"
    assert config.warnings == ()


def test_implicit_file_is_merged(tmp_path: Path) -> None:
    """``mvncheck.toml`` in the working directory is picked up."""
    _write(
        tmp_path,
        '[mvncheck]\nname = "ci"\nmvn = "verify -Pci"\nversion = "17.0.2-tem"\n',
    )
    config: Config = load_config(cwd=tmp_path)

    assert (config.name, config.mvn, config.version) == ("ci", "verify -Pci", "17.0.2-tem")


def test_overrides_win_over_file(tmp_path: Path) -> None:
    """Explicit overrides replace file values; None leaves them alone."""
    path: Path = _write(tmp_path, '[mvncheck]\nname = "ci"\nmvn = "verify"\n', name="alt.toml")
    config: Config = load_config(path, overrides={"mvn": "package", "name": None})

    assert config.name == "ci"
    assert config.mvn == "package"


@parametrize("value", ["", "   "])
def test_blank_optional_values_mean_unset(tmp_path: Path, value: str) -> None:
    """Blank ``settings``/``command`` are normalized to None; blank ``mvn`` to the default."""
    _write(
        tmp_path,
        f'[mvncheck]\nsettings = "{value}"\ncommand = "{value}"\nmvn = "{value}"\n',
    )
    config: Config = load_config(cwd=tmp_path)

    assert config.settings is None
    assert config.command is None
    assert config.mvn == DEFAULT_MVN_ARGS


def test_unknown_key_is_a_warning(tmp_path: Path) -> None:
    """Unknown keys are collected as warnings and otherwise ignored."""
    _write(tmp_path, '[mvncheck]\nname = "ci"\ngoals = "verify"\n')
    config: Config = load_config(cwd=tmp_path)

    assert config.name == "ci"
    assert len(config.warnings) == 1
    assert "unknown key 'goals'" in config.warnings[0]


def test_non_string_value_is_an_error(tmp_path: Path) -> None:
    """Known keys must hold strings."""
    _write(tmp_path, "[mvncheck]\nversion = 17\n")
    with pytest.raises(ConfigError, match="'version' must be a string, got int"):
        load_config(cwd=tmp_path)


@parametrize(
    "text",
    [
        "[mvncheck\n",
        'mvncheck = "not a table"\n',
    ],
)
def test_malformed_file_is_an_error(tmp_path: Path, text: str) -> None:
    """Invalid TOML or a non-table section raises `ConfigError`."""
    _write(tmp_path, text)
    with pytest.raises(ConfigError):
        load_config(cwd=tmp_path)


def test_explicit_missing_file_is_an_error(tmp_path: Path) -> None:
    """An explicitly named file must exist."""
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path / "absent.toml")


def test_to_toml_reloads(tmp_path: Path) -> None:
    """Rendered TOML is accepted by the loader; multi-line values survive."""
    settings = "<settings>\n  <offline>true</offline>\n</settings>\n"
    config: Config = (
        MutableConfig.from_defaults()
        .apply_overrides(name="ci", settings=settings, sdkman_dir="/opt/sdk")
        .freeze()
    )
    text: str = to_toml(config)

    assert "command" not in tomlkit.parse(text)["mvncheck"]
    reloaded: Config = load_config(_write(tmp_path, text))
    assert reloaded.settings == settings
    assert reloaded.to_dict() == config.to_dict()
