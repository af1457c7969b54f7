# topmark:header:start
#
#   project      : MvnCheck
#   file         : test_run.py
#   file_relpath : tests/cli/test_run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `mvncheck run`.

These tests stay on paths that never spawn a process: a checkout without
``pom.xml`` and the error exits raised before the pipeline starts.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from mvncheck.core.exit_codes import ExitCode

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_run_without_pom_succeeds_quietly(tmp_path: Path) -> None:
    """Nothing to build: exit 0 and no check run."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "run"])

    assert_SUCCESS(result)
    assert "Outcome: abort" in result.output
    assert "No check run created." in result.output
    assert "Ignoring push to non-Maven project" not in result.output


@mark_cli
def test_run_verbose_shows_hidden_reason(tmp_path: Path) -> None:
    """With -v the hidden abort reason is printed."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "-v", "run"])

    assert_SUCCESS(result)
    assert "Ignoring push to non-Maven project" in result.output


@mark_cli
def test_run_json_without_pom(tmp_path: Path) -> None:
    """JSON output carries the outcome and a null check."""
    project: Path = tmp_path / "lib"
    project.mkdir()

    result: Result = run_cli_in(tmp_path, ["run", "lib", "--format", "json"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload == {
        "outcome": {
            "kind": "abort",
            "reason": "Ignoring push to non-Maven project",
            "visible": False,
        },
        "check": None,
    }


@mark_cli
def test_run_missing_project_dir(tmp_path: Path) -> None:
    """A missing PROJECT_DIR exits with FILE_NOT_FOUND."""
    result: Result = run_cli_in(tmp_path, ["run", "does-not-exist"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Project directory not found" in result.output


@mark_cli
def test_run_incomplete_event(tmp_path: Path) -> None:
    """An event without repository data exits with DATA_ERROR."""
    (tmp_path / "event.json").write_text(json.dumps({"Push": []}), encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["run", "--event", "event.json"])

    assert result.exit_code == ExitCode.DATA_ERROR, result.output


@mark_cli
def test_run_unreadable_event(tmp_path: Path) -> None:
    """A missing event file exits with DATA_ERROR."""
    result: Result = run_cli_in(tmp_path, ["run", "--event", "missing.json"])

    assert result.exit_code == ExitCode.DATA_ERROR, result.output


@mark_cli
def test_run_invalid_config(tmp_path: Path) -> None:
    """Malformed TOML in the implicit config file exits with CONFIG_ERROR."""
    (tmp_path / "mvncheck.toml").write_text("[mvncheck\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["run"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_run_config_warnings_are_reported(tmp_path: Path) -> None:
    """Unknown config keys are reported but do not stop the run."""
    (tmp_path / "mvncheck.toml").write_text(
        '[mvncheck]\nname = "ci"\ncolour = "blue"\n', encoding="utf-8"
    )

    result: Result = run_cli_in(tmp_path, ["--no-color", "run"])

    assert_SUCCESS(result)
    assert "unknown key 'colour'" in result.output


@mark_cli
def test_run_missing_settings_file(tmp_path: Path) -> None:
    """An unreadable --settings-file exits with IO_ERROR."""
    result: Result = run_cli_in(tmp_path, ["run", "--settings-file", "nope.xml"])

    assert result.exit_code == ExitCode.IO_ERROR, result.output
