# topmark:header:start
#
#   project      : MvnCheck
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `mvncheck.diagnostic.model`."""

from __future__ import annotations

from mvncheck.diagnostic.model import (
    Annotation,
    Severity,
    compute_annotation_stats,
    severity_for_level,
)

from tests.conftest import parametrize


def _ann(
    path: str = "/home/user/proj/src/Foo.java",
    severity: Severity = Severity.FAILURE,
) -> Annotation:
    return Annotation(severity, path, 1, 2, "maven-compiler", "msg")


@parametrize(
    "token, expected",
    [
        ("ERROR", Severity.FAILURE),
        ("FATAL", Severity.FAILURE),
        ("WARN", Severity.WARNING),
        ("WARNING", Severity.WARNING),
        ("warning", Severity.WARNING),
        ("INFO", Severity.NOTICE),
        ("NOTICE", Severity.NOTICE),
        ("DEBUG", Severity.NOTICE),
        ("SEVERE", Severity.WARNING),
        ("", Severity.WARNING),
    ],
)
def test_severity_for_level(token: str, expected: Severity) -> None:
    """Level tokens map deterministically; unknown tokens are warnings."""
    assert severity_for_level(token) == expected


@parametrize(
    "prefix, expected",
    [
        ("/home/user/proj", "src/Foo.java"),
        ("/home/user/proj/", "src/Foo.java"),
        ("/home/user/pro", "/home/user/proj/src/Foo.java"),
        ("/elsewhere", "/home/user/proj/src/Foo.java"),
        ("", "/home/user/proj/src/Foo.java"),
    ],
)
def test_relative_to(prefix: str, expected: str) -> None:
    """Only a whole leading directory prefix is stripped."""
    assert _ann().relative_to(prefix) == expected


def test_stats_and_dict() -> None:
    """Counts are per severity; `to_dict` uses the API vocabulary."""
    stats = compute_annotation_stats(
        [_ann(), _ann(severity=Severity.WARNING), _ann(severity=Severity.FAILURE)]
    )
    assert stats.total == 3
    assert stats.to_dict() == {"notice": 0, "warning": 1, "failure": 2}
    assert _ann().to_dict()["severity"] == "failure"
