# topmark:header:start
#
#   project      : MvnCheck
#   file         : test_checks.py
#   file_relpath : tests/unit/test_checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the in-memory check-run boundary (`mvncheck.checks`)."""

from __future__ import annotations

from mvncheck.checks import CheckAnnotation, CheckRun, Conclusion, RecordingCheckFactory
from mvncheck.diagnostic.model import Annotation, Severity
from mvncheck.project import RepoId


def _annotation(line: int | None = 10, column: int | None = 3) -> Annotation:
    return Annotation(
        severity=Severity.FAILURE,
        path="/w/app/src/Foo.java",
        line=line,
        column=column,
        title="maven-compiler",
        message="cannot find symbol",
    )


def test_from_annotation_strips_prefix() -> None:
    """Paths become workspace-relative; line and column carry over."""
    ann: CheckAnnotation = CheckAnnotation.from_annotation(_annotation(), prefix="/w/app")

    assert ann == CheckAnnotation(
        annotation_level="failure",
        path="src/Foo.java",
        start_line=10,
        end_line=10,
        start_offset=3,
        title="maven-compiler",
        message="cannot find symbol",
    )


def test_from_annotation_without_line() -> None:
    """A missing line is reported on line 1."""
    ann: CheckAnnotation = CheckAnnotation.from_annotation(_annotation(line=None, column=None))

    assert (ann.path, ann.start_line, ann.end_line, ann.start_offset) == (
        "/w/app/src/Foo.java",
        1,
        1,
        None,
    )


def test_check_run_records_updates() -> None:
    """Each update is recorded; pending updates keep the previous conclusion."""
    factory = RecordingCheckFactory()
    check: CheckRun = factory.create_check(
        RepoId("acme", "app"), sha="abc1234567", title="mvn", name="mvncheck/default", body="start"
    )
    assert factory.last is check
    assert (check.repo, check.conclusion, check.updates) == ("acme/app", None, [])

    ann: CheckAnnotation = CheckAnnotation.from_annotation(_annotation())
    check.update(conclusion=None, body="one")
    check.update(conclusion=Conclusion.FAILURE, body="one\n\n---\n\ntwo", annotations=[ann])
    check.update(conclusion=None, body="three")

    assert check.body == "three"
    assert check.conclusion == Conclusion.FAILURE
    assert check.annotations == [ann]
    assert [u.conclusion for u in check.updates] == [None, Conclusion.FAILURE, None]

    data = check.to_dict()
    assert data["conclusion"] == "failure"
    assert data["annotations"][0]["path"] == "/w/app/src/Foo.java"
    assert [u["body"] for u in data["updates"]] == ["one", "one\n\n---\n\ntwo", "three"]


def test_factory_without_checks() -> None:
    """`last` is None before anything was created."""
    assert RecordingCheckFactory().last is None
