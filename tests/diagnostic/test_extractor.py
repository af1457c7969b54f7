# topmark:header:start
#
#   project      : MvnCheck
#   file         : test_extractor.py
#   file_relpath : tests/diagnostic/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `mvncheck.diagnostic.extractor`."""

from __future__ import annotations

from mvncheck.diagnostic.extractor import extract_annotations, iter_annotations, strip_ansi
from mvncheck.diagnostic.matchers import CHECKSTYLE
from mvncheck.diagnostic.model import Annotation, Severity

from tests.conftest import parametrize

COMPILE_FAILURE_LOG = """\
[INFO] Scanning for projects...
[INFO] --- maven-compiler-plugin:3.8.1:compile (default-compile) @ app ---
[INFO] Compiling 3 source files to /home/user/proj/target/classes
[ERROR] COMPILATION ERROR :
[INFO] -------------------------------------------------------------
[ERROR] /home/user/proj/src/main/java/Foo.java:[10,3] cannot find symbol
  symbol:   class Bar
  location: class Foo
[INFO] 1 error
[INFO] -------------------------------------------------------------
[INFO] BUILD FAILURE
[ERROR] Failed to execute goal org.apache.maven.plugins:maven-compiler-plugin:3.8.1:compile \
(default-compile) on project app: Compilation failure
[ERROR] /home/user/proj/src/main/java/Foo.java:[10,3] cannot find symbol
[ERROR]   symbol:   class Bar
[ERROR]   location: class Foo
[ERROR] -> [Help 1]
"""


def test_single_compiler_error() -> None:
    """The canonical compiler error line yields exactly one failure record."""
    annotations: list[Annotation] = extract_annotations(
        "[ERROR] /home/user/proj/Foo.java:[10,3] cannot find symbol"
    )

    assert len(annotations) == 1
    ann: Annotation = annotations[0]
    assert ann.severity == Severity.FAILURE
    assert ann.path.endswith("Foo.java")
    assert ann.line == 10
    assert ann.column == 3
    assert ann.title == "maven-compiler"
    assert ann.message == "cannot find symbol"


@parametrize(
    "log",
    [
        "",
        "\n\n",
        "[INFO] BUILD SUCCESS\n[INFO] Total time:  1.234 s\n",
        "Downloading from central: https://repo.maven.apache.org/maven2/x.pom\n",
        "[ERROR] Failed to execute goal on project app: Compilation failure\n",
    ],
)
def test_no_matching_lines_yield_nothing(log: str) -> None:
    """Build chatter produces no annotations."""
    assert extract_annotations(log) == []


def test_order_follows_first_occurrence() -> None:
    """Records come out in line order, regardless of severity."""
    log = "\n".join(
        [
            "[WARNING] /p/B.java:[3] unchecked call",
            "[INFO] something",
            "[ERROR] /p/A.java:[1,2] boom",
            "[WARN] /p/C.java:7:1: Missing a Javadoc comment.",
        ]
    )
    annotations: list[Annotation] = extract_annotations(log)

    assert [a.path for a in annotations] == ["/p/B.java", "/p/A.java", "/p/C.java"]
    assert [a.severity for a in annotations] == [
        Severity.WARNING,
        Severity.FAILURE,
        Severity.WARNING,
    ]


def test_continuation_lines_and_summary_repeat_are_merged() -> None:
    """javac's symbol/location lines join the message; Maven's summary repeat is dropped."""
    annotations: list[Annotation] = extract_annotations(COMPILE_FAILURE_LOG)

    assert len(annotations) == 1
    assert annotations[0].message == "cannot find symbol\nsymbol:   class Bar\nlocation: class Foo"
    assert annotations[0].line == 10


def test_distinct_findings_on_same_file_are_kept() -> None:
    """Only identical records are deduplicated."""
    log = "[ERROR] /p/A.java:[1,2] boom\n[ERROR] /p/A.java:[4,2] boom\n[ERROR] /p/A.java:[1,2] boom\n"
    assert [a.line for a in extract_annotations(log)] == [1, 4]


def test_ansi_sequences_are_ignored() -> None:
    """Colored Maven output is matched after removing escape sequences."""
    log = "\x1b[1;31m[ERROR]\x1b[m /p/A.java:[5,6] \x1b[1mbad\x1b[m"
    annotations: list[Annotation] = extract_annotations(log)
    assert len(annotations) == 1
    assert annotations[0].message == "bad"
    assert strip_ansi("\x1b[32mok\x1b[0m") == "ok"


def test_kotlin_and_checkstyle_formats() -> None:
    """Each supported tool format produces a record with its title."""
    log = "\n".join(
        [
            "[ERROR] file:///p/src/Foo.kt: (12, 4): Unresolved reference: x",
            "[WARN] /p/src/Foo.java:12:4: Missing a Javadoc comment. [JavadocMethod]",
            "[WARNING] /p/src/Bar.java:8: Line is longer than 100 characters.",
        ]
    )
    annotations: list[Annotation] = extract_annotations(log)

    assert [(a.title, a.path, a.line, a.column) for a in annotations] == [
        ("kotlin", "/p/src/Foo.kt", 12, 4),
        ("checkstyle", "/p/src/Foo.java", 12, 4),
        ("checkstyle", "/p/src/Bar.java", 8, None),
    ]
    assert annotations[1].message == "Missing a Javadoc comment. [JavadocMethod]"


def test_unknown_level_maps_to_warning() -> None:
    """Unrecognized level tokens are kept as warnings, never dropped."""
    annotations: list[Annotation] = extract_annotations("[SEVERE] /p/A.java:[1,1] odd")
    assert [a.severity for a in annotations] == [Severity.WARNING]


def test_custom_matcher_registry() -> None:
    """Only the given matchers are applied."""
    log = "[ERROR] /p/A.java:[1,2] boom\n[WARN] /p/C.java:7: style\n"
    annotations: list[Annotation] = list(iter_annotations(log, [CHECKSTYLE]))
    assert [a.path for a in annotations] == ["/p/C.java"]


def test_iter_annotations_is_lazy() -> None:
    """The generator yields the first record before the log is fully scanned."""
    it = iter_annotations("[ERROR] /p/A.java:[1,2] a\n[INFO] x\n[ERROR] /p/B.java:[3,4] b\n")
    first: Annotation = next(it)
    assert first.path == "/p/A.java"
    assert [a.path for a in it] == ["/p/B.java"]
