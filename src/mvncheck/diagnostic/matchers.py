# topmark:header:start
#
#   project      : MvnCheck
#   file         : matchers.py
#   file_relpath : src/mvncheck/diagnostic/matchers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line matchers for known build tool log formats.

Each `LineMatcher` pairs a compiled pattern with its capture semantics. The
patterns share a common shape: a bracketed level token (``[ERROR]``) followed
by a file location and the message. Named groups:

    level    (required) bracketed level token
    path     (required) file path
    line     (optional) 1-based line number
    column   (optional) 1-based column
    message  (required) trailing text

The built-in matchers are written so that a given line matches at most one of
them; the extractor still tries every matcher on every line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from mvncheck.diagnostic.model import Severity, severity_for_level

_LEVEL: Final[str] = r"^\[(?P<level>[A-Za-z]+)\]\s+"


@dataclass(frozen=True)
class LineMatch:
    """Raw capture of a single matched line, before continuation lines are merged."""

    severity: Severity
    path: str
    line: int | None
    column: int | None
    title: str
    message: str


@dataclass(frozen=True)
class LineMatcher:
    """A named log line pattern.

    Attributes:
        name (str): Stable identifier of the matcher.
        title (str): Title given to every annotation this matcher produces.
        pattern (re.Pattern[str]): Compiled pattern exposing the named groups
            described in the module docstring.
    """

    name: str
    title: str
    pattern: re.Pattern[str]

    def match(self, line: str) -> LineMatch | None:
        """Return the capture for ``line`` or None when the line has another shape."""
        m: re.Match[str] | None = self.pattern.match(line)
        if m is None:
            return None
        groups: dict[str, str | None] = m.groupdict()
        line_no: str | None = groups.get("line")
        column: str | None = groups.get("column")
        return LineMatch(
            severity=severity_for_level(m.group("level")),
            path=m.group("path"),
            line=int(line_no) if line_no else None,
            column=int(column) if column else None,
            title=self.title,
            message=m.group("message").strip(),
        )


# [ERROR] /home/user/proj/src/main/java/Foo.java:[10,3] cannot find symbol
MAVEN_COMPILER: Final[LineMatcher] = LineMatcher(
    name="maven-compiler",
    title="maven-compiler",
    pattern=re.compile(
        _LEVEL + r"(?P<path>[^\s\[][^\[]*?):\[(?P<line>\d+),(?P<column>\d+)\]\s*(?P<message>.*)$"
    ),
)

# [WARNING] /home/user/proj/src/main/java/Foo.java:[10] unchecked call
MAVEN_COMPILER_LINE: Final[LineMatcher] = LineMatcher(
    name="maven-compiler-line",
    title="maven-compiler",
    pattern=re.compile(_LEVEL + r"(?P<path>[^\s\[][^\[]*?):\[(?P<line>\d+)\]\s*(?P<message>.*)$"),
)

# [ERROR] file:///home/user/proj/src/main/kotlin/Foo.kt: (12, 4): Unresolved reference: x
KOTLIN: Final[LineMatcher] = LineMatcher(
    name="kotlin",
    title="kotlin",
    pattern=re.compile(
        _LEVEL
        + r"(?:file://)?(?P<path>[^\s:]+\.kts?):\s*\((?P<line>\d+),\s*(?P<column>\d+)\):\s*"
        + r"(?P<message>.*)$"
    ),
)

# [WARN] /home/user/proj/src/main/java/Foo.java:12:4: Missing a Javadoc comment. [JavadocMethod]
CHECKSTYLE: Final[LineMatcher] = LineMatcher(
    name="checkstyle",
    title="checkstyle",
    pattern=re.compile(
        _LEVEL
        + r"(?P<path>[^\s:]+\.\w+):(?P<line>\d+)(?::(?P<column>\d+))?:\s+(?P<message>.*)$"
    ),
)

DEFAULT_MATCHERS: Final[tuple[LineMatcher, ...]] = (
    MAVEN_COMPILER,
    MAVEN_COMPILER_LINE,
    KOTLIN,
    CHECKSTYLE,
)
