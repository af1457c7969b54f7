# topmark:header:start
#
#   project      : MvnCheck
#   file         : extractor.py
#   file_relpath : src/mvncheck/diagnostic/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extract positioned annotations from captured build output.

The extractor scans the log line by line and tries every registered
`LineMatcher` on every line, keeping all matches. Lines that match nothing are
ordinary build chatter and are skipped.

Behavior:
    - ANSI color sequences are removed before matching.
    - Indented lines directly following a matched line (javac prints
      ``symbol:`` and ``location:`` this way, bare in the compiler output and
      as ``[ERROR]   symbol: ...`` in Maven's summary) are appended to the
      message of the annotation(s) produced by that line.
    - Maven repeats compiler errors in its failure summary; an annotation equal
      to one already produced is reported once, at its first occurrence.
    - Paths are returned as printed. Making them relative to the workspace is
      the caller's concern (see `Annotation.relative_to`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from mvncheck.config.logging import get_logger
from mvncheck.diagnostic.matchers import DEFAULT_MATCHERS
from mvncheck.diagnostic.model import Annotation

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.diagnostic.matchers import LineMatch, LineMatcher

logger: MvnCheckLogger = get_logger(__name__)

_ANSI_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
# Indented text, either bare or behind a level token followed by two or more spaces
_CONTINUATION_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?:\s+|\[[A-Za-z]+\]\s{2,})(?P<text>[^\s\[].*)$"
)


@dataclass
class _Pending:
    """A matched line waiting for possible continuation lines."""

    match: LineMatch
    extra: list[str] = field(default_factory=lambda: [])

    def to_annotation(self) -> Annotation:
        message: str = "\n".join([self.match.message, *self.extra])
        return Annotation(
            severity=self.match.severity,
            path=self.match.path,
            line=self.match.line,
            column=self.match.column,
            title=self.match.title,
            message=message,
        )


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_RE.sub("", text)


def iter_annotations(
    log: str,
    matchers: Sequence[LineMatcher] = DEFAULT_MATCHERS,
) -> Iterator[Annotation]:
    """Yield annotations found in ``log`` in order of first appearance.

    Args:
        log (str): The complete captured output of the build.
        matchers (Sequence[LineMatcher]): Matchers to try on every line, in order.

    Yields:
        Annotation: Each distinct finding, once.
    """
    seen: set[Annotation] = set()
    pending: list[_Pending] = []

    def _flush() -> Iterator[Annotation]:
        for p in pending:
            annotation: Annotation = p.to_annotation()
            if annotation in seen:
                logger.trace("Skipping repeated annotation: %s:%s", annotation.path, annotation.line)
                continue
            seen.add(annotation)
            yield annotation

    for raw_line in log.splitlines():
        line: str = strip_ansi(raw_line).rstrip()
        continuation: re.Match[str] | None = _CONTINUATION_RE.match(line) if pending else None
        if continuation is not None:
            for p in pending:
                p.extra.append(continuation.group("text").strip())
            continue

        yield from _flush()
        pending = []
        for matcher in matchers:
            found: LineMatch | None = matcher.match(line)
            if found is not None:
                logger.trace("Matcher %s matched: %r", matcher.name, line)
                pending.append(_Pending(match=found))

    yield from _flush()


def extract_annotations(
    log: str,
    matchers: Sequence[LineMatcher] = DEFAULT_MATCHERS,
) -> list[Annotation]:
    """Return all annotations found in ``log`` as a list.

    See `iter_annotations` for the matching rules.
    """
    annotations: list[Annotation] = list(iter_annotations(log, matchers))
    logger.debug("Extracted %d annotation(s) from %d characters of log", len(annotations), len(log))
    return annotations
