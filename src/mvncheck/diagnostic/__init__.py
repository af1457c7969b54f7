# topmark:header:start
#
#   project      : MvnCheck
#   file         : __init__.py
#   file_relpath : src/mvncheck/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build log annotations.

This package turns raw Maven output into positioned `Annotation` records.

Design:
    - `Annotation` is immutable; one instance per distinct finding.
    - `LineMatcher` instances form an ordered registry (`DEFAULT_MATCHERS`),
      one per supported log format.
    - `extract_annotations` / `iter_annotations` run every matcher over every
      line of a captured log.
"""

from __future__ import annotations

from mvncheck.diagnostic.extractor import extract_annotations, iter_annotations, strip_ansi
from mvncheck.diagnostic.matchers import DEFAULT_MATCHERS, LineMatch, LineMatcher
from mvncheck.diagnostic.model import (
    Annotation,
    AnnotationStats,
    Severity,
    compute_annotation_stats,
    severity_for_level,
)

__all__ = [
    "DEFAULT_MATCHERS",
    "Annotation",
    "AnnotationStats",
    "LineMatch",
    "LineMatcher",
    "Severity",
    "compute_annotation_stats",
    "extract_annotations",
    "iter_annotations",
    "severity_for_level",
    "strip_ansi",
]
