# topmark:header:start
#
#   project      : MvnCheck
#   file         : __init__.py
#   file_relpath : src/mvncheck/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck package.

MvnCheck runs a Maven build for a pushed commit, turns the build log into
positioned annotations and reports the result as a check run. It exposes a
small step pipeline, a log annotation extractor and a Click CLI.
"""

from __future__ import annotations
