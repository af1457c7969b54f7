# topmark:header:start
#
#   project      : MvnCheck
#   file         : __main__.py
#   file_relpath : src/mvncheck/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running MvnCheck via ``python -m mvncheck``.

Delegates to `mvncheck.cli.main.cli` so there is a single CLI entry point
regardless of how MvnCheck is launched.

Examples:
    Build the project in the current directory::

        python -m mvncheck run .
"""

from __future__ import annotations

from mvncheck.cli.main import cli

if __name__ == "__main__":
    cli()
