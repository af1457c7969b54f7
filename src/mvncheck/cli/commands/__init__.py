# topmark:header:start
#
#   project      : MvnCheck
#   file         : __init__.py
#   file_relpath : src/mvncheck/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck CLI subcommands."""
