# topmark:header:start
#
#   project      : MvnCheck
#   file         : exit_codes.py
#   file_relpath : src/mvncheck/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the MvnCheck CLI.

MvnCheck follows the BSD `sysexits` convention where practical so other
tooling can interpret failures consistently. A failed Maven build is a
*normal* result and maps to ``FAILURE``; an aborted run (no ``pom.xml``)
maps to ``SUCCESS``.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the MvnCheck CLI.

    Attributes:
        SUCCESS: The build passed, or there was nothing to build.
        FAILURE: The build (or one of its setup steps) failed, or the
            extractor found annotations.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed event payload. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
