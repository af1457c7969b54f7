# topmark:header:start
#
#   project      : MvnCheck
#   file         : keys.py
#   file_relpath : src/mvncheck/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for MvnCheck configuration.

These strings are the external configuration API as it appears in
``mvncheck.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by MvnCheck configuration."""

    # [mvncheck]
    SECTION_MVNCHECK: Final[str] = "mvncheck"

    KEY_NAME: Final[str] = "name"
    KEY_MVN: Final[str] = "mvn"
    KEY_VERSION: Final[str] = "version"
    KEY_SETTINGS: Final[str] = "settings"
    KEY_COMMAND: Final[str] = "command"
    KEY_SDKMAN_DIR: Final[str] = "sdkman_dir"

    ALL_KEYS: Final[tuple[str, ...]] = (
        KEY_NAME,
        KEY_MVN,
        KEY_VERSION,
        KEY_SETTINGS,
        KEY_COMMAND,
        KEY_SDKMAN_DIR,
    )
