# topmark:header:start
#
#   project      : MvnCheck
#   file         : __init__.py
#   file_relpath : src/mvncheck/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for MvnCheck."""

from __future__ import annotations

from mvncheck.config.loaders import find_config_file, load_config, load_toml_dict, to_toml
from mvncheck.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
    "find_config_file",
    "load_config",
    "load_toml_dict",
    "to_toml",
]
