# topmark:header:start
#
#   project      : MvnCheck
#   file         : constants.py
#   file_relpath : src/mvncheck/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MvnCheck Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

MVNCHECK_VERSION: str = get_version("mvncheck")

SKILL_NAME: Final[str] = "mvncheck"

# Configuration file looked up in the working directory when --config is not given
DEFAULT_CONFIG_FILE_NAME: Final[str] = "mvncheck.toml"

DEFAULT_CONFIG_NAME: Final[str] = "default"
DEFAULT_MVN_ARGS: Final[str] = "clean install"
DEFAULT_JAVA_VERSION: Final[str] = "11.0.9.hs-adpt"
DEFAULT_SDKMAN_DIR: Final[str] = "/opt/.sdkman"

# Project layout
POM_FILE_NAME: Final[str] = "pom.xml"
MVN_WRAPPER_NAME: Final[str] = "mvnw"
MVN_WRAPPER_COMMAND: Final[str] = "./mvnw"
MVN_COMMAND: Final[str] = "mvn"
SETTINGS_RELPATH: Final[str] = ".m2/settings.xml"
LOCAL_REPOSITORY_RELPATH: Final[str] = ".m2/repository"

# Toolchain layout below the SDKMAN root
SDKMAN_INIT_RELPATH: Final[str] = "bin/sdkman-init.sh"
JAVA_HOME_RELPATH: Final[str] = "candidates/java/current"
JAVA_BIN_RELPATH: Final[str] = "candidates/java/current/bin"
MAVEN_BIN_RELPATH: Final[str] = "candidates/maven/current/bin"

# Check run
CHECK_TITLE: Final[str] = "mvn"
CHECK_INITIAL_BODY: Final[str] = "Running Maven build"
BODY_SEPARATOR: Final[str] = "\n\n---\n\n"

# Options always passed to Maven (unless the user already set an equivalent)
BATCH_MODE_FLAG: Final[str] = "-B"
QUIET_TRANSFER_FLAG: Final[str] = (
    "-Dorg.slf4j.simpleLogger.log.org.apache.maven.cli.transfer.Slf4jMavenTransferListener=warn"
)
REPO_LOCAL_PROPERTY: Final[str] = "-Dmaven.repo.local"
