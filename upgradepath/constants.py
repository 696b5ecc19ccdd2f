"""
Centralized constants for upgradepath.

This module defines immutable configuration values used across upgradepath,
including file names, catalog limits, and logging formats. All values are
intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Catalog files
# ---------------------------------------------------------------------------

#: Catalog file looked up in the current directory when none is configured.
DEFAULT_CATALOG_FILE: Final[str] = "catalog.toml"

#: Maximum allowed catalog file size (in bytes).
MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Configuration files
# ---------------------------------------------------------------------------

#: Dedicated configuration file; settings live under ``[upgradepath]``.
CONFIG_FILE_NAME: Final[str] = "upgradepath.toml"

#: Project file; settings live under ``[tool.upgradepath]``.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

#: Environment variable holding an explicit configuration path.
CONFIG_ENV_VAR: Final[str] = "UPGRADEPATH_CONFIG"

#: Output formats understood by the CLI commands.
OUTPUT_FORMATS: Final[Sequence[str]] = ("table", "json")

#: Output format used when neither config nor CLI set one.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
