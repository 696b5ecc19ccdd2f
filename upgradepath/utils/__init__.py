"""
Utility helpers for upgradepath.

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- TOML file reading

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

from upgradepath.utils.filesystem import read_toml
from upgradepath.utils.logger import (
    get_logger,
    level_for_verbosity,
    setup_logging,
)
from upgradepath.utils.console import (
    colorize_update_type,
    get_raw_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    "colorize_update_type",
    # Logging
    "get_logger",
    "setup_logging",
    "level_for_verbosity",
    # Filesystem
    "read_toml",
]
