"""
upgradepath version information.

Single source of truth for the package version.
"""

from __future__ import annotations

from semver import Version

__version__ = "0.3.0"

VERSION_INFO = Version.parse(__version__)

VERSION_STRING = f"upgradepath {__version__}"
