"""
Core functionality exports for upgradepath.

    from upgradepath.core import get_patch_update, get_minor_update
"""

from __future__ import annotations

from upgradepath.core.parser import parse_version
from upgradepath.core.predicates import (
    DifferentMajorMinor,
    Expired,
    FilterChain,
    LowerVersion,
    NonConsecutiveMinor,
    Preview,
    SameVersion,
    VersionPredicate,
)
from upgradepath.core.qualifier import (
    get_latest_qualifying_version,
    get_latest_version,
)
from upgradepath.core.resolver import (
    get_latest_qualifying_machine_image,
    get_minor_update,
    get_patch_update,
    machine_image_version_exists,
)
from upgradepath.core.catalog import load_catalog, parse_catalog

__all__ = [
    "parse_version",
    "VersionPredicate",
    "FilterChain",
    "DifferentMajorMinor",
    "NonConsecutiveMinor",
    "SameVersion",
    "LowerVersion",
    "Expired",
    "Preview",
    "get_latest_version",
    "get_latest_qualifying_version",
    "get_patch_update",
    "get_minor_update",
    "get_latest_qualifying_machine_image",
    "machine_image_version_exists",
    "load_catalog",
    "parse_catalog",
]
