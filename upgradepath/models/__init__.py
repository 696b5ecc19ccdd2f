"""
Unified data model exports for upgradepath.

Example:
    >>> from upgradepath.models import ExpirableVersion, VersionCatalog
"""

from __future__ import annotations

from upgradepath.models.version import (
    Classification,
    ExpirableVersion,
    QualificationResult,
)
from upgradepath.models.catalog import (
    MachineImage,
    ShootMachineImage,
    VersionCatalog,
)

__all__ = [
    "Classification",
    "ExpirableVersion",
    "QualificationResult",
    "MachineImage",
    "ShootMachineImage",
    "VersionCatalog",
]
