"""
upgradepath: version qualification and upgrade path resolution.

Given a catalog of offered versions, each optionally classified as preview
and optionally carrying an expiration date, upgradepath decides which
patch or minor update a running version should move to.

    >>> from upgradepath import ExpirableVersion, get_patch_update
    >>> get_patch_update([ExpirableVersion("1.12.3")], "1.12.2")
    (True, '1.12.3')
"""

from __future__ import annotations

from upgradepath.__version__ import __version__
from upgradepath.exceptions import (
    CatalogError,
    ConfigError,
    MalformedVersionError,
    UpgradePathError,
)
from upgradepath.models import (
    Classification,
    ExpirableVersion,
    MachineImage,
    QualificationResult,
    ShootMachineImage,
    VersionCatalog,
)
from upgradepath.core import (
    get_latest_qualifying_machine_image,
    get_latest_qualifying_version,
    get_minor_update,
    get_patch_update,
    load_catalog,
    machine_image_version_exists,
    parse_version,
)

__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    # Errors
    "UpgradePathError",
    "MalformedVersionError",
    "CatalogError",
    "ConfigError",
    # Models
    "Classification",
    "ExpirableVersion",
    "QualificationResult",
    "MachineImage",
    "ShootMachineImage",
    "VersionCatalog",
    # Resolution
    "parse_version",
    "get_latest_qualifying_version",
    "get_patch_update",
    "get_minor_update",
    "get_latest_qualifying_machine_image",
    "machine_image_version_exists",
    "load_catalog",
]
