"""Upgrade path resolution for upgradepath.

Answers two questions about a running version against a catalog:

* **Patch update**: the newest qualifying version of the *same* minor line
  that is strictly newer than the running one.
* **Minor update**: the newest qualifying version of the *next* minor line.
  If every non-preview version of that line has expired, the newest expired
  one is returned instead, so a cluster is never stranded on an old minor
  line just because its successor has already reached end of life.

Both return ``(found, version)``; ``(False, "")`` means there is nothing to
upgrade to. The only error is :class:`MalformedVersionError`, raised for the
running version or any catalog entry.

The module also holds the machine image helpers, which apply the same
qualification rules to the versions of a named image.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Tuple, Union

from upgradepath.core.parser import parse_version
from upgradepath.core.predicates import DifferentMajorMinor, NonConsecutiveMinor
from upgradepath.core.qualifier import get_latest_version, utc_now
from upgradepath.models import (
    ExpirableVersion,
    MachineImage,
    ShootMachineImage,
    VersionCatalog,
)
from upgradepath.utils.logger import get_logger

logger = get_logger("core.resolver")

CatalogLike = Union[VersionCatalog, Sequence[ExpirableVersion]]


def _kubernetes_versions(catalog: CatalogLike) -> Sequence[ExpirableVersion]:
    if isinstance(catalog, VersionCatalog):
        return catalog.kubernetes
    return catalog


def get_patch_update(
    catalog: CatalogLike,
    current_version: str,
    *,
    now: Optional[datetime] = None,
) -> Tuple[bool, str]:
    """Find the latest patch update for ``current_version``.

    Args:
        catalog: Available versions, or a catalog whose Kubernetes versions
            are used.
        current_version: The running version.
        now: Clock reading for expiration checks.

    Returns:
        ``(True, version)`` for an update, ``(False, "")`` when the running
        version is already the latest qualifying patch of its minor line.

    Raises:
        MalformedVersionError: ``current_version`` or a catalog entry is not
            valid SemVer.

    Example::

        >>> get_patch_update([ExpirableVersion("1.12.3")], "1.12.2")
        (True, '1.12.3')
    """
    current = parse_version(current_version)
    result = get_latest_version(
        _kubernetes_versions(catalog),
        (DifferentMajorMinor(current),),
        now=now,
    )

    logger.debug(
        "Patch update for %s: %s", current_version, result.version or "<none>"
    )
    return result.found, result.version


def get_minor_update(
    catalog: CatalogLike,
    current_version: str,
    *,
    now: Optional[datetime] = None,
) -> Tuple[bool, str]:
    """Find the latest version of the minor line following ``current_version``.

    Non-expired versions of the next minor line are preferred. When that
    line only has expired (non-preview) versions, the latest of those is
    returned.

    Args:
        catalog: Available versions, or a catalog whose Kubernetes versions
            are used.
        current_version: The running version.
        now: Clock reading for expiration checks.

    Returns:
        ``(True, version)`` for an update, ``(False, "")`` when the catalog
        holds no qualifying version of the next minor line.

    Raises:
        MalformedVersionError: ``current_version`` or a catalog entry is not
            valid SemVer.
    """
    current = parse_version(current_version)
    versions = _kubernetes_versions(catalog)
    chain = (NonConsecutiveMinor(current),)

    if now is None:
        now = utc_now()

    result = get_latest_version(versions, chain, now=now)
    if not result.found:
        result = get_latest_version(versions, chain, now=now, skip_expired=False)
        if result.found:
            logger.info(
                "Only expired versions in next minor line of %s; using %s",
                current_version,
                result.version,
            )

    logger.debug(
        "Minor update for %s: %s", current_version, result.version or "<none>"
    )
    return result.found, result.version


def get_latest_qualifying_machine_image(
    image: MachineImage,
    *,
    now: Optional[datetime] = None,
) -> Tuple[bool, Optional[ShootMachineImage]]:
    """Return the latest qualifying version of ``image``.

    Returns:
        ``(True, ShootMachineImage(name, version))``, or ``(False, None)``
        when every version is preview or expired.

    Raises:
        MalformedVersionError: An image version is not valid SemVer.
    """
    result = get_latest_version(image.versions, now=now)
    if not result.found:
        return False, None
    return True, ShootMachineImage(name=image.name, version=result.version)


def machine_image_version_exists(
    image: MachineImage,
    selection: ShootMachineImage,
) -> Tuple[bool, int]:
    """Check whether ``selection`` names a version offered by ``image``.

    Versions are compared as plain strings.

    Returns:
        ``(True, index)`` of the first matching catalog entry, otherwise
        ``(False, 0)``.
    """
    if selection.name != image.name:
        return False, 0

    for index, offered in enumerate(image.versions):
        if offered.version == selection.version:
            return True, index

    return False, 0
