"""Version catalog loading for upgradepath.

Reads a :class:`VersionCatalog` from a TOML file::

    [kubernetes]
    versions = [
      { version = "1.12.3" },
      { version = "1.12.4", classification = "preview" },
      { version = "1.11.9", expiration_date = 2020-01-01T00:00:00Z },
    ]

    [[machine_images]]
    name = "gardenlinux"
    versions = [{ version = "27.1.0" }]

The loader validates structure and types only. Version strings are kept
as written; malformed ones surface from the resolver as
:class:`MalformedVersionError` when they are evaluated.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from upgradepath.exceptions import CatalogError, FileOperationError
from upgradepath.models import (
    Classification,
    ExpirableVersion,
    MachineImage,
    VersionCatalog,
)
from upgradepath.utils.filesystem import read_toml
from upgradepath.utils.logger import get_logger

logger = get_logger("core.catalog")

_VERSION_KEYS = {"version", "classification", "expiration_date"}
_IMAGE_KEYS = {"name", "versions"}
_TOP_LEVEL_KEYS = {"kubernetes", "machine_images"}


def load_catalog(path: Union[str, Path]) -> VersionCatalog:
    """Load and validate a catalog file.

    Args:
        path: Path to the TOML catalog.

    Returns:
        The parsed catalog, with ``source_path`` set.

    Raises:
        CatalogError: The file cannot be read, is not valid TOML, or does
            not follow the catalog layout.
    """
    path = Path(path)
    try:
        raw = read_toml(path)
    except FileOperationError as exc:
        raise CatalogError(exc.message, catalog_path=str(path)) from exc

    catalog = parse_catalog(raw, catalog_path=str(path))
    catalog = VersionCatalog(
        kubernetes=catalog.kubernetes,
        machine_images=catalog.machine_images,
        source_path=path.resolve(),
    )

    logger.info(
        "Loaded catalog %s: %d Kubernetes version(s), %d machine image(s)",
        path,
        len(catalog.kubernetes),
        len(catalog.machine_images),
    )
    return catalog


def parse_catalog(
    raw: Dict[str, Any],
    *,
    catalog_path: Optional[str] = None,
) -> VersionCatalog:
    """Build a :class:`VersionCatalog` from a decoded TOML document.

    Raises:
        CatalogError: Unknown keys or wrongly typed values.
    """
    unknown = set(raw) - _TOP_LEVEL_KEYS
    if unknown:
        raise CatalogError(
            f"Unknown catalog keys: {', '.join(sorted(unknown))}",
            catalog_path=catalog_path,
        )

    kubernetes: Tuple[ExpirableVersion, ...] = ()
    if "kubernetes" in raw:
        section = raw["kubernetes"]
        if not isinstance(section, dict):
            raise CatalogError(
                "kubernetes must be a table",
                catalog_path=catalog_path,
                entry="kubernetes",
            )
        extra = set(section) - {"versions"}
        if extra:
            raise CatalogError(
                f"Unknown keys in kubernetes: {', '.join(sorted(extra))}",
                catalog_path=catalog_path,
                entry="kubernetes",
            )
        kubernetes = _parse_versions(
            section.get("versions", []),
            where="kubernetes.versions",
            catalog_path=catalog_path,
        )

    images = _parse_machine_images(
        raw.get("machine_images", []), catalog_path=catalog_path
    )

    return VersionCatalog(kubernetes=kubernetes, machine_images=images)


def _parse_machine_images(
    value: Any,
    *,
    catalog_path: Optional[str],
) -> Tuple[MachineImage, ...]:
    if not isinstance(value, list):
        raise CatalogError(
            "machine_images must be an array of tables",
            catalog_path=catalog_path,
            entry="machine_images",
        )

    images: List[MachineImage] = []
    for index, item in enumerate(value):
        where = f"machine_images[{index}]"
        if not isinstance(item, dict):
            raise CatalogError(
                "machine image must be a table",
                catalog_path=catalog_path,
                entry=where,
            )
        unknown = set(item) - _IMAGE_KEYS
        if unknown:
            raise CatalogError(
                f"Unknown machine image keys: {', '.join(sorted(unknown))}",
                catalog_path=catalog_path,
                entry=where,
            )
        name = item.get("name")
        if not isinstance(name, str) or not name:
            raise CatalogError(
                "machine image name must be a non-empty string",
                catalog_path=catalog_path,
                entry=where,
            )
        versions = _parse_versions(
            item.get("versions", []),
            where=f"{where}.versions",
            catalog_path=catalog_path,
        )
        images.append(MachineImage(name=name, versions=versions))

    return tuple(images)


def _parse_versions(
    value: Any,
    *,
    where: str,
    catalog_path: Optional[str],
) -> Tuple[ExpirableVersion, ...]:
    if not isinstance(value, list):
        raise CatalogError(
            f"{where} must be an array",
            catalog_path=catalog_path,
            entry=where,
        )
    return tuple(
        _parse_version_entry(item, where=f"{where}[{index}]", catalog_path=catalog_path)
        for index, item in enumerate(value)
    )


def _parse_version_entry(
    item: Any,
    *,
    where: str,
    catalog_path: Optional[str],
) -> ExpirableVersion:
    # A bare string is shorthand for { version = "..." }
    if isinstance(item, str):
        return ExpirableVersion(version=item)

    if not isinstance(item, dict):
        raise CatalogError(
            "version entry must be a string or a table",
            catalog_path=catalog_path,
            entry=where,
        )

    unknown = set(item) - _VERSION_KEYS
    if unknown:
        raise CatalogError(
            f"Unknown version keys: {', '.join(sorted(unknown))}",
            catalog_path=catalog_path,
            entry=where,
        )

    version = item.get("version")
    if not isinstance(version, str):
        raise CatalogError(
            "version must be a string",
            catalog_path=catalog_path,
            entry=where,
        )

    classification: Optional[Classification] = None
    if "classification" in item:
        raw_classification = item["classification"]
        try:
            classification = Classification(raw_classification)
        except ValueError as exc:
            allowed = ", ".join(c.value for c in Classification)
            raise CatalogError(
                f"classification must be one of {allowed}, got {raw_classification!r}",
                catalog_path=catalog_path,
                entry=where,
            ) from exc

    expiration_date: Optional[datetime] = None
    if "expiration_date" in item:
        expiration_date = _as_datetime(
            item["expiration_date"], where=where, catalog_path=catalog_path
        )

    return ExpirableVersion(
        version=version,
        classification=classification,
        expiration_date=expiration_date,
    )


def _as_datetime(
    value: Any,
    *,
    where: str,
    catalog_path: Optional[str],
) -> datetime:
    """Accept TOML datetimes, dates (midnight UTC) and ISO 8601 strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        # fromisoformat only learned the "Z" suffix in Python 3.11
        text = value[:-1] + "+00:00" if value[-1:] in ("Z", "z") else value
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise CatalogError(
                f"expiration_date is not an ISO 8601 datetime: {value!r}",
                catalog_path=catalog_path,
                entry=where,
            ) from exc
    raise CatalogError(
        f"expiration_date must be a datetime, got {type(value).__name__}",
        catalog_path=catalog_path,
        entry=where,
    )
