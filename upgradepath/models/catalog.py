"""
Catalog data models for upgradepath.

A :class:`VersionCatalog` bundles the Kubernetes versions and machine
images offered to clusters. Catalogs are immutable once loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from upgradepath.models.version import ExpirableVersion


@dataclass(frozen=True)
class MachineImage:
    """A named machine image and the versions offered for it."""

    name: str
    versions: Tuple[ExpirableVersion, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "versions", tuple(self.versions))

    def to_json(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "versions": [v.to_json() for v in self.versions],
        }


@dataclass(frozen=True)
class ShootMachineImage:
    """The machine image a cluster selects, by name and optional version."""

    name: str
    version: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.name} {self.version}" if self.version else self.name


@dataclass(frozen=True)
class VersionCatalog:
    """Versions available to clusters.

    Attributes:
        kubernetes: Offered Kubernetes versions, in catalog order.
        machine_images: Offered machine images, in catalog order.
        source_path: File the catalog was loaded from, if any.
    """

    kubernetes: Tuple[ExpirableVersion, ...] = ()
    machine_images: Tuple[MachineImage, ...] = ()
    source_path: Optional[Path] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kubernetes", tuple(self.kubernetes))
        object.__setattr__(self, "machine_images", tuple(self.machine_images))

    def get_machine_image(self, name: str) -> Optional[MachineImage]:
        """Return the first machine image called ``name``, if any."""
        for image in self.machine_images:
            if image.name == name:
                return image
        return None
