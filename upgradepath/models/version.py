"""
Version record data models for upgradepath.

This module defines the catalog entry a resolver works on
(:class:`ExpirableVersion`) and the outcome of a qualification run
(:class:`QualificationResult`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class Classification(str, enum.Enum):
    """Lifecycle classification of a catalog version."""

    SUPPORTED = "supported"
    PREVIEW = "preview"


def _as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class ExpirableVersion:
    """A single catalog entry.

    Attributes:
        version: Raw version string, parsed lazily by the resolver.
        classification: Lifecycle classification; ``None`` is treated as
            a normal (supported) version.
        expiration_date: Point after which the version is unsupported.
            Naive datetimes are interpreted as UTC.
    """

    version: str
    classification: Optional[Classification] = None
    expiration_date: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.classification is not None and not isinstance(
            self.classification, Classification
        ):
            object.__setattr__(
                self, "classification", Classification(self.classification)
            )
        if self.expiration_date is not None:
            object.__setattr__(self, "expiration_date", _as_utc(self.expiration_date))

    @property
    def is_preview(self) -> bool:
        return self.classification is Classification.PREVIEW

    def is_expired(self, now: datetime) -> bool:
        """Return True if the expiration date lies strictly before ``now``."""
        if self.expiration_date is None:
            return False
        return self.expiration_date < _as_utc(now)

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        entry: Dict[str, Any] = {"version": self.version}
        if self.classification is not None:
            entry["classification"] = self.classification.value
        if self.expiration_date is not None:
            entry["expiration_date"] = self.expiration_date.isoformat()
        return entry

    def __str__(self) -> str:
        return self.version


@dataclass(frozen=True)
class QualificationResult:
    """Outcome of selecting the latest qualifying version.

    ``found`` is ``False`` exactly when ``selected`` is ``None``.
    """

    found: bool
    selected: Optional[ExpirableVersion] = None

    def __post_init__(self) -> None:
        if self.found != (self.selected is not None):
            raise ValueError("found must be True if and only if selected is set")

    @classmethod
    def not_found(cls) -> "QualificationResult":
        return cls(found=False, selected=None)

    @property
    def version(self) -> str:
        """Selected version string, or ``""`` when nothing qualified."""
        return self.selected.version if self.selected is not None else ""

    def __bool__(self) -> bool:
        return self.found
