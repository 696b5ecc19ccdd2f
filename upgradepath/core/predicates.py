"""Version filter predicates for upgradepath.

A predicate decides whether a catalog candidate is *excluded* from
qualification. Every predicate is an immutable dataclass exposing
:meth:`VersionPredicate.evaluate`, so a filter chain is a plain tuple that
can be inspected, compared and logged.

Predicates that compare against the running version carry it as their
``reference`` field. :class:`Expired` carries the clock reading it judges
against, which keeps evaluation free of hidden time sources.

A chain excludes a candidate when *any* of its predicates does; the order
only decides how early evaluation stops.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Tuple

from semver import Version

from upgradepath.models import ExpirableVersion


class VersionPredicate:
    """Base class of all filter predicates."""

    __slots__ = ()

    def evaluate(self, record: ExpirableVersion, parsed: Version) -> bool:
        """Return ``True`` if the candidate must be excluded.

        Args:
            record: The raw catalog entry.
            parsed: ``record.version`` parsed as a semantic version.
        """
        raise NotImplementedError


FilterChain = Tuple[VersionPredicate, ...]


@dataclass(frozen=True)
class DifferentMajorMinor(VersionPredicate):
    """Keep only strictly newer versions of the reference's minor line.

    Used to find patch updates.
    """

    reference: Version

    def evaluate(self, record: ExpirableVersion, parsed: Version) -> bool:
        return not (
            parsed.major == self.reference.major
            and parsed.minor == self.reference.minor
            and parsed > self.reference
        )


@dataclass(frozen=True)
class NonConsecutiveMinor(VersionPredicate):
    """Keep only versions of the minor line right after the reference's.

    Used to find minor updates.
    """

    reference: Version

    def evaluate(self, record: ExpirableVersion, parsed: Version) -> bool:
        return not (
            parsed.major == self.reference.major
            and parsed.minor == self.reference.minor + 1
        )


@dataclass(frozen=True)
class SameVersion(VersionPredicate):
    """Exclude the reference version itself."""

    reference: Version

    def evaluate(self, record: ExpirableVersion, parsed: Version) -> bool:
        return parsed == self.reference


@dataclass(frozen=True)
class LowerVersion(VersionPredicate):
    """Exclude versions lower than the reference."""

    reference: Version

    def evaluate(self, record: ExpirableVersion, parsed: Version) -> bool:
        return parsed < self.reference


@dataclass(frozen=True)
class Expired(VersionPredicate):
    """Exclude versions whose expiration date lies before ``now``."""

    now: datetime

    def evaluate(self, record: ExpirableVersion, parsed: Version) -> bool:
        return record.is_expired(self.now)


@dataclass(frozen=True)
class Preview(VersionPredicate):
    """Exclude versions classified as preview."""

    def evaluate(self, record: ExpirableVersion, parsed: Version) -> bool:
        return record.is_preview


def is_excluded(
    predicates: Iterable[VersionPredicate],
    record: ExpirableVersion,
    parsed: Version,
) -> bool:
    """Return ``True`` if any predicate excludes the candidate."""
    return any(predicate.evaluate(record, parsed) for predicate in predicates)
