"""Latest qualifying version selection for upgradepath.

Given a list of catalog candidates, the qualifier:

1. parses every candidate (one malformed entry fails the whole call),
2. drops preview versions,
3. drops expired versions, judged against a single clock reading,
4. drops candidates rejected by the caller's filter chain,
5. returns the highest survivor by SemVer precedence.

An empty catalog or a catalog where nothing survives yields a negative
:class:`QualificationResult`; that is a normal outcome, not an error.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from semver import Version

from upgradepath.core.parser import parse_version
from upgradepath.core.predicates import (
    Expired,
    FilterChain,
    Preview,
    VersionPredicate,
    is_excluded,
)
from upgradepath.models import ExpirableVersion, QualificationResult
from upgradepath.utils.logger import get_logger

logger = get_logger("core.qualifier")


def utc_now() -> datetime:
    """Read the wall clock as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_candidates(
    candidates: Iterable[ExpirableVersion],
) -> List[Tuple[ExpirableVersion, Version]]:
    """Parse all candidates up front.

    Raises:
        MalformedVersionError: On the first candidate that does not parse.
    """
    return [(record, parse_version(record.version)) for record in candidates]


def get_latest_version(
    candidates: Sequence[ExpirableVersion],
    extra_filters: Iterable[VersionPredicate] = (),
    *,
    now: Optional[datetime] = None,
    skip_expired: bool = True,
) -> QualificationResult:
    """Select the highest candidate surviving the mandatory and extra filters.

    Preview versions are always excluded. Expired versions are excluded
    unless ``skip_expired`` is ``False``.

    Args:
        candidates: Catalog entries to choose from.
        extra_filters: Caller-supplied predicates, applied after the
            mandatory ones.
        now: Clock reading used for expiration checks. Read once from the
            wall clock when omitted.
        skip_expired: Whether expired versions are excluded.

    Returns:
        The qualification outcome.

    Raises:
        MalformedVersionError: A candidate version does not parse.
    """
    parsed = parse_candidates(candidates)

    if now is None:
        now = utc_now()

    chain: FilterChain = (Preview(),)
    if skip_expired:
        chain += (Expired(now),)
    chain += tuple(extra_filters)

    best: Optional[Tuple[ExpirableVersion, Version]] = None
    for record, version in parsed:
        if is_excluded(chain, record, version):
            logger.debug("Excluded %s", record.version)
            continue
        # Strict comparison keeps the first of equal-precedence entries
        if best is None or version > best[1]:
            best = (record, version)

    if best is None:
        logger.debug("No qualifying version among %d candidate(s)", len(parsed))
        return QualificationResult.not_found()

    logger.debug(
        "Selected %s among %d candidate(s)", best[0].version, len(parsed)
    )
    return QualificationResult(found=True, selected=best[0])


def get_latest_qualifying_version(
    candidates: Sequence[ExpirableVersion],
    extra_filters: Iterable[VersionPredicate] = (),
    *,
    now: Optional[datetime] = None,
) -> QualificationResult:
    """Return the latest non-preview, non-expired candidate passing ``extra_filters``.

    Example::

        >>> get_latest_qualifying_version([ExpirableVersion("1.2.3")]).version
        '1.2.3'
        >>> get_latest_qualifying_version([]).found
        False
    """
    return get_latest_version(candidates, extra_filters, now=now)
