"""Semantic version parsing for upgradepath.

Versions follow the SemVer 2.0.0 layout
(``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``) and are ordered by the
``semver`` package. Numeric components may carry leading zeros
(``1.09.0`` is ``1.9.0``), as catalogs in the wild contain them. Anything
else is not normalized: a ``v`` prefix, surrounding whitespace or missing
components make the input malformed.
"""

from __future__ import annotations

import re
from typing import Any

from semver import Version

from upgradepath.exceptions import MalformedVersionError

_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

_VERSION_PATTERN = re.compile(
    r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
    rf"(?:-(?P<prerelease>{_IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{_IDENTIFIERS}))?"
)


def parse_version(value: Any) -> Version:
    """Parse ``value`` into a :class:`semver.Version`.

    Args:
        value: Version string such as ``"1.12.3"`` or ``"1.13.0-rc.1"``.

    Returns:
        The parsed version, ordered by SemVer precedence.

    Raises:
        MalformedVersionError: ``value`` is not a string or not a
            ``MAJOR.MINOR.PATCH`` version.

    Example::

        >>> parse_version("1.12.3").minor
        12
        >>> str(parse_version("1.09.0"))
        '1.9.0'
    """
    if not isinstance(value, str):
        raise MalformedVersionError(value, reason="version must be a string")

    match = _VERSION_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedVersionError(value, reason="expected MAJOR.MINOR.PATCH")

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease"),
        build=match.group("build"),
    )
