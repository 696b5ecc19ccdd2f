"""
Custom exception hierarchy for upgradepath.

All exceptions inherit from :class:`UpgradePathError` and carry optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Only :class:`MalformedVersionError` is raised by the resolution engine
itself. "Nothing to upgrade to" is never an error; callers distinguish it
through the ``found`` flag of a result.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class UpgradePathError(Exception):
    """Base exception for all upgradepath errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class MalformedVersionError(UpgradePathError):
    """Raised when a string is not a valid semantic version.

    Args:
        version: The offending input, as given.
        reason: Optional parser message explaining the failure.
    """

    __slots__ = ("version", "reason")

    def __init__(self, version: Any, *, reason: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "reason", reason)

        super().__init__(
            f"Invalid semantic version: {_truncate(repr(version))}",
            details,
        )

        self.version = version
        self.reason = reason


class CatalogError(UpgradePathError):
    """Raised when a version catalog file cannot be loaded.

    Args:
        message: Error description.
        catalog_path: Path to the catalog file.
        entry: Location of the offending entry (e.g. ``kubernetes.versions[2]``).
    """

    __slots__ = ("catalog_path", "entry")

    def __init__(
        self,
        message: str,
        *,
        catalog_path: Optional[str] = None,
        entry: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", catalog_path)
        _add_if(details, "entry", entry)

        super().__init__(message, details)

        self.catalog_path = catalog_path
        self.entry = entry


class ConfigError(UpgradePathError):
    """Raised when the configuration file is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: Name of the offending option.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class FileOperationError(UpgradePathError):
    """Raised when file system operations fail.

    Args:
        message: Error description.
        file_path: Path to the file involved.
        operation: Operation being performed.
        original_error: Original exception that triggered this error.
    """

    __slots__ = ("file_path", "operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", file_path)
        _add_if(details, "operation", operation)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error
