"""Configuration file loader for upgradepath.

Supports two formats:

- ``upgradepath.toml``: settings under the ``[upgradepath]`` table
- ``pyproject.toml``: settings under the ``[tool.upgradepath]`` table

Discovery order:

1. Explicit path from ``--config`` or ``UPGRADEPATH_CONFIG``
2. ``upgradepath.toml`` in the current directory
3. ``pyproject.toml`` with a ``[tool.upgradepath]`` section

Precedence: defaults < config file < CLI args.

Example (``upgradepath.toml``)::

    [upgradepath]
    catalog = "profiles/aws.toml"
    output_format = "json"

A relative ``catalog`` path is resolved against the directory holding the
configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from upgradepath.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    PYPROJECT_FILE_NAME,
)
from upgradepath.exceptions import ConfigError, FileOperationError
from upgradepath.utils.filesystem import read_toml
from upgradepath.utils.logger import get_logger

logger = get_logger("config")


@dataclass
class UpgradePathConfig:
    """Parsed and validated upgradepath configuration.

    Attributes:
        catalog: Catalog file to resolve against, or ``None`` for the
            default ``catalog.toml`` in the current directory.
        output_format: Default output format of the commands.
        source_path: Path to the loaded config file, or ``None`` when
            running on defaults.
    """

    catalog: Optional[Path] = None
    output_format: str = DEFAULT_OUTPUT_FORMAT

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return user-facing options for debug logging."""
        return {
            "catalog": str(self.catalog) if self.catalog else None,
            "output_format": self.output_format,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to the config file, or ``None`` if not found.

    Raises:
        ConfigError: ``explicit_path`` does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_section(pyproject):
        logger.debug("Found [tool.upgradepath] in pyproject.toml: %s", pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check whether ``pyproject.toml`` has a ``[tool.upgradepath]`` table.

    An unreadable ``pyproject.toml`` is not ours to report, so read errors
    count as "no section".
    """
    try:
        raw = read_toml(path)
    except FileOperationError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return "upgradepath" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> UpgradePathConfig:
    """Load and validate the upgradepath configuration.

    Args:
        config_path: Explicit path to a config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`UpgradePathConfig`.

    Raises:
        ConfigError: The file cannot be parsed, has unknown keys, or holds
            invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return UpgradePathConfig()

    logger.info("Loading configuration from %s", resolved)
    try:
        raw = read_toml(resolved)
    except FileOperationError as exc:
        raise ConfigError(exc.message, config_path=str(resolved)) from exc

    if resolved.name == PYPROJECT_FILE_NAME:
        section = raw.get("tool", {}).get("upgradepath", {})
    else:
        section = raw.get("upgradepath", {})

    if not section:
        logger.debug("Config file has no upgradepath section, using defaults")
        return UpgradePathConfig(source_path=resolved)

    config = _parse_section(section, config_path=resolved)
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: Path,
) -> UpgradePathConfig:
    """Validate an ``[upgradepath]`` table.

    Raises:
        ConfigError: Unknown keys or incorrect types.
    """
    config = UpgradePathConfig()

    known = {"catalog", "output_format"}
    unknown = set(section.keys()) - known
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=str(config_path),
        )

    if "catalog" in section:
        val = section["catalog"]
        if not isinstance(val, str) or not val:
            raise ConfigError(
                f"catalog must be a non-empty string, got {type(val).__name__}",
                config_path=str(config_path),
                option="catalog",
            )
        catalog = Path(val)
        if not catalog.is_absolute():
            catalog = config_path.parent / catalog
        config.catalog = catalog

    if "output_format" in section:
        val = section["output_format"]
        if not isinstance(val, str) or val.lower() not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {val!r}",
                config_path=str(config_path),
                option="output_format",
            )
        config.output_format = val.lower()

    return config
