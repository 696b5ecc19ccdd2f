"""
Filesystem utilities for upgradepath.

Reading helpers for catalog and configuration files. All filesystem and
decoding errors are normalized to ``FileOperationError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli as tomllib

from upgradepath.constants import MAX_FILE_SIZE
from upgradepath.exceptions import FileOperationError
from upgradepath.utils.logger import get_logger

logger = get_logger("filesystem")

PathLike = Union[str, Path]


def _validated_file(path: Path) -> Path:
    """Validate and resolve an existing file path."""
    if not path.exists():
        raise FileOperationError(
            f"File not found: {path}",
            file_path=str(path),
            operation="read",
        )
    if not path.is_file():
        raise FileOperationError(
            f"Not a file: {path}",
            file_path=str(path),
            operation="read",
        )
    return path.resolve()


def read_toml(
    file_path: PathLike,
    *,
    max_size: Optional[int] = MAX_FILE_SIZE,
) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Args:
        file_path: File to read.
        max_size: Maximum file size in bytes, or ``None`` for no limit.

    Returns:
        Parsed TOML document as a nested dictionary.

    Raises:
        FileOperationError: The file is missing, too large, unreadable, or
            not valid TOML.
    """
    path = _validated_file(Path(file_path))

    try:
        if max_size is not None:
            size = path.stat().st_size
            if size > max_size:
                raise FileOperationError(
                    f"File too large ({size} bytes, max {max_size})",
                    file_path=str(path),
                    operation="read",
                )

        with open(path, "rb") as fh:
            data = tomllib.load(fh)

    except tomllib.TOMLDecodeError as exc:
        raise FileOperationError(
            f"Invalid TOML in {path.name}: {exc}",
            file_path=str(path),
            operation="parse",
            original_error=exc,
        ) from exc
    except OSError as exc:
        raise FileOperationError(
            f"Cannot read file: {exc}",
            file_path=str(path),
            operation="read",
            original_error=exc,
        ) from exc

    logger.debug("Read %s (%d top-level keys)", path, len(data))
    return data
