"""
Logging setup for upgradepath.

Every module logs through :func:`get_logger`, which places it under the
``upgradepath`` namespace. Nothing is printed until the CLI (or an
embedding application) calls :func:`setup_logging`; resolution decisions
are logged at DEBUG, the expired-version fallback at INFO.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from upgradepath.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "upgradepath"

_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name with ANSI escapes."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname) if self.use_color else None
        if color is None:
            return super().format(record)

        # Other handlers share the record; color a copy
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def stream_supports_color(stream: IO[str]) -> bool:
    """Whether ANSI colors should be written to ``stream``.

    ``NO_COLOR`` and ``CI`` disable colors; otherwise the stream must be a
    terminal.
    """
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def level_for_verbosity(verbose: int) -> int:
    """Map the CLI's ``-v`` count to a logging level."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach a single stream handler to the ``upgradepath`` logger.

    Calling it again replaces the previous handler.

    Args:
        level: Logging level (e.g. ``logging.INFO``).
        verbose: Include timestamps and logger names.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    stream = stream or sys.stderr
    formatter = ColoredFormatter(
        LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        use_color=stream_supports_color(stream),
    )
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)
        root_logger.addHandler(handler)
        root_logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the upgradepath namespace.

    ``name`` may be relative (``"core.resolver"``) or fully qualified
    (``"upgradepath.core.resolver"``); empty means the namespace root.
    """
    if not name or name == ROOT_LOGGER_NAME:
        qualified = ROOT_LOGGER_NAME
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        qualified = name
    else:
        qualified = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(qualified)
    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
