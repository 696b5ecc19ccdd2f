"""
Shared context object for upgradepath CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from upgradepath.config import UpgradePathConfig


class UpgradePathContext:
    """Global context object for upgradepath CLI commands.

    Created once per CLI invocation and handed to commands through Click's
    context mechanism.

    Attributes:
        config_path: Path to the configuration file, if one was loaded.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration, or ``None`` before loading.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[UpgradePathConfig] = None


#: Click decorator for injecting :class:`UpgradePathContext` into commands.
pass_context = click.make_pass_decorator(UpgradePathContext, ensure=True)
