"""Shared CLI options and their resolution against the configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from upgradepath.constants import DEFAULT_CATALOG_FILE, OUTPUT_FORMATS
from upgradepath.context import UpgradePathContext
from upgradepath.core import load_catalog
from upgradepath.models import VersionCatalog
from upgradepath.utils.logger import get_logger

logger = get_logger("commands.options")

catalog_option = click.option(
    "--catalog",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Version catalog file (default: {DEFAULT_CATALOG_FILE}).",
)

format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format.",
)


def resolve_catalog_path(ctx: UpgradePathContext, catalog: Optional[Path]) -> Path:
    """CLI flag, then configured catalog, then ``catalog.toml``."""
    if catalog is not None:
        return catalog
    if ctx.config is not None and ctx.config.catalog is not None:
        return ctx.config.catalog
    return Path(DEFAULT_CATALOG_FILE)


def resolve_output_format(ctx: UpgradePathContext, output_format: Optional[str]) -> str:
    """CLI flag, then configured format."""
    if output_format is not None:
        return output_format.lower()
    if ctx.config is not None:
        return ctx.config.output_format
    return OUTPUT_FORMATS[0]


def open_catalog(ctx: UpgradePathContext, catalog: Optional[Path]) -> VersionCatalog:
    """Load the catalog selected by flags and configuration."""
    path = resolve_catalog_path(ctx, catalog)
    logger.info("Using catalog %s", path)
    return load_catalog(path)


def print_json(data: Any) -> None:
    """Print ``data`` as indented JSON, bypassing Rich markup."""
    click.echo(json.dumps(data, indent=2))
