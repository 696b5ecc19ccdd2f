"""Latest command implementation for upgradepath.

Prints the latest qualifying (non-preview, non-expired) Kubernetes version
of the catalog.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from upgradepath.context import UpgradePathContext, pass_context
from upgradepath.core import get_latest_qualifying_version
from upgradepath.commands.options import (
    catalog_option,
    format_option,
    open_catalog,
    print_json,
    resolve_output_format,
)
from upgradepath.exceptions import UpgradePathError
from upgradepath.utils import get_logger, print_error, print_success, print_warning

logger = get_logger("commands.latest")


@click.command()
@catalog_option
@format_option
@pass_context
def latest(
    ctx: UpgradePathContext,
    catalog: Optional[Path],
    output_format: Optional[str],
) -> None:
    """Show the latest qualifying Kubernetes version.

    Exits with 1 when no version qualifies.
    """
    try:
        version_catalog = open_catalog(ctx, catalog)
        result = get_latest_qualifying_version(version_catalog.kubernetes)
    except UpgradePathError as e:
        print_error(f"{e}")
        sys.exit(1)

    if resolve_output_format(ctx, output_format) == "json":
        print_json(
            {
                "found": result.found,
                "version": result.selected.to_json() if result.selected else None,
            }
        )
    elif result.found:
        print_success(f"Latest qualifying version: {result.version}")
    else:
        print_warning("No qualifying version in catalog")

    sys.exit(0 if result.found else 1)
