"""Check command implementation for upgradepath.

Reports the patch update and the minor update available to a running
version, using one clock reading for both answers.

Typical usage::

    $ upgradepath check 1.27.3
    $ upgradepath check 1.27.3 --catalog profile.toml --format json
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from upgradepath.context import UpgradePathContext, pass_context
from upgradepath.core import get_minor_update, get_patch_update
from upgradepath.core.qualifier import utc_now
from upgradepath.commands.options import (
    catalog_option,
    format_option,
    open_catalog,
    print_json,
    resolve_output_format,
)
from upgradepath.exceptions import UpgradePathError
from upgradepath.utils import (
    colorize_update_type,
    get_logger,
    print_error,
    print_success,
    print_table,
)

logger = get_logger("commands.check")


@click.command()
@click.argument("current_version")
@catalog_option
@format_option
@pass_context
def check(
    ctx: UpgradePathContext,
    current_version: str,
    catalog: Optional[Path],
    output_format: Optional[str],
) -> None:
    """Check a running version for patch and minor updates.

    Exits with 0 when CURRENT_VERSION is up to date, and with 1 when an
    update is available or an error occurred.
    """
    try:
        has_updates = _check(
            ctx,
            current_version,
            catalog,
            resolve_output_format(ctx, output_format),
        )
        sys.exit(1 if has_updates else 0)

    except UpgradePathError as e:
        print_error(f"{e}")
        sys.exit(1)


def _check(
    ctx: UpgradePathContext,
    current_version: str,
    catalog: Optional[Path],
    output_format: str,
) -> bool:
    """Resolve both update kinds and display them.

    Returns:
        ``True`` if a patch or minor update exists.

    Raises:
        UpgradePathError: The catalog cannot be loaded or holds a malformed
            version, or ``current_version`` is malformed.
    """
    version_catalog = open_catalog(ctx, catalog)
    now = utc_now()

    patch_found, patch_version = get_patch_update(
        version_catalog, current_version, now=now
    )
    minor_found, minor_version = get_minor_update(
        version_catalog, current_version, now=now
    )

    report: Dict[str, Any] = {
        "current": current_version,
        "patch": {"found": patch_found, "version": patch_version or None},
        "minor": {"found": minor_found, "version": minor_version or None},
    }

    if output_format == "json":
        print_json(report)
    else:
        _display_table(report)

    return patch_found or minor_found


def _display_table(report: Dict[str, Any]) -> None:
    rows: List[Dict[str, str]] = []
    for kind in ("patch", "minor"):
        entry = report[kind]
        rows.append(
            {
                "Update": colorize_update_type(kind if entry["found"] else "none"),
                "Target": entry["version"] or "-",
            }
        )

    if not any(report[kind]["found"] for kind in ("patch", "minor")):
        print_success(f"{report['current']} is up to date")
        return

    print_table(rows, title=f"Updates for {report['current']}")
