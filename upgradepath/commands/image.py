"""Image command implementation for upgradepath.

Looks up a machine image in the catalog, reports its latest qualifying
version and, with ``--current``, whether the running version is offered
and outdated.

Typical usage::

    $ upgradepath image gardenlinux
    $ upgradepath image gardenlinux --current 934.8.0 --format json
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click

from upgradepath.context import UpgradePathContext, pass_context
from upgradepath.core import (
    get_latest_qualifying_machine_image,
    machine_image_version_exists,
    parse_version,
)
from upgradepath.commands.options import (
    catalog_option,
    format_option,
    open_catalog,
    print_json,
    resolve_output_format,
)
from upgradepath.exceptions import CatalogError, UpgradePathError
from upgradepath.models import ShootMachineImage
from upgradepath.utils import (
    get_logger,
    print_error,
    print_success,
    print_table,
    print_warning,
)

logger = get_logger("commands.image")


@click.command()
@click.argument("name")
@click.option(
    "--current",
    "current_version",
    default=None,
    help="Version the cluster currently runs.",
)
@catalog_option
@format_option
@pass_context
def image(
    ctx: UpgradePathContext,
    name: str,
    current_version: Optional[str],
    catalog: Optional[Path],
    output_format: Optional[str],
) -> None:
    """Show the latest qualifying version of machine image NAME.

    Exits with 1 when --current is older than the latest qualifying version,
    or on error.
    """
    try:
        report = _inspect(ctx, name, current_version, catalog)
    except UpgradePathError as e:
        print_error(f"{e}")
        sys.exit(1)

    if resolve_output_format(ctx, output_format) == "json":
        print_json(report)
    else:
        _display(report)

    sys.exit(1 if report.get("update_available") else 0)


def _inspect(
    ctx: UpgradePathContext,
    name: str,
    current_version: Optional[str],
    catalog: Optional[Path],
) -> Dict[str, Any]:
    version_catalog = open_catalog(ctx, catalog)
    machine_image = version_catalog.get_machine_image(name)
    if machine_image is None:
        raise CatalogError(
            f"Machine image not found in catalog: {name}",
            catalog_path=str(version_catalog.source_path),
        )

    found, latest_image = get_latest_qualifying_machine_image(machine_image)
    report: Dict[str, Any] = {
        "name": name,
        "latest": latest_image.version if found else None,
    }

    if current_version is not None:
        current = parse_version(current_version)
        exists, _ = machine_image_version_exists(
            machine_image, ShootMachineImage(name=name, version=current_version)
        )
        report["current"] = current_version
        report["current_offered"] = exists
        report["update_available"] = (
            found and parse_version(latest_image.version) > current
        )

    logger.debug("Machine image report: %s", report)
    return report


def _display(report: Dict[str, Any]) -> None:
    if report["latest"] is None:
        print_warning(f"No qualifying version for machine image {report['name']}")
    else:
        print_success(f"{report['name']}: latest qualifying version {report['latest']}")

    if "current" not in report:
        return

    print_table(
        [
            {
                "Current": report["current"],
                "Offered": "yes" if report["current_offered"] else "no",
                "Update": report["latest"] if report["update_available"] else "-",
            }
        ]
    )
