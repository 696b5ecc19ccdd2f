"""
Command-line interface for upgradepath.

Provides the main CLI entry point, handles global options and
configuration loading, and registers the subcommands.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from upgradepath.config import load_config
from upgradepath.constants import CONFIG_ENV_VAR
from upgradepath.__version__ import __version__
from upgradepath.context import UpgradePathContext
from upgradepath.exceptions import ConfigError, UpgradePathError
from upgradepath.utils.logger import get_logger, level_for_verbosity, setup_logging
from upgradepath.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar=CONFIG_ENV_VAR,
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="UPGRADEPATH_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="upgradepath",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """upgradepath: find patch and minor updates in a version catalog.

    \b
    Available commands:
      upgradepath check VERSION    Patch and minor update for a version
      upgradepath latest           Latest qualifying version
      upgradepath image NAME       Latest qualifying machine image version

    \b
    Examples:
      upgradepath check 1.27.3
      upgradepath check 1.27.3 --catalog profile.toml --format json
      upgradepath image gardenlinux --current 934.8.0
    """
    _configure_logging(verbose)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    upgradepath_ctx = UpgradePathContext()
    upgradepath_ctx.config_path = config or loaded_config.source_path
    upgradepath_ctx.color = color
    upgradepath_ctx.verbose = verbose
    upgradepath_ctx.config = loaded_config
    ctx.obj = upgradepath_ctx

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("upgradepath v%s", __version__)
    logger.debug("Config path: %s", upgradepath_ctx.config_path)
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


from upgradepath.commands.check import check  # noqa: E402
from upgradepath.commands.image import image  # noqa: E402
from upgradepath.commands.latest import latest  # noqa: E402

cli.add_command(check)
cli.add_command(latest)
cli.add_command(image)


def main() -> int:
    """Main entry point for the upgradepath CLI.

    Returns:
        Exit code:
            0   Success, nothing to upgrade
            1   Update available, or an application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.exceptions.Exit as exc:
        return exc.exit_code

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.Abort:
        print_warning("Operation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except UpgradePathError as exc:
        print_error(str(exc))
        logger.debug(
            "UpgradePathError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("Operation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
