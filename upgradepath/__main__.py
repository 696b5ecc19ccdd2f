"""
Executable module for upgradepath.

Running ``python -m upgradepath`` is equivalent to ``upgradepath``.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a CLI import failure on stderr."""
    try:
        from upgradepath.__version__ import __version__

        sys.stderr.write(f"upgradepath version: {__version__}\n")
    except ImportError:
        sys.stderr.write("upgradepath version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Entry point for ``python -m upgradepath``.

    Returns:
        Exit code returned by the CLI, or 1 if the CLI cannot be imported.
    """
    try:
        from upgradepath.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
