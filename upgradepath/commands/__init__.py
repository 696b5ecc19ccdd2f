"""CLI subcommands for upgradepath."""
