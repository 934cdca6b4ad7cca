"""CLI subcommands for mvnpurge."""
