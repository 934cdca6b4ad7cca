"""CLI package for mvnpurge.

This package contains the Typer application and all subcommands.
"""

from mvnpurge.cli.main import app

__all__ = ["app"]
