"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
import sys
from typing import Annotated

import typer

from mvnpurge import __version__
from mvnpurge.cli.commands import config, sweep

# Create main Typer app
app = typer.Typer(
    name="mvnpurge",
    help="Purge failed-download markers from a local Maven repository.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mvnpurge version {__version__}")
        raise typer.Exit()


def _setup_logging(debug: bool, quiet: bool) -> None:
    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """mvnpurge - clean *.lastUpdated markers out of ~/.m2/repository.

    Maven leaves a .lastUpdated file behind when a download fails and
    refuses to retry until it expires. Sweeping them forces a fresh
    download on the next build.
    """
    _setup_logging(debug, quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="sweep")(sweep.sweep)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
