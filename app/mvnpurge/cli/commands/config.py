"""Settings commands.

Shows and edits the remembered Maven repository path stored in
~/.config/mvnpurge/config.toml.
"""

from typing import Annotated

import typer
from rich.table import Table

from mvnpurge.cache.validator import RootValidationError, validate_root
from mvnpurge.core.paths import get_settings_path
from mvnpurge.core.settings import (
    SettingsError,
    delete_settings,
    load_settings_or_default,
    save_settings,
)
from mvnpurge.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or change saved settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the saved settings."""
    path = get_settings_path()
    try:
        settings = load_settings_or_default(path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("maven_repo_path", settings.maven_repo_path or "[muted]-[/muted]")
    table.add_row("always_use_saved_path", str(settings.always_use_saved_path).lower())
    table.add_row("max_errors", str(settings.max_errors))

    console.print(table)
    if not path.exists():
        print_info(f"No settings file yet ({path}); showing defaults.")


@app.command("set-path")
def set_path(
    path: Annotated[str, typer.Argument(help="Maven repository root to remember.")],
    always: Annotated[
        bool,
        typer.Option(
            "--always/--no-always",
            help="Use this path without prompting.",
        ),
    ] = False,
) -> None:
    """Remember a Maven repository root."""
    try:
        root = validate_root(path)
    except RootValidationError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    try:
        settings = load_settings_or_default()
        updated = settings.model_copy(
            update={"maven_repo_path": str(root), "always_use_saved_path": always},
        )
        saved_to = save_settings(updated)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Saved {root} to {saved_to}")


@app.command()
def reset() -> None:
    """Delete the saved settings."""
    try:
        removed = delete_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if removed:
        print_success("Settings removed.")
    else:
        print_info("No saved settings to remove.")
