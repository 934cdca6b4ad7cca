"""Sweep command implementation.

Removes ``*.lastUpdated`` failure markers from a local Maven repository
so the next build retries the failed downloads.
"""

import json
import logging
import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from functools import partial
from typing import Annotated

import typer

from mvnpurge.cache.models import SweepReport, SweepRequest
from mvnpurge.cache.reporter import report_to_dict, summary_lines
from mvnpurge.cache.sweeper import DeleteCallback, Sweeper
from mvnpurge.cache.validator import RootValidationError, validate_root
from mvnpurge.cli.display import (
    create_report_table,
    print_deleted,
    print_errors,
    print_report_status,
)
from mvnpurge.core.paths import get_default_repo_path
from mvnpurge.core.settings import (
    Settings,
    SettingsError,
    load_settings_or_default,
    save_settings,
)
from mvnpurge.utils.formatting import console, print_error, print_info, print_warning

logger = logging.getLogger(__name__)

EXIT_PARTIAL = 1
EXIT_INVALID = 2


class OutputFormat(str, Enum):
    """Output format options for the sweep report."""

    TABLE = "table"
    TEXT = "text"
    JSON = "json"


def sweep(
    ctx: typer.Context,
    root: Annotated[
        str | None,
        typer.Argument(
            help="Maven repository root. Prompts (or uses the saved path) if omitted.",
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    conservative: Annotated[
        bool,
        typer.Option(
            "--conservative",
            help="Keep markers whose artifact is already downloaded.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print one line per deleted file."),
    ] = False,
    max_errors: Annotated[
        int | None,
        typer.Option(
            "--max-errors",
            min=0,
            help="Maximum number of error records to keep and print.",
        ),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option(
            "--lenient",
            help="Report success whenever the walk completes, even with failures.",
        ),
    ] = False,
    follow_symlinks: Annotated[
        bool,
        typer.Option(
            "--follow-symlinks",
            help="Descend into symlinked directories.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    remember: Annotated[
        bool,
        typer.Option("--remember", help="Save this root as the default."),
    ] = False,
    always_use_saved_path: Annotated[
        bool,
        typer.Option(
            "--always-use-saved-path",
            help="Save this root and use it without prompting next time.",
        ),
    ] = False,
) -> None:
    """Delete *.lastUpdated failure markers from a Maven repository.

    Examples:
        mvnpurge sweep ~/.m2/repository
        mvnpurge sweep ~/.m2/repository --dry-run -v
        mvnpurge sweep --format json
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    try:
        settings = load_settings_or_default()
    except SettingsError as e:
        print_warning(f"Ignoring unreadable settings: {e}")
        settings = Settings()

    raw_root, prompted = _select_root(root, settings)

    try:
        root_path = validate_root(raw_root)
    except RootValidationError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_INVALID) from e

    if remember or always_use_saved_path or prompted:
        always = always_use_saved_path or (settings.always_use_saved_path and not prompted)
        _remember_root(settings, str(root_path), always)

    request = SweepRequest(
        root=str(root_path),
        dry_run=dry_run,
        follow_symlinks=follow_symlinks,
        max_errors_retained=max_errors if max_errors is not None else settings.max_errors,
        conservative=conservative,
    )

    on_delete: DeleteCallback | None = None
    if verbose and output_format != OutputFormat.JSON:
        on_delete = partial(print_deleted, dry_run=dry_run)

    cancel = threading.Event()
    with _cancel_on_interrupt(cancel):
        report = Sweeper().sweep(request, cancel=cancel, on_delete=on_delete)

    _print_report(report, output_format, lenient=lenient, quiet=quiet)

    if not report.ok(lenient=lenient):
        raise typer.Exit(code=EXIT_PARTIAL)


# === Private helper functions ===


def _select_root(root: str | None, settings: Settings) -> tuple[str, bool]:
    """Pick the repository root from the argument, settings or a prompt.

    Returns:
        Tuple of (raw root string, whether the user was prompted).
    """
    if root is not None:
        return root, False

    saved = settings.saved_root
    if settings.skip_prompt and saved is not None:
        logger.info("Using saved repository path %s", saved)
        return saved, False

    default = saved or str(get_default_repo_path())
    return typer.prompt("Maven repository path", default=default), True


def _remember_root(settings: Settings, root: str, always: bool) -> None:
    """Persist the chosen root, warning instead of failing on write errors."""
    updated = settings.model_copy(
        update={"maven_repo_path": root, "always_use_saved_path": always},
    )
    try:
        path = save_settings(updated)
    except SettingsError as e:
        print_warning(f"Could not save settings: {e}")
        return
    logger.info("Saved repository path to %s", path)


@contextmanager
def _cancel_on_interrupt(cancel: threading.Event) -> Iterator[None]:
    """Turn SIGINT into a cancellation request for the duration of a sweep."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handler(_signum: int, _frame: object) -> None:
        cancel.set()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def _print_report(
    report: SweepReport,
    output_format: OutputFormat,
    lenient: bool,
    quiet: bool,
) -> None:
    """Render the report in the requested format."""
    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(report_to_dict(report, lenient=lenient)))
        return

    if output_format == OutputFormat.TEXT:
        for line in summary_lines(report):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        return

    if not quiet:
        console.print(create_report_table(report))
        if report.scanned == 0 and report.completed:
            print_info("No files found under the repository root.")
    print_errors(report)
    print_report_status(report, lenient=lenient)
