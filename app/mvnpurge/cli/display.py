"""Shared Rich display functions for sweep reports.

Provides the summary table and status messages printed after a sweep.
"""

from rich.table import Table

from mvnpurge.cache.models import SweepReport
from mvnpurge.utils.formatting import (
    console,
    print_info,
    print_success,
    print_warning,
)


def create_report_table(report: SweepReport) -> Table:
    """Create a Rich table with the sweep counters.

    Args:
        report: Report to display.

    Returns:
        Rich Table configured for counter display.
    """
    title = "Sweep Summary (Dry Run)" if report.dry_run else "Sweep Summary"

    table = Table(
        title=title,
        min_width=len(title) + 4,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Counter", width=10)
    table.add_column("Files", justify="right")

    deleted_style = "pending" if report.dry_run else "deleted"
    failed_style = "error" if report.failed else "muted"

    table.add_row("scanned", str(report.scanned))
    table.add_row("matched", str(report.matched))
    table.add_row("deleted", f"[{deleted_style}]{report.deleted}[/{deleted_style}]")
    table.add_row("failed", f"[{failed_style}]{report.failed}[/{failed_style}]")

    return table


def print_errors(report: SweepReport) -> None:
    """Print retained error records, one ``<path>: <reason>`` line each.

    Lines are never wrapped so each error stays on a single line.
    """
    if not report.errors:
        return

    console.print("\n[error]Errors:[/]")
    for error in report.errors:
        console.print(str(error), markup=False, highlight=False, soft_wrap=True)
    if report.dropped_errors:
        console.print(f"[muted]... and {report.dropped_errors} more error(s)[/muted]")


def print_deleted(path: str, dry_run: bool = False) -> None:
    """Print a single per-file deletion line."""
    label = "Would delete" if dry_run else "Deleted"
    console.print(f"{label}: {path}", markup=False, highlight=False, soft_wrap=True)


def print_report_status(report: SweepReport, lenient: bool = False) -> None:
    """Print the closing status line for a sweep.

    Args:
        report: Finished (or cancelled) sweep report.
        lenient: Treat a completed walk as success even with failures.
    """
    if not report.completed:
        print_warning(
            f"Sweep cancelled before completion: {report.deleted} deleted, "
            f"{report.failed} failed."
        )
        return

    if report.dry_run:
        print_info(f"Dry-run: {report.matched} marker file(s) would be deleted.")
        return

    if report.ok(lenient=lenient):
        if report.failed:
            print_warning(f"{report.failed} entry(ies) could not be processed.")
        print_success("Maven repository cleaned successfully!")
        return

    print_warning(f"{report.deleted} deleted, {report.failed} failed")
