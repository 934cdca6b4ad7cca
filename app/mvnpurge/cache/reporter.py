"""Plain-text and JSON rendering of sweep reports."""

from typing import Any

from mvnpurge.cache.models import SweepReport


def summary_lines(report: SweepReport) -> list[str]:
    """Render a report as human-readable lines.

    Counters come first, then one ``<path>: <reason>`` line per retained
    error, then a note about dropped error records if any.

    Args:
        report: Report to render.

    Returns:
        List of summary lines without trailing newlines.
    """
    lines = [
        f"scanned {report.scanned}",
        f"matched {report.matched}",
        f"deleted {report.deleted}",
        f"failed {report.failed}",
    ]
    lines.extend(str(error) for error in report.errors)
    if report.dropped_errors:
        lines.append(f"... and {report.dropped_errors} more error(s)")
    return lines


def report_to_dict(report: SweepReport, lenient: bool = False) -> dict[str, Any]:
    """Convert a report to a JSON-serialisable dictionary.

    Args:
        report: Report to convert.
        lenient: Success policy forwarded to ``SweepReport.ok``.

    Returns:
        Dictionary with the success flag, counters and error records.
    """
    return {
        "ok": report.ok(lenient=lenient),
        "completed": report.completed,
        "dry_run": report.dry_run,
        "scanned": report.scanned,
        "matched": report.matched,
        "deleted": report.deleted,
        "failed": report.failed,
        "errors": [
            {"path": e.path, "reason": e.reason, "kind": e.kind.value} for e in report.errors
        ],
        "dropped_errors": report.dropped_errors,
    }
