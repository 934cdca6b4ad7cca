"""Cache sweeper.

Drives the walker, classifies every file and deletes failure markers,
isolating failures per entry and tallying the outcome in a SweepReport.
"""

import logging
import os
import threading
from collections.abc import Callable

from mvnpurge.cache.classifier import Classifier
from mvnpurge.cache.models import (
    Classification,
    ErrorKind,
    EventKind,
    FileEvent,
    SweepReport,
    SweepRequest,
)
from mvnpurge.cache.walker import CacheWalker

logger = logging.getLogger(__name__)

DeleteCallback = Callable[[str], None]


class Sweeper:
    """Removes failed-download markers below a cache root.

    The sweep is synchronous and not transactional: deletions that
    happened before a failure or cancellation stay done.
    """

    def sweep(
        self,
        request: SweepRequest,
        cancel: threading.Event | None = None,
        on_delete: DeleteCallback | None = None,
    ) -> SweepReport:
        """Sweep the request's root and return the tally.

        Args:
            request: Validated sweep parameters.
            cancel: Optional event polled before each walker event. Once
                set, the walk stops and the report is marked incomplete.
            on_delete: Optional callback receiving each removed path
                (each would-be removal in dry-run mode).

        Returns:
            SweepReport for this run.
        """
        report = SweepReport(
            max_errors_retained=request.max_errors_retained,
            dry_run=request.dry_run,
        )
        classifier = Classifier(conservative=request.conservative)
        walker = CacheWalker(request.root, follow_symlinks=request.follow_symlinks)

        logger.info(
            "Sweeping %s (dry_run=%s, conservative=%s)",
            request.root,
            request.dry_run,
            request.conservative,
        )

        events = walker.walk()
        try:
            for event in events:
                if cancel is not None and cancel.is_set():
                    logger.info("Sweep cancelled after %d file(s)", report.scanned)
                    return report
                self._handle_event(event, request, classifier, report, on_delete)
        finally:
            events.close()

        report.completed = True
        logger.info(
            "Sweep finished: scanned=%d matched=%d deleted=%d failed=%d",
            report.scanned,
            report.matched,
            report.deleted,
            report.failed,
        )
        return report

    def _handle_event(
        self,
        event: FileEvent,
        request: SweepRequest,
        classifier: Classifier,
        report: SweepReport,
        on_delete: DeleteCallback | None,
    ) -> None:
        """Apply one walker event to the report."""
        if event.kind is EventKind.UNREADABLE:
            report.failed += 1
            report.walk_errors += 1
            report.record_error(
                event.path,
                event.reason or "unreadable",
                event.error_kind or ErrorKind.IO_ERROR,
            )
            return

        if event.kind is not EventKind.FILE:
            return

        report.scanned += 1
        if classifier.classify(event.path) is not Classification.SENTINEL_DELETE:
            return

        report.matched += 1

        if request.dry_run:
            logger.debug("Dry-run: would delete %s", event.path)
            if on_delete is not None:
                on_delete(event.path)
            return

        try:
            # unlink removes a symlink itself, never its target
            os.unlink(event.path)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", event.path, e)
            report.failed += 1
            report.record_error(
                event.path,
                e.strerror or str(e),
                ErrorKind.from_os_error(e),
            )
            return

        report.deleted += 1
        logger.debug("Deleted %s", event.path)
        if on_delete is not None:
            on_delete(event.path)


def sweep(
    request: SweepRequest,
    cancel: threading.Event | None = None,
    on_delete: DeleteCallback | None = None,
) -> SweepReport:
    """Run a sweep with a fresh Sweeper. See Sweeper.sweep."""
    return Sweeper().sweep(request, cancel=cancel, on_delete=on_delete)
