"""Cache sweep domain models.

This module defines the data structures passed between the walker,
classifier, sweeper and reporter: the immutable sweep request, the
events produced while walking the cache tree, and the mutable report
accumulated by the sweeper.
"""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_MAX_ERRORS = 32


class EventKind(str, Enum):
    """Kind of event produced by the cache walker.

    Attributes:
        FILE: A non-directory entry (regular file or symlink not to a directory).
        DIR_ENTER: The walker is about to list a directory.
        DIR_EXIT: The walker finished a directory and all its descendants.
        UNREADABLE: A directory or entry could not be read.
    """

    FILE = "file"
    DIR_ENTER = "dir_enter"
    DIR_EXIT = "dir_exit"
    UNREADABLE = "unreadable"


class ErrorKind(str, Enum):
    """Category of a per-entry I/O failure.

    Attributes:
        PERMISSION_DENIED: The OS refused access (EACCES/EPERM).
        NOT_FOUND: The entry vanished between listing and access.
        IO_ERROR: Any other OS-level failure.
    """

    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"

    @classmethod
    def from_os_error(cls, error: OSError) -> "ErrorKind":
        """Map an OSError to its error kind."""
        if isinstance(error, PermissionError):
            return cls.PERMISSION_DENIED
        if isinstance(error, FileNotFoundError):
            return cls.NOT_FOUND
        return cls.IO_ERROR


class Classification(str, Enum):
    """Verdict of the classifier for a single file."""

    SENTINEL_DELETE = "sentinel_delete"
    SKIP = "skip"


@dataclass(frozen=True, slots=True)
class SweepRequest:
    """Immutable description of one sweep.

    Attributes:
        root: Absolute path of the cache root (already validated).
        dry_run: If True, report what would be deleted without deleting.
        follow_symlinks: If True, descend into symlinked directories.
        max_errors_retained: Upper bound on the number of error records kept.
        conservative: If True, keep sentinels whose artifact is present.
    """

    root: str
    dry_run: bool = False
    follow_symlinks: bool = False
    max_errors_retained: int = DEFAULT_MAX_ERRORS
    conservative: bool = False

    def __post_init__(self) -> None:
        """Validate request data after initialization."""
        if not self.root:
            msg = "Root cannot be empty"
            raise ValueError(msg)
        if self.max_errors_retained < 0:
            msg = f"max_errors_retained must be >= 0, got {self.max_errors_retained}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class FileEvent:
    """A single entry reported by the walker.

    Attributes:
        path: Absolute path of the entry.
        kind: What happened at this entry.
        reason: Error description for UNREADABLE events, None otherwise.
        error_kind: Error category for UNREADABLE events, None otherwise.
    """

    path: str
    kind: EventKind
    reason: str | None = None
    error_kind: ErrorKind | None = None


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """A retained per-entry failure."""

    path: str
    reason: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass(slots=True)
class SweepReport:
    """Aggregate outcome of a sweep.

    Owned and mutated by the sweeper while the walk runs, then handed
    to the caller.

    Attributes:
        scanned: Number of file events seen.
        matched: Number of files classified as sentinels to delete.
        deleted: Number of files actually removed (zero in dry-run).
        failed: Walk errors plus failed deletions.
        walk_errors: Part of ``failed`` caused by unreadable entries.
        errors: Retained error records, oldest first.
        dropped_errors: Error records discarded after the cap was reached.
        max_errors_retained: Cap applied to ``errors``.
        completed: True once the walk reached end-of-stream.
        dry_run: Whether the sweep ran in dry-run mode.
    """

    scanned: int = 0
    matched: int = 0
    deleted: int = 0
    failed: int = 0
    walk_errors: int = 0
    errors: list[ErrorRecord] = field(default_factory=list)
    dropped_errors: int = 0
    max_errors_retained: int = DEFAULT_MAX_ERRORS
    completed: bool = False
    dry_run: bool = False

    @property
    def delete_failures(self) -> int:
        """Number of matched files whose removal failed."""
        return self.failed - self.walk_errors

    def record_error(self, path: str, reason: str, kind: ErrorKind) -> None:
        """Keep an error record unless the cap has been reached."""
        if len(self.errors) < self.max_errors_retained:
            self.errors.append(ErrorRecord(path=path, reason=reason, kind=kind))
        else:
            self.dropped_errors += 1

    def ok(self, lenient: bool = False) -> bool:
        """Whether the sweep should be presented as a success.

        Args:
            lenient: If True, only require that the walk ran to completion.

        Returns:
            True for a successful sweep.
        """
        if lenient:
            return self.completed
        return self.completed and self.failed == 0
