"""Depth-first walker over a cache tree.

Streams FileEvent records for everything reachable from the root.
Symlinked directories are not descended unless explicitly requested,
and per-entry I/O errors become UNREADABLE events instead of aborting
the walk.
"""

import logging
import os
from collections.abc import Iterator

from mvnpurge.cache.models import ErrorKind, EventKind, FileEvent

logger = logging.getLogger(__name__)


def _unreadable(path: str, error: OSError) -> FileEvent:
    """Build an UNREADABLE event from an OS error."""
    return FileEvent(
        path=path,
        kind=EventKind.UNREADABLE,
        reason=error.strerror or str(error),
        error_kind=ErrorKind.from_os_error(error),
    )


class CacheWalker:
    """Walks a cache root depth-first, directories in pre-order.

    Sibling order follows the filesystem's listing order. Each
    directory is listed in full before its entries are reported, so the
    consumer may delete reported files while the walk is in progress.

    Args:
        root: Absolute path of the directory to walk.
        follow_symlinks: If True, descend into symlinked directories,
            visiting each physical directory at most once.
    """

    def __init__(self, root: str, *, follow_symlinks: bool = False) -> None:
        self._root = root
        self._follow_symlinks = follow_symlinks
        self._visited: set[tuple[int, int]] = set()

    def walk(self) -> Iterator[FileEvent]:
        """Yield events for the root and everything below it.

        Directories are tracked on an explicit stack of open listings, so
        tree depth is not limited by the interpreter's recursion limit.

        Yields:
            FileEvent instances in depth-first pre-order.
        """
        self._visited = set()
        stack: list[tuple[str, Iterator[os.DirEntry[str]]]] = []
        yield from self._enter(self._root, stack)

        while stack:
            directory, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                yield FileEvent(path=directory, kind=EventKind.DIR_EXIT)
                continue

            try:
                kind = self._entry_kind(entry)
            except OSError as e:
                logger.warning("Cannot determine type of %s: %s", entry.path, e)
                yield _unreadable(entry.path, e)
                continue

            if kind is EventKind.DIR_ENTER:
                yield from self._enter(entry.path, stack)
            elif kind is EventKind.FILE:
                yield FileEvent(path=entry.path, kind=EventKind.FILE)

    def _enter(
        self,
        directory: str,
        stack: list[tuple[str, Iterator[os.DirEntry[str]]]],
    ) -> Iterator[FileEvent]:
        """List a directory and push its entries onto the stack.

        Yields DIR_ENTER on success, a single UNREADABLE event if the
        directory cannot be listed, or nothing for an already visited
        directory.
        """
        if self._follow_symlinks:
            try:
                st = os.stat(directory)
            except OSError as e:
                yield _unreadable(directory, e)
                return
            key = (st.st_dev, st.st_ino)
            if key in self._visited:
                logger.debug("Already visited, skipping: %s", directory)
                return
            self._visited.add(key)

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", directory, e)
            yield _unreadable(directory, e)
            return

        yield FileEvent(path=directory, kind=EventKind.DIR_ENTER)
        stack.append((directory, iter(entries)))

    def _entry_kind(self, entry: os.DirEntry[str]) -> EventKind | None:
        """Decide how to treat a directory entry.

        Returns:
            DIR_ENTER to descend, FILE to report, None to skip silently.
        """
        if entry.is_dir(follow_symlinks=False):
            return EventKind.DIR_ENTER

        if entry.is_symlink():
            # is_dir()/is_file() follow the link
            if entry.is_dir():
                return EventKind.DIR_ENTER if self._follow_symlinks else None
            if entry.is_file() or not os.path.exists(entry.path):
                # Dangling links are reported as files
                return EventKind.FILE
            # Link to a device, FIFO or socket
            return None

        if entry.is_file(follow_symlinks=False):
            return EventKind.FILE

        # Devices, FIFOs and sockets
        return None
