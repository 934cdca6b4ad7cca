"""Cache root validation.

Turns a user-supplied root string into an absolute path that exists
and is a directory. Symlinks in the final component are kept as-is so
a symlinked repository root can be targeted.
"""

import os
from enum import Enum
from pathlib import Path


class ValidationErrorKind(str, Enum):
    """Reason a cache root was rejected."""

    EMPTY_PATH = "empty_path"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"


class RootValidationError(Exception):
    """Base exception for cache root validation errors."""

    kind: ValidationErrorKind

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class EmptyPathError(RootValidationError):
    """Raised when the root is empty or whitespace only."""

    kind = ValidationErrorKind.EMPTY_PATH


class RootNotFoundError(RootValidationError):
    """Raised when the root does not exist."""

    kind = ValidationErrorKind.NOT_FOUND


class RootNotADirectoryError(RootValidationError):
    """Raised when the root exists but is not a directory."""

    kind = ValidationErrorKind.NOT_A_DIRECTORY


def validate_root(raw: str) -> Path:
    """Validate and normalize a cache root path.

    Relative paths are resolved against the current working directory
    and ``~`` is expanded. The path is made absolute without resolving
    symlinks, so a symlinked root stays as given.

    Args:
        raw: Path string as entered by the user.

    Returns:
        Absolute path to an existing directory.

    Raises:
        EmptyPathError: If the input is empty or whitespace only.
        RootNotFoundError: If the path does not exist.
        RootNotADirectoryError: If the path exists but is not a directory.
    """
    if not raw or not raw.strip():
        raise EmptyPathError("Maven repository path is empty")

    path = Path(os.path.abspath(Path(raw).expanduser()))

    # exists()/is_dir() follow the final symlink so a linked root is accepted
    if not path.exists():
        raise RootNotFoundError(f"Path does not exist: {path}", str(path))

    if not path.is_dir():
        raise RootNotADirectoryError(f"Path is not a directory: {path}", str(path))

    return path
