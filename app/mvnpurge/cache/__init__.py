"""Maven cache sweeping module.

This module provides root validation, failure-marker classification,
the cache walker, the sweeper that deletes markers, and report
rendering.
"""

from mvnpurge.cache.classifier import SENTINEL_SUFFIX, Classifier, classify, sibling_artifact
from mvnpurge.cache.models import (
    Classification,
    ErrorKind,
    ErrorRecord,
    EventKind,
    FileEvent,
    SweepReport,
    SweepRequest,
)
from mvnpurge.cache.reporter import report_to_dict, summary_lines
from mvnpurge.cache.sweeper import Sweeper, sweep
from mvnpurge.cache.validator import (
    EmptyPathError,
    RootNotADirectoryError,
    RootNotFoundError,
    RootValidationError,
    ValidationErrorKind,
    validate_root,
)
from mvnpurge.cache.walker import CacheWalker

__all__ = [
    "SENTINEL_SUFFIX",
    "CacheWalker",
    "Classification",
    "Classifier",
    "EmptyPathError",
    "ErrorKind",
    "ErrorRecord",
    "EventKind",
    "FileEvent",
    "RootNotADirectoryError",
    "RootNotFoundError",
    "RootValidationError",
    "SweepReport",
    "SweepRequest",
    "Sweeper",
    "ValidationErrorKind",
    "classify",
    "report_to_dict",
    "sibling_artifact",
    "summary_lines",
    "sweep",
    "validate_root",
]
