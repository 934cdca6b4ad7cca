"""Failed-download marker classification.

Maven writes ``<artifact>.lastUpdated`` next to an artifact it could not
fetch. While the marker exists, later builds do not retry the download.
"""

import logging
import os

from mvnpurge.cache.models import Classification

logger = logging.getLogger(__name__)

SENTINEL_SUFFIX = ".lastUpdated"


def is_sentinel_name(name: str) -> bool:
    """Check whether a file name marks a failed download (case-sensitive)."""
    return name.endswith(SENTINEL_SUFFIX)


def classify(path: str) -> Classification:
    """Classify a file by its final path component.

    Performs no I/O.

    Args:
        path: Path of a non-directory entry.

    Returns:
        SENTINEL_DELETE for failure markers, SKIP otherwise.
    """
    if is_sentinel_name(os.path.basename(path)):
        return Classification.SENTINEL_DELETE
    return Classification.SKIP


def sibling_artifact(path: str) -> str | None:
    """Derive the artifact path that a marker stands in for.

    ``foo-1.2.jar.lastUpdated`` maps to ``foo-1.2.jar`` in the same
    directory.

    Args:
        path: Path of a failure marker.

    Returns:
        Path of the sibling artifact, or None if the marker name has
        nothing before the suffix or is not a marker at all.
    """
    directory, name = os.path.split(path)
    if not is_sentinel_name(name):
        return None
    artifact_name = name[: -len(SENTINEL_SUFFIX)]
    if not artifact_name:
        return None
    return os.path.join(directory, artifact_name)


class Classifier:
    """Applies the marker deletion policy.

    With the default policy every marker is deleted. The conservative
    policy keeps a marker when its sibling artifact is already present.

    Attributes:
        _conservative: If True, check for the sibling artifact before deletion.
    """

    def __init__(self, conservative: bool = False) -> None:
        self._conservative = conservative

    @property
    def conservative(self) -> bool:
        return self._conservative

    def classify(self, path: str) -> Classification:
        """Classify a file under the active policy.

        Args:
            path: Path of a non-directory entry.

        Returns:
            Classification for the file.
        """
        verdict = classify(path)
        if verdict is Classification.SKIP or not self._conservative:
            return verdict

        artifact = sibling_artifact(path)
        if artifact is not None and os.path.lexists(artifact):
            logger.debug("Keeping %s: artifact %s is present", path, artifact)
            return Classification.SKIP

        return verdict
