"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at a throwaway directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def maven_repo(tmp_path: Path) -> Path:
    """A small repository with two artifacts and their failure markers.

    Layout::

        repository/a/foo-1.0.jar
        repository/a/foo-1.0.jar.lastUpdated
        repository/b/bar.pom
        repository/b/bar.pom.lastUpdated
    """
    root = tmp_path / "repository"
    (root / "a").mkdir(parents=True)
    (root / "b").mkdir()
    (root / "a" / "foo-1.0.jar").write_bytes(b"PK\x03\x04jar-bytes")
    (root / "a" / "foo-1.0.jar.lastUpdated").write_text(
        "#NOTE: This is a Maven Resolver internal implementation file\n"
        "https\\://repo.maven.apache.org/maven2/.lastUpdated=1700000000000\n"
    )
    (root / "b" / "bar.pom").write_text("<project/>\n")
    (root / "b" / "bar.pom.lastUpdated").write_text("central.error=Could not transfer\n")
    return root


def _snapshot(root: Path) -> dict[str, tuple[bytes, int, float]]:
    """Capture content, mode and mtime of every non-directory below root.

    Symlinked directories are not followed.
    """
    result: dict[str, tuple[bytes, int, float]] = {}
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            path = Path(dirpath) / name
            if path.is_symlink():
                st = path.lstat()
                result[str(path.relative_to(root))] = (
                    os.readlink(path).encode(),
                    st.st_mode,
                    st.st_mtime,
                )
                continue
            st = path.stat()
            result[str(path.relative_to(root))] = (path.read_bytes(), st.st_mode, st.st_mtime)
    return result


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, tuple[bytes, int, float]]]:
    """Return a function that snapshots every file below a root."""
    return _snapshot


@pytest.fixture
def deep_tree(tmp_path: Path) -> Iterator[tuple[Path, Path]]:
    """A single chain of nested directories deeper than the recursion limit.

    Yields (root, marker) where marker is a ``.lastUpdated`` file at the
    bottom. The chain is removed bottom-up afterwards so cleanup does not
    depend on a recursive rmtree.
    """
    depth = sys.getrecursionlimit() + 100
    root = tmp_path / "deep"
    if len(str(root)) + 2 * depth + 32 > 4000:
        pytest.skip("nested path would exceed PATH_MAX")
    root.mkdir()
    leaf = root
    for _ in range(depth):
        leaf = leaf / "d"
        leaf.mkdir()
    marker = leaf / "x.lastUpdated"
    marker.write_text("x")

    yield root, marker

    for name in os.listdir(leaf):
        os.unlink(leaf / name)
    current = leaf
    while current != tmp_path:
        os.rmdir(current)
        current = current.parent
