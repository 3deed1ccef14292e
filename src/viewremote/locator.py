from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

REPO_MARKERS = (".git",)


def has_repo_marker(directory: Path, markers: Iterable[str] = REPO_MARKERS) -> bool:
    # ".git" is a directory in a plain clone and a file in worktrees and submodules.
    return any((directory / marker).exists() for marker in markers)


def find_repo_root(
    start_path: str | Path,
    is_repo_root: Callable[[Path], bool] = has_repo_marker,
) -> Path | None:
    """Walk upward from ``start_path`` to the nearest directory holding a repository marker.

    A file starts the walk at its parent directory. Returns ``None`` when the
    filesystem root is reached without a match.
    """
    if not str(start_path):
        return None

    current = Path(os.path.abspath(start_path))
    if current.is_file():
        current = current.parent

    while True:
        if is_repo_root(current):
            logger.debug("Found repository root at %s", current)
            return current
        parent = current.parent
        if parent == current:
            logger.debug("No repository marker found above %s", start_path)
            return None
        current = parent
