from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from viewremote.locator import find_repo_root, has_repo_marker
from viewremote.remote_url import normalize
from viewremote.repository import (
    DEFAULT_REMOTE,
    RemoteQuery,
    RemoteStatus,
    read_remote_address,
)

logger = logging.getLogger(__name__)


class UnresolvedReason(Enum):
    NOT_A_REPO = "not-a-repo"
    NO_REMOTE = "no-remote"
    QUERY_FAILED = "query-failed"


@dataclass(frozen=True)
class ResolvedUrl:
    url: str
    repo_root: Path


@dataclass(frozen=True)
class Unresolved:
    reason: UnresolvedReason
    detail: str | None = None


Resolution = Union[ResolvedUrl, Unresolved]


def resolve_repository_web_url(
    path: str | Path,
    *,
    base_path: Path | None = None,
    remote: str = DEFAULT_REMOTE,
    is_repo_root: Callable[[Path], bool] = has_repo_marker,
    read_remote: Callable[[Path, str], RemoteQuery] = read_remote_address,
) -> Resolution:
    """Resolve the hosting page URL of the repository containing ``path``.

    Relative paths are taken relative to ``base_path`` (the current directory
    by default). The remote is only queried once a repository root is found.
    """
    if not str(path):
        return Unresolved(UnresolvedReason.NOT_A_REPO)
    target = Path(path)
    if base_path is not None and not target.is_absolute():
        target = base_path / target

    repo_root = find_repo_root(target, is_repo_root)
    if repo_root is None:
        return Unresolved(UnresolvedReason.NOT_A_REPO)

    query = read_remote(repo_root, remote)
    if query.status is RemoteStatus.NO_REMOTE:
        return Unresolved(UnresolvedReason.NO_REMOTE, query.detail)
    if query.status is RemoteStatus.QUERY_FAILED or not query.address:
        logger.debug("Remote query failed in %s: %s", repo_root, query.detail)
        return Unresolved(UnresolvedReason.QUERY_FAILED, query.detail)

    url = normalize(query.address)
    logger.debug("Normalized %r to %r", query.address, url)
    return ResolvedUrl(url=url, repo_root=repo_root)
