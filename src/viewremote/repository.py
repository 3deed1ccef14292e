from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"

CommandRunner = Callable[[Sequence[str], Path], "subprocess.CompletedProcess[str]"]


class RemoteStatus(Enum):
    FOUND = "found"
    NO_REMOTE = "no-remote"
    QUERY_FAILED = "query-failed"


@dataclass(frozen=True)
class RemoteQuery:
    status: RemoteStatus
    address: str | None = None
    detail: str | None = None


def run_command(args: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    logger.debug("Running command in %s: %s", cwd, " ".join(args))
    result = subprocess.run(
        list(args),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.stderr:
        for line in result.stderr.splitlines():
            logger.debug("stderr: %s", line)
    logger.debug("Command exited with code %d", result.returncode)
    return result


def read_remote_address(
    repo_root: Path,
    remote: str = DEFAULT_REMOTE,
    runner: CommandRunner = run_command,
) -> RemoteQuery:
    """Read the address configured for ``remote`` in the repository at ``repo_root``.

    Lists the configured remotes first so a repository without the remote is
    reported as ``NO_REMOTE`` rather than as a failed query.
    """
    listed = _run_git(runner, ["git", "remote"], repo_root)
    if isinstance(listed, RemoteQuery):
        return listed
    remotes = [line.strip() for line in listed.splitlines() if line.strip()]
    if remote not in remotes:
        logger.debug("Remote %r not configured in %s (have: %s)", remote, repo_root, remotes)
        return RemoteQuery(RemoteStatus.NO_REMOTE, detail=f"No remote named '{remote}'.")

    url = _run_git(runner, ["git", "remote", "get-url", remote], repo_root)
    if isinstance(url, RemoteQuery):
        return url
    address = url.strip()
    if not address:
        return RemoteQuery(RemoteStatus.QUERY_FAILED, detail=f"Empty address for remote '{remote}'.")
    return RemoteQuery(RemoteStatus.FOUND, address=address)


def _run_git(runner: CommandRunner, args: list[str], repo_root: Path) -> str | RemoteQuery:
    try:
        result = runner(args, repo_root)
    except OSError as exc:
        logger.warning("Could not run %s: %s", args[0], exc)
        return RemoteQuery(RemoteStatus.QUERY_FAILED, detail=str(exc))
    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"'{' '.join(args)}' exited with {result.returncode}"
        return RemoteQuery(RemoteStatus.QUERY_FAILED, detail=detail)
    return result.stdout
