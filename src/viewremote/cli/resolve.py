from __future__ import annotations

from functools import partial
from pathlib import Path

import typer

from viewremote.config import Settings
from viewremote.locator import has_repo_marker
from viewremote.resolver import (
    ResolvedUrl,
    UnresolvedReason,
    resolve_repository_web_url,
)

_REASON_MESSAGES = {
    UnresolvedReason.NOT_A_REPO: "Not inside a repository",
    UnresolvedReason.NO_REMOTE: "No remote configured",
    UnresolvedReason.QUERY_FAILED: "Could not read the remote address",
}


def resolve_or_exit(
    path: str,
    *,
    settings: Settings,
    remote: str | None,
    base_path: Path | None,
) -> ResolvedUrl:
    resolution = resolve_repository_web_url(
        path,
        base_path=base_path,
        remote=remote or settings.remote,
        is_repo_root=partial(has_repo_marker, markers=settings.markers),
    )
    if isinstance(resolution, ResolvedUrl):
        return resolution

    message = f"{_REASON_MESSAGES[resolution.reason]}: {path}"
    if resolution.detail:
        message = f"{message} ({resolution.detail})"
    typer.echo(message, err=True)
    raise typer.Exit(code=1)
