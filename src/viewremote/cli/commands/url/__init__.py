from __future__ import annotations

from pathlib import Path

import typer

from viewremote.cli.resolve import resolve_or_exit
from viewremote.config import Settings


def url_command(
    path: str, *, settings: Settings, remote: str | None, base_path: Path | None
) -> None:
    """Print the web URL of the repository containing the path."""
    resolved = resolve_or_exit(path, settings=settings, remote=remote, base_path=base_path)
    typer.echo(resolved.url)
