from __future__ import annotations

import logging
from pathlib import Path

import typer

from viewremote.cli.resolve import resolve_or_exit
from viewremote.config import Settings

logger = logging.getLogger(__name__)


def open_command(
    path: str,
    *,
    settings: Settings,
    remote: str | None,
    base_path: Path | None,
    dry_run: bool,
) -> None:
    """Open the web page of the repository containing the path in the default browser."""
    resolved = resolve_or_exit(path, settings=settings, remote=remote, base_path=base_path)
    if dry_run:
        typer.echo(f"Dry run: would open {resolved.url}")
        return

    typer.echo(f"Opening remote repository: {resolved.url}")
    exit_code = typer.launch(resolved.url)
    if exit_code != 0:
        logger.warning("Browser launcher exited with code %d", exit_code)
        typer.echo(f"Error: could not open {resolved.url}", err=True)
        raise typer.Exit(code=1)
