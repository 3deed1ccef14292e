from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from viewremote.cli.commands import describe_command, open_command, url_command
from viewremote.config import ConfigError, Settings, load_settings

COMMAND_NAME = "View remote"
COMMAND_ID = "view-remote-repo"
COMMAND_ICON = "external-link"

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

app = typer.Typer(help="Open the hosting page of the repository containing a path.")


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to a YAML config file."
    ),
) -> None:
    _configure_logging(verbose)
    try:
        ctx.obj = load_settings(config)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("url")
def url_entry(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="File or directory inside a repository."),
    remote: Optional[str] = typer.Option(None, "--remote", "-r", help="Remote name to read."),
    base_path: Optional[Path] = typer.Option(
        None, "--base-path", help="Base directory for relative paths."
    ),
) -> None:
    url_command(path, settings=_settings(ctx), remote=remote, base_path=base_path)


@app.command("open")
def open_entry(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="File or directory inside a repository."),
    remote: Optional[str] = typer.Option(None, "--remote", "-r", help="Remote name to read."),
    base_path: Optional[Path] = typer.Option(
        None, "--base-path", help="Base directory for relative paths."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the URL without opening a browser."
    ),
) -> None:
    open_command(
        path,
        settings=_settings(ctx),
        remote=remote,
        base_path=base_path,
        dry_run=dry_run,
    )


@app.command("describe")
def describe_entry() -> None:
    describe_command(name=COMMAND_NAME, command_id=COMMAND_ID, icon=COMMAND_ICON)


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


def main() -> None:
    app()
