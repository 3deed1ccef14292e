from __future__ import annotations

import typer


def describe_command(*, name: str, command_id: str, icon: str) -> None:
    typer.echo(f"name: {name}")
    typer.echo(f"id: {command_id}")
    typer.echo(f"icon: {icon}")
