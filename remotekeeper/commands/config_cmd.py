"""CLI commands under `remotekeeper config`."""

from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table

from ..config.settings import get_encryption_key, get_env_info, get_rclone_config_path
from ..services.encryption import ensure_config_encrypted
from ..utils.output import console

app = typer.Typer(help="rclone config file settings")


@app.command()
def encrypt(
    password: Optional[str] = typer.Option(
        None, "--password", "-p", help="Encryption password (defaults to REMOTEKEEPER_ENCRYPTION_KEY or a prompt)"
    ),
) -> None:
    """Encrypt the rclone config file if it is not encrypted yet."""
    password = password or get_encryption_key()
    if not password:
        password = typer.prompt("Encryption password", hide_input=True, confirmation_prompt=True)

    result = ensure_config_encrypted(password)
    if not result["success"]:
        console.print(f"[red]Error: {result['result']}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {result['result'] or 'Config encrypted'}")
    console.print(f"  Config: {get_rclone_config_path()}")


@app.command()
def env() -> None:
    """Show remotekeeper environment variables."""
    table = Table(title="Environment")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Description")

    for name, info in get_env_info().items():
        if not info["is_set"]:
            value = "[dim]unset[/dim]"
        elif not info["valid"]:
            value = f"[red]{info['value']} (invalid)[/red]"
        else:
            value = str(info["value"])
        table.add_row(name, value, str(info["default"] or ""), info["description"])

    console.print(table)
