"""CLI commands for rclone remotes under `remotekeeper remote`."""

from __future__ import annotations

import logging
from typing import Any, Optional

import typer
from rich.table import Table

from ..exceptions import ProviderNotFoundError, UnsupportedStorageType
from ..services.providers import list_providers, resolve
from ..services.remote_manager import RemoteManager
from ..services.remote_types import RemoteDescriptor, RemoteResult
from ..utils.output import console, print_json

logger = logging.getLogger(__name__)

app = typer.Typer(help="Manage rclone remotes")


def get_manager() -> RemoteManager:
    """RemoteManager used by the commands."""
    return RemoteManager()


def parse_pairs(pairs: Optional[list[str]], option: str) -> dict[str, str]:
    """Turn repeated ``key=value`` options into a dict, keeping their order."""
    parsed: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            console.print(f"[red]Error: {option} expects key=value, got '{pair}'[/red]")
            raise typer.Exit(1)
        parsed[key.strip()] = value
    return parsed


def _unwrap(result: RemoteResult[Any]) -> Any:
    """Return a successful payload or print the error and exit 1."""
    if not result["success"]:
        console.print(f"[red]Error: {result['result']}[/red]")
        raise typer.Exit(1)
    return result["result"]


def _format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"


@app.command()
def providers(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List the storage types remotes can be created for."""
    descriptors = list_providers()

    if json_output:
        print_json([d.describe() for d in descriptors])
        return

    table = Table(title=f"Storage providers ({len(descriptors)})")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Auth")
    table.add_column("Features", style="dim")

    for d in descriptors:
        table.add_row(d.type, d.display_name, ", ".join(sorted(d.auth_types)), ", ".join(d.features.enabled()))

    console.print(table)


@app.command()
def info(
    storage_type: str = typer.Argument(..., help="Storage type, e.g. s3 or gofile"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show a storage type's auth types and the settings it accepts."""
    try:
        descriptor = resolve(storage_type)
    except ProviderNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    if json_output:
        print_json(descriptor.describe())
        return

    console.print(f"[bold]{descriptor.display_name}[/bold] ([cyan]{descriptor.type}[/cyan])")
    console.print(f"Auth: {', '.join(sorted(descriptor.auth_types))}")
    console.print(f"Features: {', '.join(descriptor.features.enabled()) or 'none'}")
    console.print(f"Settings (--set): {', '.join(descriptor.settings)}", markup=False)
    for label, url in descriptor.docs:
        console.print(f"  {label}: {url}", markup=False, highlight=False)


@app.command()
def create(
    storage_type: str = typer.Argument(..., help="Storage type, e.g. s3 or onedrive"),
    name: str = typer.Argument(..., help="Name of the new remote"),
    auth_type: str = typer.Option("client", "--auth-type", "-a", help="client, oauth, password or noauth"),
    cred: Optional[list[str]] = typer.Option(None, "--cred", "-c", help="Credential as key=value (repeatable)"),
    setting: Optional[list[str]] = typer.Option(None, "--set", "-s", help="Extra setting as key=value (repeatable)"),
) -> None:
    """Create a remote and verify it.

    A remote that fails verification is removed again.

    Examples:
        remotekeeper remote create s3 backup1 -c accessKeyId=AKIA -c secretKey=... -c region=us-east-1
        remotekeeper remote create onedrive od1 -a oauth -c token='{"access_token": "..."}'
    """
    remote = RemoteDescriptor(
        name=name,
        type=storage_type,
        auth_type=auth_type,
        credentials=parse_pairs(cred, "--cred"),
        settings=parse_pairs(setting, "--set") or None,
    )

    try:
        result = get_manager().create_remote(
            remote.type, remote.name, remote.auth_type, remote.credentials, remote.settings
        )
    except UnsupportedStorageType as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    _unwrap(result)
    console.print(f"[green]Created remote[/green] [cyan]{name}[/cyan] ({storage_type})")


@app.command()
def update(
    name: str = typer.Argument(..., help="Remote to update"),
    setting: Optional[list[str]] = typer.Option(None, "--set", "-s", help="New setting as key=value (repeatable)"),
    old: Optional[list[str]] = typer.Option(
        None, "--old", "-o", help="Complete previous setting as key=value, restored on failure (repeatable)"
    ),
) -> None:
    """Update a remote's settings, rolling back if it stops working."""
    new_settings = parse_pairs(setting, "--set")
    if not new_settings:
        console.print("[red]Error: nothing to update, pass at least one --set[/red]")
        raise typer.Exit(1)

    _unwrap(get_manager().update_remote(name, new_settings, parse_pairs(old, "--old")))
    console.print(f"[green]Updated remote[/green] [cyan]{name}[/cyan]")


@app.command()
def delete(
    name: str = typer.Argument(..., help="Remote to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a remote from the rclone config."""
    if not force and not typer.confirm(f"Delete remote '{name}'?"):
        console.print("[yellow]Cancelled[/yellow]")
        return

    _unwrap(get_manager().delete_remote(name))
    console.print(f"[green]Deleted remote[/green] [cyan]{name}[/cyan]")


@app.command()
def show(
    name: str = typer.Argument(..., help="Remote to show"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show a remote's stored configuration."""
    config = _unwrap(get_manager().get_remote_config(name))

    if json_output:
        print_json(config)
        return

    table = Table(title=f"Remote {config.get('name', name)}")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in config.items():
        if key != "name":
            table.add_row(key, value)
    console.print(table)


@app.command()
def verify(name: str = typer.Argument(..., help="Remote to check")) -> None:
    """Check that rclone can list the remote."""
    _unwrap(get_manager().verify_remote(name))
    console.print(f"[green]✓[/green] Remote [cyan]{name}[/cyan] is reachable")


@app.command(name="list")
def list_remotes() -> None:
    """List configured remotes."""
    output = _unwrap(get_manager().list_remotes())
    if not output:
        console.print("No remotes configured.")
        return
    console.print(output, markup=False, highlight=False)


@app.command()
def browse(
    name: str = typer.Argument(..., help="Remote to browse"),
    path: str = typer.Argument("/", help="Path inside the remote"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List a directory of a remote."""
    listing = _unwrap(get_manager().browse_remote(name, path))

    if json_output:
        print_json(listing)
        return

    items = listing["items"]
    if not items:
        console.print(f"{name}:{path} is empty.")
        return

    table = Table(title=f"{name}:{listing['path']}")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Modified", style="dim")

    for item in sorted(items, key=lambda i: (i["type"] != "dir", i["name"].lower())):
        size = "" if item["type"] == "dir" else _format_size(item["size"] or 0)
        table.add_row(item["name"], item["type"], size, item["modTime"][:19])

    console.print(table)


@app.command()
def cat(
    name: str = typer.Argument(..., help="Remote to read from"),
    path: str = typer.Argument(..., help="File path inside the remote"),
) -> None:
    """Print a file from a remote."""
    typer.echo(_unwrap(get_manager().get_remote_file_content(name, path)))


@app.command()
def link(
    name: str = typer.Argument(..., help="Remote holding the file"),
    path: str = typer.Argument(..., help="File path inside the remote"),
) -> None:
    """Print a public download link for a file."""
    typer.echo(_unwrap(get_manager().get_download_link(name, path)))
