#!/usr/bin/env python3
"""
Main CLI entry point for remotekeeper
"""

import typer

from remotekeeper import __version__
from remotekeeper.commands import config_cmd, remotes
from remotekeeper.config.settings import get_log_level, validate_all_env_vars
from remotekeeper.utils.logging import setup_logging
from remotekeeper.utils.output import console


# Version command
def version():
    """Show remotekeeper version"""
    typer.echo(f"remotekeeper version {__version__}")


# Callback for global options
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    remotekeeper - manage rclone remotes for backup storage

    [bold]Examples:[/bold]

    List supported storage types:
        [cyan]remotekeeper remote providers[/cyan]

    Create and verify an S3 remote:
        [cyan]remotekeeper remote create s3 backup1 -c accessKeyId=AKIA... -c secretKey=... -c region=us-east-1[/cyan]

    Browse it:
        [cyan]remotekeeper remote browse backup1 /[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    errors = validate_all_env_vars()
    if errors:
        for error in errors:
            console.print(f"[red]Error: {error}[/red]")
        raise typer.Exit(1)

    setup_logging(verbose=verbose, quiet=quiet, level=get_log_level())


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(
        name="remotekeeper",
        help="Manage rclone remotes for backup storage",
        rich_markup_mode="rich",
        no_args_is_help=True,
    )
    app.add_typer(remotes.app, name="remote", help="Create, verify and browse remotes")
    app.add_typer(config_cmd.app, name="config", help="rclone config file settings")
    app.command()(version)
    app.callback()(main)
    return app


# Create the app instance
app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
