"""Typer command groups for the remotekeeper CLI."""
