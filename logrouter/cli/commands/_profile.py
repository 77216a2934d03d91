"""Shared profile loading for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from logrouter.models.routing import RoutingProfile


def load_profile_or_exit(path: Path, console: Console) -> RoutingProfile:
    """Load *path* as a RoutingProfile, exiting with code 1 on failure."""
    if not path.exists():
        console.print(f"[bold red]Profile not found:[/bold red] {path}")
        raise typer.Exit(code=1)
    try:
        return RoutingProfile.from_file(path)
    except (ValidationError, ValueError) as exc:
        console.print(f"[bold red]Invalid profile {path}:[/bold red] {exc}")
        raise typer.Exit(code=1)
