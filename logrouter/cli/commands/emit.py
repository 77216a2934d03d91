"""``logrouter emit PROFILE CATEGORY MESSAGE`` — dispatch one message.

Builds a registry from the profile, dispatches the message once, and
tears the registry down again so every sink is closed.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from logrouter.cli.commands._profile import load_profile_or_exit
from logrouter.config import config
from logrouter.models.severity import Severity
from logrouter.routing.builder import UnknownSinkTypeError, build_registry

console = Console()


def emit_cmd(
    profile: Path = typer.Argument(..., help="Routing profile JSON."),
    category: str = typer.Argument(..., help="Category tag, e.g. KILL."),
    message: str = typer.Argument(..., help="Message text."),
    level: str = typer.Option(
        "INFO",
        "--level",
        "-l",
        help="Severity: DEBUG, VERBOSE, INFO, WARN or ERROR.",
    ),
) -> None:
    """Dispatch a single message through the profile's routes."""
    try:
        severity = Severity.parse(level)
    except ValueError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)

    routing = load_profile_or_exit(profile, console)
    try:
        registry = build_registry(routing, config.max_message_length)
    except (UnknownSinkTypeError, ValueError) as exc:
        console.print(f"[bold red]Cannot build registry:[/bold red] {exc}")
        raise typer.Exit(code=1)

    with registry:
        targets = registry.resolve(category)
        registry.dispatch(category, severity, message)

    if targets:
        console.print(
            f"[green]Delivered[/green] {category} ({severity.name}) "
            f"to {len(targets)} sink(s)."
        )
    else:
        console.print(f"[dim]No route for {category}; message dropped.[/dim]")
