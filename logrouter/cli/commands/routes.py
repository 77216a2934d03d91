"""``logrouter routes PROFILE`` — show which sinks each category reaches."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from logrouter.cli.commands._profile import load_profile_or_exit
from logrouter.config import config
from logrouter.routing.builder import UnknownSinkTypeError, build_registry
from logrouter.routing.registry import WILDCARD

console = Console()


def routes_cmd(
    profile: Path = typer.Argument(
        None,
        help="Routing profile JSON (defaults to LOGROUTER_DEFAULT_PROFILE).",
    ),
) -> None:
    """Print the routing table built from a profile."""
    profile_path = profile or config.default_profile
    routing = load_profile_or_exit(profile_path, console)

    try:
        registry = build_registry(routing, config.max_message_length)
    except (UnknownSinkTypeError, ValueError) as exc:
        console.print(f"[bold red]Cannot build registry:[/bold red] {exc}")
        raise typer.Exit(code=1)

    with registry:
        categories = registry.categories()
        if not categories:
            console.print("[dim]No sinks configured.[/dim]")
            return

        table = Table(title=f"Routes: {profile_path}")
        table.add_column("Category", style="cyan")
        table.add_column("Sinks")

        for category in categories:
            names = ", ".join(s.sink_name for s in registry.subscribers(category))
            label = f"{category} [dim](fallback)[/dim]" if category == WILDCARD else category
            table.add_row(label, names)

        console.print(table)

        if not registry.wildcard_sinks():
            console.print(
                "[yellow]No wildcard sinks:[/yellow] "
                "messages for unlisted categories are dropped."
            )
