"""Main Typer application — imports and registers all CLI commands.

Entry point: ``logrouter`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from logrouter import __version__
from logrouter.cli.commands.emit import emit_cmd
from logrouter.cli.commands.routes import routes_cmd
from logrouter.config import config

app = typer.Typer(
    name="logrouter",
    help="logrouter: category-based log routing to pluggable sinks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _configure(
    log_level: str = typer.Option(
        None, "--log-level", help="Level for logrouter's own diagnostics."
    ),
) -> None:
    logging.basicConfig(level=(log_level or config.log_level).upper())


# Register subcommands
app.command(name="routes", help="Show the routing table for a profile.")(routes_cmd)
app.command(name="emit", help="Dispatch one message through a profile.")(emit_cmd)


@app.command(name="version", help="Show the logrouter version.")
def version_cmd() -> None:
    Console().print(f"logrouter {__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
