"""logrouter CLI — Typer-based command-line interface.

Provides the ``logrouter`` command with subcommands for inspecting a
routing profile and emitting messages through it.

All output uses Rich for formatted terminal display.
"""
