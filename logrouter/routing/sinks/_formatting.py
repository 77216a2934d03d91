"""Shared formatting helpers for logrouter sinks."""

from __future__ import annotations

from datetime import datetime

from logrouter.models.severity import Severity

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.DEBUG: "dim",
    Severity.VERBOSE: "cyan",
    Severity.INFO: "green",
    Severity.WARN: "yellow",
    Severity.ERROR: "bold red",
}


def format_line(
    severity: Severity, message: str, timestamp: datetime | None = None
) -> str:
    """Return a single log line, without trailing newline.

    Examples
    --------
    >>> format_line(Severity.WARN, "ban added")
    'WARN: ban added'
    """
    line = f"{severity.name}: {message}"
    if timestamp is not None:
        line = f"{timestamp.isoformat()} {line}"
    return line


def severity_style(severity: Severity) -> str:
    """Return the Rich style used to render *severity*."""
    return _SEVERITY_STYLES.get(severity, "")
