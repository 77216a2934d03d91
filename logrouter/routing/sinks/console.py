"""Console sink — prints messages through a Rich console, styled by level."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from logrouter.models.severity import Severity
from logrouter.routing.sinks._formatting import format_line, severity_style


class ConsoleSink:
    """Prints messages at or above *min_severity*.

    Parameters
    ----------
    console:
        Rich console to print to.  Defaults to a console on stderr.
    min_severity:
        Messages below this level are dropped.
    """

    def __init__(
        self,
        console: Console | None = None,
        min_severity: Severity = Severity.DEBUG,
    ) -> None:
        self._console = console or Console(stderr=True)
        self._min_severity = min_severity
        self._closed = False

    @property
    def sink_name(self) -> str:
        return "console"

    @property
    def closed(self) -> bool:
        return self._closed

    def receive(self, severity: Severity, message: str) -> None:
        if self._closed or severity < self._min_severity:
            return
        self._console.print(
            Text(format_line(severity, message), style=severity_style(severity))
        )

    def close(self) -> None:
        self._closed = True
