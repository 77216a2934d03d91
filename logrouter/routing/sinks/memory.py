"""In-memory sink — keeps every accepted message in a list.

Useful as a test probe and for embedding hosts that want to inspect
recent traffic without touching disk.
"""

from __future__ import annotations

from logrouter.models.severity import Severity


class MemorySink:
    """Records ``(severity, message)`` pairs at or above *min_severity*.

    Parameters
    ----------
    name:
        Value reported as ``sink_name``.
    min_severity:
        Messages below this level are dropped.
    """

    def __init__(
        self, name: str = "memory", min_severity: Severity = Severity.DEBUG
    ) -> None:
        self._name = name
        self._min_severity = min_severity
        self.received: list[tuple[Severity, str]] = []
        self.close_count = 0

    @property
    def sink_name(self) -> str:
        return self._name

    @property
    def closed(self) -> bool:
        return self.close_count > 0

    @property
    def messages(self) -> list[str]:
        """Return just the message texts, in arrival order."""
        return [message for _, message in self.received]

    def receive(self, severity: Severity, message: str) -> None:
        if self.closed or severity < self._min_severity:
            return
        self.received.append((severity, message))

    def close(self) -> None:
        self.close_count += 1

    def __repr__(self) -> str:
        return f"MemorySink(name={self._name!r}, received={len(self.received)})"
