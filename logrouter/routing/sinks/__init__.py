"""Sink protocol for logrouter.

All sinks implement the ``BaseSink`` protocol: a ``sink_name`` property,
a ``receive(severity, message)`` method, and ``close()``.  The registry
calls ``receive`` on every sink resolved for a dispatched message and
calls ``close`` exactly once when it releases a sink.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logrouter.models.severity import Severity


@runtime_checkable
class BaseSink(Protocol):
    """Protocol that every logrouter sink must implement.

    Attributes
    ----------
    sink_name : str
        A human-readable identifier used in diagnostics
        (e.g. ``"file:logs/opers.log"``).
    """

    @property
    def sink_name(self) -> str:
        """Return the name of this sink."""
        ...

    def receive(self, severity: Severity, message: str) -> None:
        """Deliver one message.

        Sinks decide locally whether to act, typically by comparing
        *severity* against their own minimum.  Delivery errors should be
        reported through the sink's own channel; the registry logs and
        ignores anything raised here.
        """
        ...

    def close(self) -> None:
        """Release any resources held by the sink."""
        ...
