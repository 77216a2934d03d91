"""Build a populated LogRegistry from a RoutingProfile.

Each enabled sink declaration yields one fresh sink instance per listed
category, so deregistering one subscription never closes a sink that is
still subscribed elsewhere.  Several categories can therefore share a log
file: each gets its own append handle on the same path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from logrouter.models.routing import RoutingProfile, RoutingSink
from logrouter.routing.formatting import MAX_MESSAGE_LENGTH
from logrouter.routing.registry import LogRegistry
from logrouter.routing.sinks import BaseSink
from logrouter.routing.sinks.console import ConsoleSink
from logrouter.routing.sinks.local_file import LocalFileSink
from logrouter.routing.sinks.memory import MemorySink

logger = logging.getLogger(__name__)

SinkFactory = Callable[[RoutingSink], BaseSink]


class UnknownSinkTypeError(ValueError):
    """Raised when a profile names a sink type with no registered factory."""


def _file_sink(entry: RoutingSink) -> BaseSink:
    try:
        path = entry.config["path"]
    except KeyError:
        raise ValueError("file sink requires a 'path' in its config") from None
    return LocalFileSink(
        Path(path),
        min_severity=entry.min_severity,
        timestamps=bool(entry.config.get("timestamps", True)),
    )


def _console_sink(entry: RoutingSink) -> BaseSink:
    return ConsoleSink(min_severity=entry.min_severity)


def _memory_sink(entry: RoutingSink) -> BaseSink:
    return MemorySink(
        name=str(entry.config.get("name", "memory")),
        min_severity=entry.min_severity,
    )


_FACTORIES: dict[str, SinkFactory] = {
    "file": _file_sink,
    "console": _console_sink,
    "memory": _memory_sink,
}


def register_sink_type(name: str, factory: SinkFactory) -> None:
    """Make *name* usable as ``sink_type`` in routing profiles."""
    _FACTORIES[name] = factory


def available_sink_types() -> list[str]:
    """Return the sink type names profiles may use."""
    return sorted(_FACTORIES)


def create_sink(entry: RoutingSink) -> BaseSink:
    """Instantiate one sink for *entry*.

    Raises
    ------
    UnknownSinkTypeError
        If ``entry.sink_type`` has no registered factory.
    """
    try:
        factory = _FACTORIES[entry.sink_type]
    except KeyError:
        raise UnknownSinkTypeError(
            f"Unknown sink type {entry.sink_type!r}; "
            f"expected one of {', '.join(available_sink_types())}"
        ) from None
    return factory(entry)


def build_registry(
    profile: RoutingProfile, max_message_length: int = MAX_MESSAGE_LENGTH
) -> LogRegistry:
    """Return a new registry with every enabled declaration in *profile* registered.

    Sinks are created before anything is registered, so a bad declaration
    leaves no half-built registry behind.
    """
    pending: list[tuple[str, BaseSink]] = []
    for entry in profile.sinks:
        if not entry.enabled:
            logger.debug("Skipping disabled %s sink", entry.sink_type)
            continue
        for category in entry.categories:
            pending.append((category, create_sink(entry)))

    registry = LogRegistry(max_message_length=max_message_length)
    for category, sink in pending:
        registry.register(category, sink)

    logger.info(
        "Built registry: %d subscription(s) across %d categories",
        len(pending),
        len(registry.categories()),
    )
    return registry
