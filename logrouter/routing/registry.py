"""LogRegistry — routes tagged, leveled messages to subscribed sinks.

Producers dispatch a message under a category.  Every sink subscribed to
that exact category receives it, in registration order.  When nothing is
subscribed to the category, every sink registered under the wildcard
marker receives it instead.  An explicit subscription suppresses the
wildcard fallback; the two sets are never both notified.

The registry owns every sink it holds.  A sink is closed exactly once,
when it is successfully deregistered or when the registry itself is
closed.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from logrouter.routing.formatting import MAX_MESSAGE_LENGTH, render_bounded

if TYPE_CHECKING:
    from types import TracebackType

    from logrouter.models.severity import Severity
    from logrouter.routing.sinks import BaseSink

logger = logging.getLogger(__name__)

WILDCARD = "*"


def _index_of(sinks: list[BaseSink], sink: BaseSink) -> int:
    """Return the position of the first identity match, or -1."""
    for position, candidate in enumerate(sinks):
        if candidate is sink:
            return position
    return -1


class LogRegistry:
    """Subscription table plus wildcard fallback list.

    Usage
    -----
    >>> from logrouter.models.severity import Severity
    >>> from logrouter.routing.sinks.memory import MemorySink
    >>> registry = LogRegistry()
    >>> opers = MemorySink("opers")
    >>> registry.register("KILL", opers)
    True
    >>> registry.dispatch("KILL", Severity.INFO, "oper killed user")
    >>> opers.messages
    ['oper killed user']

    Parameters
    ----------
    max_message_length:
        Upper bound, in characters, on messages rendered by
        ``dispatch_formatted``.
    """

    def __init__(self, max_message_length: int = MAX_MESSAGE_LENGTH) -> None:
        if max_message_length < 0:
            raise ValueError(
                f"max_message_length must be non-negative, got {max_message_length}"
            )
        self._max_message_length = max_message_length
        self._streams: dict[str, list[BaseSink]] = {}
        self._global_streams: list[BaseSink] = []
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------

    def register(self, category: str, sink: BaseSink) -> bool:
        """Subscribe *sink* to *category* and take ownership of it.

        Duplicate registrations are kept; a sink registered twice under a
        category receives each message twice.  Always returns ``True``.
        """
        with self._lock:
            self._streams.setdefault(category, []).append(sink)
            if category == WILDCARD:
                self._global_streams.append(sink)

        logger.debug("Registered %s under %r", _describe(sink), category)
        return True

    def deregister(self, category: str, sink: BaseSink) -> bool:
        """Unsubscribe *sink* from *category* and close it.

        The first occurrence of *sink* is dropped from the wildcard
        fallback list whatever *category* is given.  Separately, if *sink*
        is subscribed under *category*, that subscription is removed, the
        category is dropped once it has no sinks left, the sink is closed,
        and ``True`` is returned.  Otherwise ``False`` is returned and the
        sink is left open, even if it was removed from the fallback list.
        """
        with self._lock:
            position = _index_of(self._global_streams, sink)
            if position >= 0:
                del self._global_streams[position]

            sinks = self._streams.get(category)
            position = _index_of(sinks, sink) if sinks is not None else -1
            if position < 0:
                found = False
            else:
                found = True
                del sinks[position]
                if not sinks:
                    del self._streams[category]

        if not found:
            logger.debug("Deregister: %s not found under %r", _describe(sink), category)
            return False

        logger.debug("Deregistered %s from %r", _describe(sink), category)
        self._release(sink)
        return True

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, category: str, severity: Severity, message: str) -> None:
        """Deliver *message* to the sinks resolved for *category*.

        Never raises.  A sink that raises is logged and skipped; delivery
        continues with the next sink.
        """
        targets = self.resolve(category)
        if not targets:
            logger.debug("No sinks for %r, message dropped", category)
            return

        for sink in targets:
            try:
                sink.receive(severity, message)
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "Sink %s failed for category %r: %s",
                    _describe(sink),
                    category,
                    exc,
                )

    def dispatch_formatted(
        self, category: str, severity: Severity, template: str, *args: Any
    ) -> None:
        """Render *template* with *args*, bound its length, then dispatch."""
        message = render_bounded(template, *args, limit=self._max_message_length)
        self.dispatch(category, severity, message)

    def resolve(self, category: str) -> tuple[BaseSink, ...]:
        """Return the sinks a message under *category* would reach.

        Exact subscribers when there are any, otherwise the wildcard
        fallback sinks.  The result is a snapshot.
        """
        with self._lock:
            sinks = self._streams.get(category)
            if sinks is not None:
                return tuple(sinks)
            return tuple(self._global_streams)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def categories(self) -> list[str]:
        """Return the categories with at least one sink, in first-use order."""
        with self._lock:
            return list(self._streams)

    def subscribers(self, category: str) -> tuple[BaseSink, ...]:
        """Return the sinks subscribed to exactly *category*."""
        with self._lock:
            return tuple(self._streams.get(category, ()))

    def wildcard_sinks(self) -> tuple[BaseSink, ...]:
        """Return the fallback sinks, in registration order."""
        with self._lock:
            return tuple(self._global_streams)

    @property
    def max_message_length(self) -> int:
        return self._max_message_length

    def __contains__(self, category: object) -> bool:
        with self._lock:
            return category in self._streams

    def __len__(self) -> int:
        with self._lock:
            return sum(len(sinks) for sinks in self._streams.values())

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close every sink still held and forget all subscriptions.

        Each distinct sink is closed once, however many times it was
        registered.  Safe to call more than once.
        """
        with self._lock:
            held = [sink for sinks in self._streams.values() for sink in sinks]
            held.extend(self._global_streams)
            self._streams.clear()
            self._global_streams.clear()

        seen: set[int] = set()
        for sink in held:
            if id(sink) in seen:
                continue
            seen.add(id(sink))
            self._release(sink)

        if seen:
            logger.debug("Registry closed, released %d sink(s)", len(seen))

    def __enter__(self) -> LogRegistry:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @staticmethod
    def _release(sink: BaseSink) -> None:
        try:
            sink.close()
        except Exception as exc:  # noqa: BLE001
            logger.error("Sink %s failed to close: %s", _describe(sink), exc)


def _describe(sink: Any) -> str:
    """Return a sink's name for log messages, tolerating broken sinks."""
    try:
        return str(sink.sink_name)
    except Exception:  # noqa: BLE001
        return object.__repr__(sink)
