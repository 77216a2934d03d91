"""logrouter: category-based log routing with wildcard fallback.

Producers dispatch a tagged, leveled message; the registry delivers it to
every sink subscribed to that tag, or to the ``"*"`` fallback sinks when
the tag has no subscribers.
"""

__version__ = "0.1.0"

from logrouter.models.severity import Severity
from logrouter.routing.registry import WILDCARD, LogRegistry
from logrouter.routing.sinks import BaseSink

__all__ = ["BaseSink", "LogRegistry", "Severity", "WILDCARD", "__version__"]
