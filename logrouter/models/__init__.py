"""logrouter data models — severity levels and pydantic routing profiles."""

from logrouter.models.routing import RoutingProfile, RoutingSink
from logrouter.models.severity import Severity

__all__ = [
    "RoutingProfile",
    "RoutingSink",
    "Severity",
]
