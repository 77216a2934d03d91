"""Routing profile models — which sinks subscribe to which categories."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from logrouter.models.severity import Severity


class RoutingSink(BaseModel):
    """A single sink declaration within a routing profile.

    One declaration may list several categories; the builder creates a
    separate sink instance for each of them.
    """

    model_config = ConfigDict(frozen=True)

    sink_type: str  # "file", "console", "memory"
    categories: list[str] = ["*"]
    min_severity: Severity = Severity.DEBUG
    config: dict[str, Any] = {}
    enabled: bool = True

    @field_validator("min_severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: Any) -> Severity:
        return Severity.parse(value)


class RoutingProfile(BaseModel):
    """The full set of sink declarations for one host process."""

    model_config = ConfigDict(frozen=True)

    sinks: list[RoutingSink] = []

    @classmethod
    def from_file(cls, path: Path | str) -> "RoutingProfile":
        """Load a profile from a JSON file."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))
