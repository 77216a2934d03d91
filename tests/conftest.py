"""Shared test fixtures for logrouter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from logrouter.models.severity import Severity
from logrouter.routing.registry import LogRegistry
from logrouter.routing.sinks.memory import MemorySink


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def registry() -> LogRegistry:
    """Provide a fresh, empty LogRegistry."""
    return LogRegistry()


@pytest.fixture
def make_sink() -> Callable[..., MemorySink]:
    """Factory fixture: build a MemorySink probe."""

    def _factory(
        name: str = "probe", min_severity: Severity = Severity.DEBUG
    ) -> MemorySink:
        return MemorySink(name=name, min_severity=min_severity)

    return _factory


# ---------------------------------------------------------------------------
# Misbehaving sinks — shared across test modules
# ---------------------------------------------------------------------------


class ExplodingSink:
    """A sink whose receive always raises."""

    def __init__(self, name: str = "exploding", exc_type: type = RuntimeError):
        self._name = name
        self._exc_type = exc_type
        self.close_count = 0

    @property
    def sink_name(self) -> str:
        return self._name

    def receive(self, severity: Severity, message: str) -> None:
        raise self._exc_type(f"{self._name} exploded!")

    def close(self) -> None:
        self.close_count += 1


class BadCloseSink(MemorySink):
    """A sink whose close always raises (after counting the call)."""

    def close(self) -> None:
        super().close()
        raise OSError("close failed")


@pytest.fixture
def exploding_sink() -> ExplodingSink:
    return ExplodingSink()


@pytest.fixture
def bad_close_sink() -> BadCloseSink:
    return BadCloseSink(name="bad-close")
