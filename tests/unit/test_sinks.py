"""Unit tests for the bundled sinks: memory, local file, console."""

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console

from logrouter.models.severity import Severity
from logrouter.routing.sinks import BaseSink
from logrouter.routing.sinks._formatting import format_line, severity_style
from logrouter.routing.sinks.console import ConsoleSink
from logrouter.routing.sinks.local_file import LocalFileSink
from logrouter.routing.sinks.memory import MemorySink


# ---------------------------------------------------------------------------
# Test: formatting helpers
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_line_without_timestamp(self):
        assert format_line(Severity.INFO, "oper killed user") == "INFO: oper killed user"

    def test_line_with_timestamp(self):
        from datetime import datetime, timezone

        stamp = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert format_line(Severity.ERROR, "boom", stamp) == (
            "2026-01-02T03:04:05+00:00 ERROR: boom"
        )

    def test_every_severity_has_a_style(self):
        assert all(severity_style(s) for s in Severity)


# ---------------------------------------------------------------------------
# Test: MemorySink
# ---------------------------------------------------------------------------


class TestMemorySink:
    def test_records_messages(self):
        sink = MemorySink()
        sink.receive(Severity.INFO, "a")
        sink.receive(Severity.WARN, "b")

        assert sink.received == [(Severity.INFO, "a"), (Severity.WARN, "b")]
        assert sink.messages == ["a", "b"]

    def test_min_severity_filter(self):
        sink = MemorySink(min_severity=Severity.WARN)
        sink.receive(Severity.VERBOSE, "dropped")
        sink.receive(Severity.WARN, "kept")

        assert sink.messages == ["kept"]

    def test_ignores_messages_after_close(self):
        sink = MemorySink()
        sink.close()
        sink.receive(Severity.ERROR, "late")

        assert sink.closed is True
        assert sink.received == []

    def test_protocol_compliance(self):
        sink = MemorySink("probe")
        assert isinstance(sink, BaseSink)
        assert sink.sink_name == "probe"


# ---------------------------------------------------------------------------
# Test: LocalFileSink
# ---------------------------------------------------------------------------


class TestLocalFileSink:
    def test_writes_one_line_per_message(self, tmp_path: Path):
        path = tmp_path / "opers.log"
        sink = LocalFileSink(path, timestamps=False)

        sink.receive(Severity.INFO, "oper killed user")
        sink.receive(Severity.WARN, "ban added")
        sink.close()

        assert path.read_text(encoding="utf-8").splitlines() == [
            "INFO: oper killed user",
            "WARN: ban added",
        ]

    def test_timestamps_prefix_lines(self, tmp_path: Path):
        path = tmp_path / "stamped.log"
        sink = LocalFileSink(path)

        sink.receive(Severity.INFO, "hello")
        sink.close()

        line = path.read_text(encoding="utf-8").strip()
        stamp, rest = line.split(" ", 1)
        assert rest == "INFO: hello"
        assert stamp.endswith("+00:00")

    def test_creates_parent_directories(self, tmp_path: Path):
        path = tmp_path / "nested" / "deeper" / "x.log"
        sink = LocalFileSink(path, timestamps=False)

        sink.receive(Severity.INFO, "m")
        sink.close()

        assert path.exists()

    def test_does_not_create_file_until_first_write(self, tmp_path: Path):
        path = tmp_path / "lazy.log"
        sink = LocalFileSink(path, min_severity=Severity.ERROR)

        sink.receive(Severity.INFO, "filtered")
        sink.close()

        assert not path.exists()

    def test_appends_to_existing_file(self, tmp_path: Path):
        path = tmp_path / "append.log"
        path.write_text("earlier\n", encoding="utf-8")
        sink = LocalFileSink(path, timestamps=False)

        sink.receive(Severity.INFO, "later")
        sink.close()

        assert path.read_text(encoding="utf-8") == "earlier\nINFO: later\n"

    def test_close_is_idempotent_and_blocks_writes(self, tmp_path: Path):
        path = tmp_path / "closed.log"
        sink = LocalFileSink(path, timestamps=False)
        sink.receive(Severity.INFO, "before")

        sink.close()
        sink.close()
        sink.receive(Severity.INFO, "after")

        assert sink.closed is True
        assert path.read_text(encoding="utf-8") == "INFO: before\n"

    def test_write_failure_is_swallowed(self, tmp_path: Path):
        # A directory at the target path makes open() fail
        path = tmp_path / "is_a_dir"
        path.mkdir()
        sink = LocalFileSink(path)

        sink.receive(Severity.ERROR, "cannot land")

    def test_sink_name_and_protocol(self, tmp_path: Path):
        sink = LocalFileSink(tmp_path / "n.log")
        assert isinstance(sink, BaseSink)
        assert sink.sink_name == f"file:{tmp_path / 'n.log'}"
        assert sink.path == tmp_path / "n.log"


# ---------------------------------------------------------------------------
# Test: ConsoleSink
# ---------------------------------------------------------------------------


class TestConsoleSink:
    def _console(self) -> tuple[Console, io.StringIO]:
        buffer = io.StringIO()
        return Console(file=buffer, width=200, color_system=None), buffer

    def test_prints_formatted_line(self):
        console, buffer = self._console()
        sink = ConsoleSink(console=console)

        sink.receive(Severity.WARN, "ban added")

        assert buffer.getvalue().strip() == "WARN: ban added"

    def test_min_severity_filter(self):
        console, buffer = self._console()
        sink = ConsoleSink(console=console, min_severity=Severity.ERROR)

        sink.receive(Severity.INFO, "quiet")

        assert buffer.getvalue() == ""

    def test_close_stops_output(self):
        console, buffer = self._console()
        sink = ConsoleSink(console=console)

        sink.close()
        assert sink.closed is True
        sink.receive(Severity.ERROR, "late")

        assert buffer.getvalue() == ""

    def test_protocol_compliance(self):
        sink = ConsoleSink()
        assert isinstance(sink, BaseSink)
        assert sink.sink_name == "console"
        assert sink.closed is False
