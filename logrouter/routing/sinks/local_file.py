"""Local file sink — appends one line per message to a log file.

Line layout: ``<ISO-8601 UTC timestamp> <SEVERITY>: <message>``

The sink owns its file handle.  The file is opened lazily on the first
accepted message, in append mode, and released by ``close()``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import IO

from logrouter.models.severity import Severity
from logrouter.routing.sinks._formatting import format_line

logger = logging.getLogger(__name__)


class LocalFileSink:
    """Writes messages at or above *min_severity* to a local file.

    Parameters
    ----------
    path:
        Target log file.  Parent directories are created on first write.
    min_severity:
        Messages below this level are dropped.
    timestamps:
        Prefix each line with the UTC time of delivery.
    """

    def __init__(
        self,
        path: Path | str,
        min_severity: Severity = Severity.DEBUG,
        timestamps: bool = True,
    ) -> None:
        self._path = Path(path)
        self._min_severity = min_severity
        self._timestamps = timestamps
        self._handle: IO[str] | None = None
        self._closed = False

    @property
    def sink_name(self) -> str:
        return f"file:{self._path}"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def receive(self, severity: Severity, message: str) -> None:
        """Append the message to the file.

        Write failures (disk full, permissions) are logged and dropped.
        """
        if self._closed or severity < self._min_severity:
            return

        stamp = datetime.now(timezone.utc) if self._timestamps else None
        line = format_line(severity, message, stamp)
        try:
            handle = self._open()
            handle.write(line + "\n")
            handle.flush()
        except OSError as exc:
            logger.error("LocalFileSink: write to %s failed: %s", self._path, exc)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("LocalFileSink: closed %s", self._path)

    def _open(self) -> IO[str]:
        if self._handle is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self._path.open("a", encoding="utf-8")
            logger.debug("LocalFileSink: opened %s", self._path)
        return self._handle
