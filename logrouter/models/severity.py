"""Severity levels carried opaquely by the registry.

Sinks compare against these to decide whether a message is of interest;
the registry itself never filters on level.
"""

from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    """Ordered log levels, lowest (most verbose) first."""

    DEBUG = 10
    VERBOSE = 20
    INFO = 30
    WARN = 40
    ERROR = 50

    @classmethod
    def parse(cls, value: Severity | int | str) -> Severity:
        """Coerce a member, an int, or a case-insensitive name to a Severity.

        ``DEFAULT`` and ``SPARSE`` are accepted as aliases for ``INFO`` and
        ``WARN``.

        Raises
        ------
        ValueError
            If *value* does not name or number a known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        name = str(value).strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown severity: {value!r}") from None


_ALIASES: dict[str, str] = {
    "DEFAULT": "INFO",
    "SPARSE": "WARN",
    "WARNING": "WARN",
}
