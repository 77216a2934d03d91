"""Bounded message rendering for formatted dispatch.

Renders a printf-style template with its arguments and caps the result at
a fixed number of characters.  Rendering problems never propagate: a
template that does not match its arguments, or an argument that cannot be
converted to text, is delivered in a degraded but readable form instead.

Field widths and precisions are clamped to the bound before rendering, so
a template such as ``"%2000000000s"`` cannot allocate past it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 65535

_CONVERSION = re.compile(
    r"%(?P<key>\([^)]*\))?"
    r"(?P<flags>[-#0 +]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d+))?"
    r"(?P<length>[hlL]?)"
    r"(?P<type>[diouxXeEfFgGcrsa%])"
)


def truncate(text: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    """Return *text* cut to at most *limit* characters."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return text if len(text) <= limit else text[:limit]


def clamp_template(
    template: str, args: tuple[Any, ...], limit: int
) -> tuple[str, tuple[Any, ...]]:
    """Cap every width and precision in *template* at *limit*.

    Literal values are rewritten in the template; ``*`` values are taken
    from *args*, so the matching integer arguments are capped instead.

    Examples
    --------
    >>> clamp_template("%99999s|%.*f", ("x", 99999, 1.5), 10)
    ('%10s|%.*f', ('x', 10, 1.5))
    """
    values = list(args)
    position = 0

    def _cap(raw: str | None) -> str | None:
        nonlocal position
        if raw is None:
            return None
        if raw == "*":
            if position < len(values) and isinstance(values[position], int):
                values[position] = max(-limit, min(values[position], limit))
            position += 1
            return raw
        return str(min(int(raw), limit))

    def _rewrite(match: re.Match[str]) -> str:
        nonlocal position
        key = match.group("key") or ""
        width = _cap(match.group("width")) or ""
        precision = _cap(match.group("precision"))
        if match.group("type") != "%" and not key:
            position += 1
        return "".join(
            [
                "%",
                key,
                match.group("flags"),
                width,
                "" if precision is None else f".{precision}",
                match.group("length"),
                match.group("type"),
            ]
        )

    return _CONVERSION.sub(_rewrite, template), tuple(values)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return f"<unrepresentable {type(value).__name__}>"


def render_bounded(template: str, *args: Any, limit: int = MAX_MESSAGE_LENGTH) -> str:
    """Render *template* % *args* and bound the result to *limit* characters.

    With no arguments the template is used verbatim, so a literal ``%``
    in a plain message is safe.  A single mapping argument fills
    ``%(name)s`` style keys.  Never raises for a valid *limit*.

    Examples
    --------
    >>> render_bounded("%s killed %s", "oper", "user")
    'oper killed user'
    >>> render_bounded("abcdef", limit=3)
    'abc'
    """
    if not args:
        return truncate(template, limit)

    try:
        bounded, values = clamp_template(template, args, limit)
        if len(values) == 1 and isinstance(values[0], Mapping):
            rendered = bounded % values[0]
        else:
            rendered = bounded % values
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "Template %r could not be rendered with %d argument(s): %s",
            template,
            len(args),
            exc,
        )
        rendered = " ".join([template, *(_safe_repr(arg) for arg in args)])

    return truncate(rendered, limit)
