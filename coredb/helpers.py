"""Small helpers for building SQL and parsing values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timezone

_TIME_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?"
)


def param_placeholders(count: int) -> str:
    """Return ``count`` SQL parameter placeholders joined by commas."""
    return ",".join("?" * count)


def value_in_set(values: Iterable[str], s: str) -> bool:
    """Tell whether ``s`` is in ``values``, ignoring case."""
    folded = s.casefold()
    return any(v.casefold() == folded for v in values)


def must_parse_time(timestr: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS[.fraction]`` as a UTC datetime.

    Fractions finer than a microsecond are truncated.
    """
    match = _TIME_PATTERN.fullmatch(timestr)
    if match is None:
        raise ValueError(
            f"fail to parse timestr. Error: {timestr!r} does not match "
            "'YYYY-MM-DD HH:MM:SS[.fraction]'"
        )
    year, month, day, hour, minute, second, fraction = match.groups()
    micro = int((fraction or "").ljust(6, "0")[:6])
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            micro,
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise ValueError(f"fail to parse timestr. Error: {exc}") from exc