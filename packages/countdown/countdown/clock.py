"""Instants: the injected clock, parsing, and whole-second differences."""
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Callable

from countdown.types import CountdownParseError

Now = Callable[[], datetime]

_DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MICROSECONDS_PER_SECOND = 1_000_000


def system_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class FrozenClock:
    """A clock that only moves when told to. Call it to read the instant."""

    def __init__(self, instant: datetime | str) -> None:
        self._instant = parse_instant(instant)

    def __call__(self) -> datetime:
        return self._instant

    def advance(self, seconds: float) -> datetime:
        self._instant += timedelta(seconds=seconds)
        return self._instant

    def set(self, instant: datetime | str) -> None:
        self._instant = parse_instant(instant)


def parse_instant(value: datetime | str) -> datetime:
    """Parse an ISO-8601 string (or pass a datetime through) as an aware datetime.

    Date-only strings are taken as UTC midnight. Date-times without an offset
    are taken as local time. Raises CountdownParseError on anything else.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.astimezone()
    if not isinstance(value, str) or not value.strip():
        raise CountdownParseError(value, f"Invalid date-time: {value!r}")

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise CountdownParseError(value, f"Invalid date-time: {value!r}") from exc

    if parsed.tzinfo is not None:
        return parsed
    if _DATE_ONLY_RE.match(text):
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone()


def seconds_between(start: datetime, end: datetime) -> int:
    """Whole seconds from start to end, rounding halves up (towards +inf)."""
    micros = (end - start) // timedelta(microseconds=1)
    return (micros + _MICROSECONDS_PER_SECOND // 2) // _MICROSECONDS_PER_SECOND
