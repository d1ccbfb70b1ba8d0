"""Borrowing subtraction on Duration values.

Fields are ordered from the highest unit (days) to the lowest (seconds).
Subtracting from one field borrows single units from the fields above it,
and only while any remain; a field that cannot be satisfied clamps to 0.
Fields below the target are never touched.
"""
from __future__ import annotations

from countdown.types import ZERO, Duration

_DAYS, _HOURS, _MINUTES, _SECONDS = range(4)

# How many of each unit make up one of the unit above it; days have no parent unit.
_RADIX = (0, 24, 60, 60)


def _fields(duration: Duration) -> list[int]:
    return [duration.days, duration.hours, duration.minutes, duration.seconds]


def _higher_total(fields: list[int], index: int) -> int:
    """Everything above `index`, expressed in units of the field at index - 1."""
    total = fields[0]
    for i in range(1, index):
        total = total * _RADIX[i] + fields[i]
    return total


def _spread_higher(fields: list[int], index: int, total: int) -> None:
    """Inverse of _higher_total: write `total` back into fields above `index`."""
    for i in range(index - 1, 0, -1):
        total, fields[i] = divmod(total, _RADIX[i])
    fields[0] = total


def _subtract(duration: Duration, index: int, amount: int) -> Duration:
    fields = _fields(duration)

    if index == _DAYS:
        if fields[_DAYS] - amount < 0:
            return ZERO
        fields[_DAYS] -= amount
        return Duration(*fields)

    value = fields[index] - amount
    if value < 0:
        radix = _RADIX[index]
        available = _higher_total(fields, index)
        needed = -(value // radix)  # ceil(-value / radix)
        if needed <= available:
            _spread_higher(fields, index, available - needed)
            value += needed * radix
        else:
            _spread_higher(fields, index, 0)
            value = 0
    fields[index] = value
    return Duration(*fields)


def subtract_seconds(duration: Duration, amount: int) -> Duration:
    """Return `duration` minus `amount` seconds, never below zero."""
    return _subtract(duration, _SECONDS, amount)


def subtract_minutes(duration: Duration, amount: int) -> Duration:
    return _subtract(duration, _MINUTES, amount)


def subtract_hours(duration: Duration, amount: int) -> Duration:
    return _subtract(duration, _HOURS, amount)


def subtract_days(duration: Duration, amount: int) -> Duration:
    """Return `duration` minus `amount` days.

    Going below zero days means the whole countdown has elapsed, so the
    result is ZERO rather than a clamped day field.
    """
    return _subtract(duration, _DAYS, amount)


def pad(value: int, pad_zero: bool = True) -> str:
    """Render a field, adding a leading 0 to single-digit values."""
    text = str(value)
    if pad_zero and len(text) < 2:
        return "0" + text
    return text
