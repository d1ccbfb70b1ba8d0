"""Core value types for the countdown calculator."""
from __future__ import annotations

from dataclasses import dataclass

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


@dataclass(frozen=True, slots=True)
class Duration:
    """Remaining time split into days, hours, minutes and seconds.

    Hours stay within 0-23 and minutes/seconds within 0-59; days is unbounded.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_seconds(cls, total: int) -> Duration:
        """Decompose a whole-second count. Negative totals clamp to zero."""
        if total <= 0:
            return ZERO
        days, rest = divmod(total, SECONDS_PER_DAY)
        hours, rest = divmod(rest, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def is_zero(self) -> bool:
        return (
            self.days == 0
            and self.hours == 0
            and self.minutes == 0
            and self.seconds == 0
        )


ZERO = Duration()


@dataclass(frozen=True, slots=True)
class CountdownText:
    """String view of a Duration, ready to be drawn onto a frame."""

    days: str
    hours: str
    minutes: str
    seconds: str


class CountdownParseError(ValueError):
    """Raised when an instant cannot be parsed as a date-time."""

    def __init__(self, value: object, message: str) -> None:
        self.value = value
        super().__init__(message)
