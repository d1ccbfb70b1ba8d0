"""CountdownCalculator - remaining time with per-unit borrowing decrements."""
from __future__ import annotations

from datetime import datetime

from countdown.arithmetic import (
    pad,
    subtract_days,
    subtract_hours,
    subtract_minutes,
    subtract_seconds,
)
from countdown.clock import Now, parse_instant, seconds_between, system_now
from countdown.types import ZERO, CountdownText, Duration


class CountdownCalculator:
    """Time remaining until an expiration instant.

    The remaining time is measured from `reference`, or from `now()` when no
    reference is given. A reference later than the expiration yields an
    already expired countdown.

    Decrement amounts must be non-negative; this is not checked. Once the
    countdown reaches zero it stays there.
    """

    def __init__(
        self,
        expiration: datetime | str,
        reference: datetime | str | None = None,
        now: Now = system_now,
    ) -> None:
        target = parse_instant(expiration)
        start = parse_instant(reference) if reference is not None else parse_instant(now())
        self._value = Duration.from_seconds(seconds_between(start, target))

    @classmethod
    def from_duration(cls, duration: Duration) -> CountdownCalculator:
        """Build a calculator that starts from a known Duration."""
        calc = cls.__new__(cls)
        calc._value = duration
        return calc

    @property
    def value(self) -> Duration:
        return self._value

    @property
    def total_seconds(self) -> int:
        return self._value.total_seconds

    # --- Decrements ---

    def decrement_seconds(self, n: int) -> None:
        self._value = subtract_seconds(self._value, n)

    def decrement_minutes(self, n: int) -> None:
        self._value = subtract_minutes(self._value, n)

    def decrement_hours(self, n: int) -> None:
        self._value = subtract_hours(self._value, n)

    def decrement_days(self, n: int) -> None:
        """Subtract whole days. Overshooting resets the countdown to zero."""
        self._value = subtract_days(self._value, n)

    def reset(self) -> None:
        self._value = ZERO

    # --- Queries ---

    def string_view(self, pad_zero: bool = True) -> CountdownText:
        """Fields as text; single digits get a leading 0 unless pad_zero is False."""
        v = self._value
        return CountdownText(
            days=pad(v.days, pad_zero),
            hours=pad(v.hours, pad_zero),
            minutes=pad(v.minutes, pad_zero),
            seconds=pad(v.seconds, pad_zero),
        )

    def is_expired(self) -> bool:
        return self._value.is_zero()

    def __repr__(self) -> str:
        v = self._value
        return (
            f"CountdownCalculator(days={v.days}, hours={v.hours}, "
            f"minutes={v.minutes}, seconds={v.seconds})"
        )
