"""countdown - Days/hours/minutes/seconds countdown with borrowing decrements."""
from __future__ import annotations

from countdown.calculator import CountdownCalculator
from countdown.clock import FrozenClock, Now, parse_instant, seconds_between, system_now
from countdown.frames import Frame, iter_frames
from countdown.types import ZERO, CountdownParseError, CountdownText, Duration

__all__ = [
    "CountdownCalculator",
    "CountdownParseError",
    "CountdownText",
    "Duration",
    "ZERO",
    "Frame",
    "iter_frames",
    "FrozenClock",
    "Now",
    "parse_instant",
    "seconds_between",
    "system_now",
]
