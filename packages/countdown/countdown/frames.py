"""Frame sequence driver: what a render loop reads from the calculator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from countdown.calculator import CountdownCalculator
from countdown.types import CountdownText


@dataclass(frozen=True, slots=True)
class Frame:
    index: int
    text: CountdownText
    expired: bool


def iter_frames(
    calculator: CountdownCalculator,
    count: int,
    step: int = 1,
    pad_zero: bool = True,
) -> Iterator[Frame]:
    """Yield `count + 1` frames, advancing the calculator `step` seconds after each.

    The first frame shows the starting time, so a 60-frame run with step=1
    covers a full minute from start to end.
    """
    for index in range(count + 1):
        yield Frame(
            index=index,
            text=calculator.string_view(pad_zero),
            expired=calculator.is_expired(),
        )
        calculator.decrement_seconds(step)
