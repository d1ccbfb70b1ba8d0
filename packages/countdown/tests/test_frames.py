"""Tests for countdown.frames — the per-frame read/advance loop."""
from __future__ import annotations

from countdown import CountdownCalculator, Duration, Frame, iter_frames


def _seconds(frames: list[Frame]) -> list[str]:
    return [f.text.seconds for f in frames]


class TestIterFrames:
    def test_yields_count_plus_one(self) -> None:
        calc = CountdownCalculator.from_duration(Duration(minutes=10))
        frames = list(iter_frames(calc, 5))
        assert [f.index for f in frames] == [0, 1, 2, 3, 4, 5]

    def test_first_frame_is_starting_value(self) -> None:
        calc = CountdownCalculator.from_duration(Duration(0, 0, 1, 0))
        frames = list(iter_frames(calc, 2))
        assert frames[0].text.minutes == "01"
        assert _seconds(frames) == ["00", "59", "58"]

    def test_step(self) -> None:
        calc = CountdownCalculator.from_duration(Duration(0, 0, 0, 30))
        frames = list(iter_frames(calc, 3, step=10))
        assert _seconds(frames) == ["30", "20", "10", "00"]
        assert [f.expired for f in frames] == [False, False, False, True]

    def test_calculator_advanced_after_last_frame(self) -> None:
        calc = CountdownCalculator.from_duration(Duration(0, 0, 0, 30))
        list(iter_frames(calc, 2, step=5))
        assert calc.value == Duration(0, 0, 0, 15)

    def test_expired_frames_repeat_zero(self) -> None:
        calc = CountdownCalculator.from_duration(Duration(0, 0, 0, 1))
        frames = list(iter_frames(calc, 4))
        assert [f.expired for f in frames] == [False, True, True, True, True]
        assert all(f.text.seconds == "00" for f in frames[1:])

    def test_no_padding(self) -> None:
        calc = CountdownCalculator.from_duration(Duration(0, 0, 0, 9))
        frame = next(iter_frames(calc, 0, pad_zero=False))
        assert frame.text.seconds == "9"

    def test_lazy(self) -> None:
        calc = CountdownCalculator.from_duration(Duration(0, 0, 0, 9))
        gen = iter_frames(calc, 3)
        assert calc.value == Duration(0, 0, 0, 9)
        next(gen)
        assert calc.value == Duration(0, 0, 0, 9)
        next(gen)
        assert calc.value == Duration(0, 0, 0, 8)
