"""Render configuration dataclasses."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from countdown import CountdownText


def default_text(text: CountdownText) -> str:
    return f"{text.days} : {text.hours} : {text.minutes} : {text.seconds}"


@dataclass(frozen=True)
class GifConfig:
    """Immutable configuration for GIF generation.

    Attributes:
        frame_delay: Milliseconds each frame is shown.
        num_frames: Frames rendered after the first, so the GIF holds
            num_frames + 1 frames in total.
        repeat: Number of loops, 0 for forever. Ignored once the countdown
            has expired, in which case the GIF plays once.
        seconds_per_frame: Seconds taken off the countdown between frames.
    """

    frame_delay: int = 1000
    num_frames: int = 60
    repeat: int = 0
    seconds_per_frame: int = 1

    def __post_init__(self) -> None:
        if self.frame_delay <= 0:
            raise ValueError("frame_delay must be positive")
        if self.num_frames < 0:
            raise ValueError("num_frames must be non-negative")
        if self.repeat < 0:
            raise ValueError("repeat must be non-negative")
        if self.seconds_per_frame < 0:
            raise ValueError("seconds_per_frame must be non-negative")


@dataclass(frozen=True)
class FontText:
    """Font and placement of the countdown text.

    `font_path=None` uses Pillow's built-in font. Offsets place the left end
    of the text baseline. `text_color` is any Pillow color, e.g.
    ``"rgb(163, 168, 178)"`` or ``"#a3a8b2"``.
    """

    font_path: str | None
    font_size: int
    text_color: str
    x_offset: int
    y_offset: int
    text_fn: Callable[[CountdownText], str] = field(default=default_text)

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ValueError("font_size must be positive")
        if not self.text_color:
            raise ValueError("text_color is required")
