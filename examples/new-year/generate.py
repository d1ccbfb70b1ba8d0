"""New Year countdown - renders a countdown GIF with generated artwork.

Draws a plain background and an "expired" card with Pillow, then renders a
countdown to midnight UTC of the coming year.

Run:
    python generate.py --out countdown.gif
"""
from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path

from PIL import Image, ImageDraw

from countdown_gif import FontText, GifConfig, GifCountdown
from countdown_gif.log import configure_logging

WIDTH, HEIGHT = 360, 80
BG = (34, 38, 46)
LABEL = (120, 126, 138)


def make_background(path: Path) -> Path:
    image = Image.new("RGB", (WIDTH, HEIGHT), BG)
    draw = ImageDraw.Draw(image)
    for x, label in zip((30, 110, 190, 270), ("DAYS", "HRS", "MIN", "SEC")):
        draw.text((x, 62), label, fill=LABEL)
    image.save(path)
    return path


def make_expired(path: Path) -> Path:
    image = Image.new("RGB", (WIDTH, HEIGHT), BG)
    ImageDraw.Draw(image).text((120, 32), "HAPPY NEW YEAR", fill=(230, 200, 90))
    image.save(path)
    return path


def main() -> None:
    p = argparse.ArgumentParser(description="New Year countdown GIF")
    p.add_argument("--out", default="countdown.gif", help="Output GIF path")
    p.add_argument("--font", default=None, help="Optional .ttf font")
    p.add_argument("--frames", type=int, default=60, help="Frames after the first")
    args = p.parse_args()

    configure_logging()
    workdir = Path(args.out).resolve().parent
    now = datetime.now(timezone.utc)
    expires = datetime(now.year + 1, 1, 1, tzinfo=timezone.utc)

    gif = GifCountdown(GifConfig(num_frames=args.frames))
    gif.load_image(make_background(workdir / "bg.png"))
    gif.load_expired_image(make_expired(workdir / "expired.png"))
    gif.register_font_text(FontText(
        font_path=args.font,
        font_size=32,
        text_color="rgb(163, 168, 178)",
        x_offset=25,
        y_offset=49,
        text_fn=lambda t: f" {t.days}     {t.hours}     {t.minutes}     {t.seconds}",
    ))
    gif.save(args.out, expires)


if __name__ == "__main__":
    main()
