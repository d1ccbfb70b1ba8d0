"""Command line entry point: python -m countdown_gif --background bg.png --expires ..."""
from __future__ import annotations

import argparse
import sys

from structlog import get_logger

from countdown_gif.config import FontText, GifConfig
from countdown_gif.log import configure_logging
from countdown_gif.renderer import GifCountdown

logger = get_logger()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render an animated countdown GIF")
    p.add_argument("--background", required=True, metavar="FILE", help="Background image")
    p.add_argument("--expired-background", default=None, metavar="FILE",
                   help="Image shown once the countdown is over (same size as background)")
    p.add_argument("--font", default=None, metavar="FILE",
                   help="TrueType/OpenType font file (default: Pillow built-in)")
    p.add_argument("--font-size", type=int, default=40, help="Font size in pixels (default: 40)")
    p.add_argument("--color", default="rgb(163, 168, 178)", help="Text color")
    p.add_argument("--x", type=int, default=25, help="Text x offset (default: 25)")
    p.add_argument("--y", type=int, default=49, help="Text baseline y offset (default: 49)")
    p.add_argument("--expires", required=True, help="Expiration instant, ISO-8601")
    p.add_argument("--from", dest="reference", default=None,
                   help="Count from this instant instead of now, ISO-8601")
    p.add_argument("--frames", type=int, default=60, help="Frames after the first (default: 60)")
    p.add_argument("--delay", type=int, default=1000, help="Frame delay in ms (default: 1000)")
    p.add_argument("--repeat", type=int, default=0, help="Loop count, 0 = forever (default: 0)")
    p.add_argument("--step", type=int, default=1, help="Seconds per frame (default: 1)")
    p.add_argument("--output", default="countdown.gif", metavar="FILE",
                   help="Output path (default: countdown.gif)")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = GifConfig(
            frame_delay=args.delay,
            num_frames=args.frames,
            repeat=args.repeat,
            seconds_per_frame=args.step,
        )
        gif = GifCountdown(config)
        gif.load_image(args.background)
        if args.expired_background:
            gif.load_expired_image(args.expired_background)
        gif.register_font_text(
            FontText(
                font_path=args.font,
                font_size=args.font_size,
                text_color=args.color,
                x_offset=args.x,
                y_offset=args.y,
            )
        )
        gif.save(args.output, args.expires, args.reference)
    except (ValueError, OSError) as exc:
        logger.error("countdown_gif_failed", error=str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
