"""GifCountdown - draws a CountdownCalculator onto background frames with Pillow."""
from __future__ import annotations

import io
from datetime import datetime
from pathlib import Path
from typing import Any

from PIL import Image, ImageDraw, ImageFont
from structlog import get_logger

from countdown import CountdownCalculator, Frame, Now, iter_frames, system_now
from countdown_gif.config import FontText, GifConfig

logger = get_logger()

PathLike = str | Path


class RendererStateError(RuntimeError):
    """Raised when generation is attempted before images or fonts are loaded."""


class GifCountdown:
    """Builds countdown GIFs from a background image and a font.

    Usage:
        gif = GifCountdown(GifConfig(num_frames=60))
        gif.load_image("bg.png")
        gif.register_font_text(FontText("OpenSans-Bold.ttf", 40, "rgb(163, 168, 178)", 25, 49))
        data = gif.generate("2023-01-01T23:59:59-08:00")
    """

    def __init__(self, config: GifConfig | None = None, now: Now = system_now) -> None:
        self._config = config if config is not None else GifConfig()
        self._now = now
        self._image: Image.Image | None = None
        self._expired_image: Image.Image | None = None
        self._font_text: FontText | None = None
        self._font: Any = None

    @property
    def config(self) -> GifConfig:
        return self._config

    @property
    def size(self) -> tuple[int, int] | None:
        """(width, height) of the background, or None before load_image()."""
        return self._image.size if self._image is not None else None

    # --- Setup ---

    def load_image(self, path: PathLike) -> None:
        """Load the background every countdown frame is drawn on."""
        self._image = _open_rgb(path)
        logger.debug("countdown_background_loaded", path=str(path), size=self._image.size)

    def load_expired_image(self, path: PathLike) -> None:
        """Load the image shown instead of the text once the countdown is over.

        Must match the background's dimensions.
        """
        if self._image is None:
            raise RendererStateError("Background image is not loaded. Call load_image() first")
        image = _open_rgb(path)
        width, height = self._image.size
        if image.width != width:
            raise ValueError("Expired image width does not match the background image")
        if image.height != height:
            raise ValueError("Expired image height does not match the background image")
        self._expired_image = image
        logger.debug("countdown_expired_image_loaded", path=str(path))

    def register_font_text(self, font_text: FontText) -> None:
        """Load the font and remember how the countdown text is placed."""
        if font_text.font_path is None:
            self._font = ImageFont.load_default(size=font_text.font_size)
        else:
            self._font = ImageFont.truetype(font_text.font_path, font_text.font_size)
        self._font_text = font_text
        logger.debug(
            "countdown_font_registered",
            font_path=font_text.font_path,
            font_size=font_text.font_size,
        )

    # --- Generation ---

    def generate(
        self,
        expiration: datetime | str,
        reference: datetime | str | None = None,
    ) -> bytes:
        """Render the countdown and return the encoded GIF bytes."""
        if self._image is None:
            raise RendererStateError("Background image is not loaded. Call load_image() first")
        if self._font_text is None:
            raise RendererStateError(
                "Font and text are not configured. Call register_font_text() first"
            )

        cfg = self._config
        counter = CountdownCalculator(expiration, reference, now=self._now)
        frames = [
            self._draw_frame(frame)
            for frame in iter_frames(counter, cfg.num_frames, cfg.seconds_per_frame)
        ]

        # An expired countdown has nothing left to loop over.
        expired = counter.is_expired()
        save_kwargs: dict[str, Any] = {}
        if not expired:
            save_kwargs["loop"] = cfg.repeat

        buf = io.BytesIO()
        frames[0].save(
            buf,
            format="GIF",
            save_all=True,
            append_images=frames[1:],
            duration=cfg.frame_delay,
            **save_kwargs,
        )
        data = buf.getvalue()
        logger.info(
            "countdown_gif_generated",
            frames=len(frames),
            expired=expired,
            remaining_seconds=counter.total_seconds,
            bytes=len(data),
        )
        return data

    def save(
        self,
        path: PathLike,
        expiration: datetime | str,
        reference: datetime | str | None = None,
    ) -> Path:
        """Generate the GIF and write it to `path`."""
        out = Path(path)
        out.write_bytes(self.generate(expiration, reference))
        logger.info("countdown_gif_saved", path=str(out))
        return out

    def _draw_frame(self, frame: Frame) -> Image.Image:
        assert self._image is not None and self._font_text is not None

        if frame.expired and self._expired_image is not None:
            return self._expired_image.copy()

        ft = self._font_text
        image = self._image.copy()
        draw = ImageDraw.Draw(image)
        kwargs: dict[str, Any] = {"fill": ft.text_color, "font": self._font}
        # Bitmap fonts have no anchor support; FreeType fonts draw from the baseline.
        if isinstance(self._font, ImageFont.FreeTypeFont):
            kwargs["anchor"] = "ls"
        draw.text((ft.x_offset, ft.y_offset), ft.text_fn(frame.text), **kwargs)
        return image


def _open_rgb(path: PathLike) -> Image.Image:
    with Image.open(path) as im:
        return im.convert("RGB")
