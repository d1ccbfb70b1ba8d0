"""countdown-gif - Animated countdown GIFs from a background image and a font."""
from __future__ import annotations

from countdown_gif.config import FontText, GifConfig, default_text
from countdown_gif.renderer import GifCountdown, RendererStateError

__all__ = ["GifCountdown", "GifConfig", "FontText", "RendererStateError", "default_text"]
