"""Initials avatar facade producing square and circle PNG outputs."""

from __future__ import annotations

import base64
import logging
from functools import cached_property
from io import BytesIO

import numpy as np
from PIL import Image, ImageChops

from .compositor import AvatarCompositor
from .models import AvatarOptions, RenderSettings
from .options import resolve_options

_LOGGER = logging.getLogger("monogram.renderer")

SHAPES = ("square", "circle")


def circle_mask(size: int) -> Image.Image:
    """Disk coverage mask: 0 at or beyond the radius, 255 a pixel or more inside it.

    Distances are measured from pixel centers; the one-pixel ring just inside
    the radius is anti-aliased.
    """
    radius = size / 2
    centers = np.arange(size, dtype=np.float64) + 0.5
    dist = np.hypot(centers[np.newaxis, :] - radius, centers[:, np.newaxis] - radius)
    coverage = np.clip(radius - dist, 0.0, 1.0)
    return Image.fromarray(np.rint(coverage * 255).astype(np.uint8))


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


class Avatar:
    """A rendered initials avatar.

    The background and label are composed once, at 3x, in the constructor;
    ``square()`` and ``circle()`` both derive from that buffer.
    """

    def __init__(self, source: str, settings: RenderSettings, compositor: AvatarCompositor | None = None) -> None:
        self._source = source
        self.settings = settings
        self._original = (compositor or AvatarCompositor()).render(source, settings)
        _LOGGER.debug(
            f"avatar rendered size={settings.size} font={settings.font.name}",
            extra={"event": "avatar_rendered", "size": settings.size, "font": settings.font.name},
        )

    @property
    def source(self) -> str:
        return self._source

    def source_bytes(self) -> bytes:
        return self._source.encode("utf-8")

    @cached_property
    def _square(self) -> Image.Image:
        size = self.settings.size
        if self._original.size == (size, size):
            return self._original.copy()
        return self._original.resize((size, size), Image.Resampling.LANCZOS)

    def square_image(self) -> Image.Image:
        return self._square.copy()

    def circle_image(self) -> Image.Image:
        image = self._square.copy()
        alpha = ImageChops.multiply(image.getchannel("A"), circle_mask(self.settings.size))
        image.putalpha(alpha)
        return image

    def square(self) -> bytes:
        return encode_png(self._square)

    def circle(self) -> bytes:
        return encode_png(self.circle_image())

    def data_url(self, shape: str = "square") -> str:
        if shape not in SHAPES:
            raise ValueError(f"Unknown shape: {shape}")
        payload = self.square() if shape == "square" else self.circle()
        b64 = base64.b64encode(payload).decode("ascii")
        return f"data:image/png;base64,{b64}"


def new_avatar_from_initials(text: str, options: AvatarOptions | None = None) -> Avatar:
    """Resolve ``options`` and render ``text``.

    Raises InvalidFontPathError or FontLoadError when no usable font is available.
    """
    return Avatar(text, resolve_options(options))
