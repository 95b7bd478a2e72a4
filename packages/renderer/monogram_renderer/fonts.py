"""Font provider and text measurement over Pillow's FreeType bindings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Callable

from PIL import Image, ImageDraw, ImageFont

from .errors import FontLoadError, InvalidFontPathError

_LOGGER = logging.getLogger("monogram.renderer")

# Size used only to check that the bytes parse.
_VALIDATION_SIZE = 12


@dataclass(frozen=True)
class TextMetrics:
    """Advance width and vertical extent relative to the baseline (top is negative)."""

    width: float
    top: float
    bottom: float

    @property
    def height(self) -> float:
        return self.bottom - self.top


class LoadedFont:
    """Parsed font that hands out a fresh face per size and is never mutated."""

    def __init__(self, name: str, face_factory: Callable[[float], ImageFont.FreeTypeFont]) -> None:
        self.name = name
        self._face_factory = face_factory

    def __repr__(self) -> str:
        return f"LoadedFont({self.name!r})"

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<memory>") -> "LoadedFont":
        data = bytes(data)
        try:
            ImageFont.truetype(BytesIO(data), _VALIDATION_SIZE)
        except OSError as exc:
            raise FontLoadError(f"cannot parse font {name}: {exc}") from exc
        return cls(name, lambda size: ImageFont.truetype(BytesIO(data), size))

    @classmethod
    def builtin(cls) -> "LoadedFont":
        """Pillow's bundled TrueType face (requires FreeType support)."""
        try:
            ImageFont.load_default(_VALIDATION_SIZE)
        except (OSError, ImportError) as exc:
            raise FontLoadError(f"bundled font unavailable: {exc}") from exc
        return cls("<builtin>", lambda size: ImageFont.load_default(size))

    def face(self, size: float) -> ImageFont.FreeTypeFont:
        return self._face_factory(size)

    def measure(self, text: str, size: float) -> TextMetrics:
        face = self.face(size)
        _, top, _, bottom = face.getbbox(text, anchor="ls")
        return TextMetrics(width=face.getlength(text), top=top, bottom=bottom)

    def draw(
        self,
        image: Image.Image,
        origin: tuple[int, int],
        text: str,
        size: float,
        fill: tuple[int, int, int, int],
    ) -> None:
        """Draw ``text`` with its baseline-left corner at ``origin``."""
        ImageDraw.Draw(image).text(origin, text, font=self.face(size), fill=fill, anchor="ls")


def load_font(path: str | Path | None = None, data: bytes | None = None) -> LoadedFont:
    if data is not None:
        return LoadedFont.from_bytes(data, name="<memory>")

    if path is None or not str(path).strip():
        raise InvalidFontPathError("No font path given")

    font_path = Path(path).expanduser()
    try:
        raw = font_path.read_bytes()
    except OSError as exc:
        _LOGGER.error("font read failed", extra={"event": "font_read_failed", "path": str(font_path)})
        raise InvalidFontPathError(f"cannot read font file {font_path}: {exc}") from exc

    return LoadedFont.from_bytes(raw, name=str(font_path))
