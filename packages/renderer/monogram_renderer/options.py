"""Single normalization step from user options to fully resolved render settings."""

from __future__ import annotations

import math

from .color import GRAY, WHITE
from .fonts import load_font
from .models import AvatarOptions, GradientTable, RenderSettings

DEFAULT_SIZE = 250
MIN_SIZE = 1
DEFAULT_N_INITIALS = 2


def _size(value: int | None) -> int:
    if value is None:
        return DEFAULT_SIZE
    return max(MIN_SIZE, int(value))


def _font_size(value: float | None) -> float:
    if value is None or not math.isfinite(value) or value <= 0:
        return 0.0
    return float(value)


def resolve_options(options: AvatarOptions | None = None) -> RenderSettings:
    """Apply every default up front.

    Loads the font when only a path is given, so font errors surface here.
    """
    options = options or AvatarOptions()
    font = options.font if options.font is not None else load_font(options.font_path)

    return RenderSettings(
        bg_color=options.bg_color or GRAY,
        size=_size(options.size),
        font=font,
        font_size=_font_size(options.font_size),
        text_color=options.text_color or WHITE,
        n_initials=DEFAULT_N_INITIALS if options.n_initials is None else int(options.n_initials),
        gradient=options.gradient or GradientTable(),
    )
