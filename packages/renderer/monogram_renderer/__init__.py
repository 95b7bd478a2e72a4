"""Renderer package for initials avatars."""

from .avatar import Avatar, circle_mask, encode_png, new_avatar_from_initials
from .color import Color, parse_hex
from .compositor import AvatarCompositor, font_size_that_fits
from .errors import AvatarError, FontLoadError, InvalidColorHexError, InvalidFontPathError, PaletteConfigError
from .fonts import LoadedFont, TextMetrics, load_font
from .gradient import gradient_image, interpolate
from .initials import extract_initials, is_email
from .models import AvatarOptions, GradientStop, GradientTable, RenderSettings
from .options import resolve_options
from .palettes import DEFAULT_PALETTE_NAME, get_palette, list_palettes, load_palettes

__all__ = [
    "Avatar",
    "AvatarCompositor",
    "AvatarError",
    "AvatarOptions",
    "Color",
    "DEFAULT_PALETTE_NAME",
    "FontLoadError",
    "GradientStop",
    "GradientTable",
    "InvalidColorHexError",
    "InvalidFontPathError",
    "LoadedFont",
    "PaletteConfigError",
    "RenderSettings",
    "TextMetrics",
    "circle_mask",
    "encode_png",
    "extract_initials",
    "font_size_that_fits",
    "get_palette",
    "gradient_image",
    "interpolate",
    "is_email",
    "list_palettes",
    "load_font",
    "load_palettes",
    "new_avatar_from_initials",
    "parse_hex",
    "resolve_options",
]
