"""Error kinds reported by avatar construction and color parsing."""

from __future__ import annotations


class AvatarError(Exception):
    """Base class for recoverable avatar errors."""


class InvalidFontPathError(AvatarError):
    """No usable font source was given."""


class FontLoadError(AvatarError):
    """Font bytes were found but FreeType could not parse them."""


class InvalidColorHexError(AvatarError, ValueError):
    """A color literal is not of the form #rgb or #rrggbb."""


class PaletteConfigError(AvatarError):
    """A palette table failed startup validation."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("invalid palette configuration: " + "; ".join(self.problems))
