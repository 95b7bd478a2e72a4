"""Color value type with CIE Lab / HCL conversions and hex parsing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .errors import InvalidColorHexError

# D65 reference white.
_XN, _YN, _ZN = 0.95047, 1.0, 1.08883

_EPSILON = 0.008856
_KAPPA = 903.3

# Below this chroma the hue angle is noise.
_ACHROMATIC_CHROMA = 0.015

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _from_linear(c: float) -> float:
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1 / 2.4) - 0.055


def _lab_f(t: float) -> float:
    if t > _EPSILON:
        return t ** (1 / 3)
    return (_KAPPA * t + 16) / 116


def _interp_angle(a0: float, a1: float, t: float) -> float:
    delta = (a1 - a0 + 540.0) % 360.0 - 180.0
    return (a0 + t * delta) % 360.0


@dataclass(frozen=True)
class Color:
    """sRGB color with float channels, nominally in [0, 1].

    Perceptual blending can leave the gamut; ``clamped()`` brings the value back.
    """

    r: float
    g: float
    b: float

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float) -> "Color":
        fy = (l + 16) / 116
        fx = a / 500 + fy
        fz = fy - b / 200

        x = fx**3 if fx**3 > _EPSILON else (116 * fx - 16) / _KAPPA
        y = ((l + 16) / 116) ** 3 if l > _KAPPA * _EPSILON else l / _KAPPA
        z = fz**3 if fz**3 > _EPSILON else (116 * fz - 16) / _KAPPA
        x *= _XN
        y *= _YN
        z *= _ZN

        r = x * 3.2404542 - y * 1.5371385 - z * 0.4985314
        g = -x * 0.9692660 + y * 1.8760108 + z * 0.0415560
        b_lin = x * 0.0556434 - y * 0.2040259 + z * 1.0572252
        return cls(_from_linear(r), _from_linear(g), _from_linear(b_lin))

    @classmethod
    def from_hcl(cls, h: float, c: float, l: float) -> "Color":
        rad = math.radians(h)
        return cls.from_lab(l, c * math.cos(rad), c * math.sin(rad))

    def lab(self) -> tuple[float, float, float]:
        r, g, b = _to_linear(self.r), _to_linear(self.g), _to_linear(self.b)
        x = (r * 0.4124564 + g * 0.3575761 + b * 0.1804375) / _XN
        y = (r * 0.2126729 + g * 0.7151522 + b * 0.0721750) / _YN
        z = (r * 0.0193339 + g * 0.1191920 + b * 0.9503041) / _ZN

        fx, fy, fz = _lab_f(x), _lab_f(y), _lab_f(z)
        return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)

    def hcl(self) -> tuple[float, float, float]:
        """Return (hue degrees in [0, 360), chroma, lightness in [0, 100])."""
        l, a, b = self.lab()
        return math.degrees(math.atan2(b, a)) % 360.0, math.hypot(a, b), l

    def blend_hcl(self, other: "Color", t: float) -> "Color":
        """Blend toward ``other`` in HCL space. The result is not clamped."""
        if t <= 0.0:
            return self
        if t >= 1.0:
            return other

        h1, c1, l1 = self.hcl()
        h2, c2, l2 = other.hcl()
        if c1 <= _ACHROMATIC_CHROMA and c2 > _ACHROMATIC_CHROMA:
            h1 = h2
        elif c2 <= _ACHROMATIC_CHROMA and c1 > _ACHROMATIC_CHROMA:
            h2 = h1

        return Color.from_hcl(_interp_angle(h1, h2, t), c1 + t * (c2 - c1), l1 + t * (l2 - l1))

    def is_valid(self) -> bool:
        return all(0.0 <= c <= 1.0 for c in (self.r, self.g, self.b))

    def clamped(self) -> "Color":
        if self.is_valid():
            return self
        return Color(*(min(1.0, max(0.0, c)) for c in (self.r, self.g, self.b)))

    def rgb8(self) -> tuple[int, int, int]:
        c = self.clamped()
        return int(c.r * 255 + 0.5), int(c.g * 255 + 0.5), int(c.b * 255 + 0.5)

    def rgba8(self) -> tuple[int, int, int, int]:
        return (*self.rgb8(), 255)

    def hex(self) -> str:
        return "#%02x%02x%02x" % self.rgb8()


def parse_hex(value: str) -> Color:
    """Parse ``#rgb`` or ``#rrggbb``.

    Raises InvalidColorHexError for anything else. Safe for untrusted input.
    """
    if not isinstance(value, str):
        raise InvalidColorHexError(f"color literal must be a string, got {type(value).__name__}")
    match = _HEX_RE.fullmatch(value.strip())
    if match is None:
        raise InvalidColorHexError(f"malformed hex color: {value!r}")

    digits = match.group(1)
    if len(digits) == 3:
        r, g, b = (int(d, 16) * 17 for d in digits)
    else:
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return Color.from_rgb8(r, g, b)


WHITE = Color(1.0, 1.0, 1.0)
GRAY = Color.from_rgb8(128, 128, 128)
