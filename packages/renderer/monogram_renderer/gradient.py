"""Perceptual gradient interpolation over a sorted keypoint table."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .color import Color
from .models import GradientTable


def interpolate(table: GradientTable, t: float) -> Color:
    """Return the HCL blend of the two stops bracketing ``t``.

    Relies on the stops being sorted. Outside the table's domain the nearest
    boundary color is returned as is.
    """
    if len(table) == 0:
        raise ValueError("gradient table is empty")

    stops = table.stops
    for c1, c2 in zip(stops, stops[1:]):
        if c1.position <= t <= c2.position:
            span = c2.position - c1.position
            if span == 0:
                return c2.color
            u = (t - c1.position) / span
            return c1.color.blend_hcl(c2.color, u).clamped()

    if t < stops[0].position:
        return stops[0].color
    return stops[-1].color


def gradient_image(width: int, height: int, table: GradientTable) -> Image.Image:
    """Vertical RGBA gradient, one interpolated color per row, top to bottom."""
    rows = np.array([interpolate(table, y / height).rgba8() for y in range(height)], dtype=np.uint8)
    pixels = np.ascontiguousarray(np.broadcast_to(rows[:, np.newaxis, :], (height, width, 4)))
    return Image.fromarray(pixels)
