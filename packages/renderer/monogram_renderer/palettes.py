"""Built-in gradient palettes, validated once before first use."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Mapping, Sequence

from .errors import AvatarError, PaletteConfigError
from .models import GradientTable

_LOGGER = logging.getLogger("monogram.renderer")

DEFAULT_PALETTE_NAME = "Blue Dusk"

PALETTE_SOURCES: dict[str, tuple[tuple[str, float], ...]] = {
    "Blue Dusk": (("#82a7e8", 0.0), ("#4b6ecd", 1.0)),
    "Neon Slate": (("#35D9FF", 0.0), ("#1A253F", 1.0)),
    "Solar Drift": (("#FFD166", 0.0), ("#FFB347", 0.5), ("#473022", 1.0)),
    "Arctic Pulse": (("#86FFD0", 0.0), ("#59F3FF", 0.4), ("#173F52", 1.0)),
    "Berry": (("#f7a8c4", 0.0), ("#c2185b", 1.0)),
    "Moss": (("#b5d99c", 0.0), ("#4f772d", 1.0)),
}


def load_palettes(sources: Mapping[str, Sequence[tuple[str, float]]] = PALETTE_SOURCES) -> dict[str, GradientTable]:
    """Parse every palette, collecting all problems before failing."""
    tables: dict[str, GradientTable] = {}
    problems: list[str] = []
    for name, stops in sources.items():
        if not stops:
            problems.append(f"{name}: no stops")
            continue
        try:
            tables[name] = GradientTable.from_hex(stops)
        except (AvatarError, ValueError, TypeError) as exc:
            problems.append(f"{name}: {exc}")

    if problems:
        _LOGGER.error("palette validation failed", extra={"event": "palette_invalid", "problems": problems})
        raise PaletteConfigError(problems)
    return tables


@lru_cache(maxsize=1)
def _builtin() -> dict[str, GradientTable]:
    return load_palettes()


def list_palettes() -> list[str]:
    return sorted(_builtin().keys())


def get_palette(name: str | None) -> GradientTable:
    if not name:
        return GradientTable()
    try:
        return _builtin()[name]
    except KeyError:
        raise ValueError(f"Unknown palette: {name}") from None
