"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .color import Color, parse_hex
from .fonts import LoadedFont


@dataclass(frozen=True)
class GradientStop:
    color: Color
    position: float


@dataclass(frozen=True)
class GradientTable:
    """Keypoints of a color gradient, sorted by position in [0, 1]."""

    stops: tuple[GradientStop, ...] = ()

    def __post_init__(self) -> None:
        stops = tuple(self.stops)
        object.__setattr__(self, "stops", stops)
        for prev, cur in zip(stops, stops[1:]):
            if cur.position < prev.position:
                raise ValueError(
                    f"gradient positions must be non-decreasing ({prev.position} > {cur.position})"
                )

    @classmethod
    def from_hex(cls, pairs: Iterable[tuple[str, float]]) -> "GradientTable":
        return cls(tuple(GradientStop(parse_hex(h), float(p)) for h, p in pairs))

    def __len__(self) -> int:
        return len(self.stops)

    def __iter__(self) -> Iterator[GradientStop]:
        return iter(self.stops)

    def __getitem__(self, index: int) -> GradientStop:
        return self.stops[index]


@dataclass(frozen=True)
class AvatarOptions:
    bg_color: Color | None = None
    size: int | None = None
    font_path: str | None = None
    font: LoadedFont | None = None
    font_size: float = 0.0
    text_color: Color | None = None
    n_initials: int | None = None
    gradient: GradientTable = field(default_factory=GradientTable)


@dataclass(frozen=True)
class RenderSettings:
    bg_color: Color
    size: int
    font: LoadedFont
    font_size: float
    text_color: Color
    n_initials: int
    gradient: GradientTable
