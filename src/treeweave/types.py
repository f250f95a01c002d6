from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: float
    y: float


class RGB(NamedTuple):
    """Colour as three integer channels in [0, 255]."""

    r: int
    g: int
    b: int

    def packed(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in render-surface coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def centre(self) -> Point:
        return Point(self.x + 0.5 * self.width, self.y + 0.5 * self.height)

    def outer_bounds(self) -> "Rect":
        """Smallest integer rectangle that encloses this one."""
        x0 = math.floor(self.x)
        y0 = math.floor(self.y)
        x1 = math.ceil(self.x + self.width)
        y1 = math.ceil(self.y + self.height)
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def union(self, other: "Rect") -> "Rect":
        x0 = min(self.x, other.x)
        y0 = min(self.y, other.y)
        x1 = max(self.x + self.width, other.x + other.width)
        y1 = max(self.y + self.height, other.y + other.height)
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)
