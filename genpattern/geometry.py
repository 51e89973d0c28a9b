"""Integer points, axis-aligned boxes and disk masks."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """A point (or displacement vector) on the integer grid."""

    x: int
    y: int

    def translate(self, vec: Point) -> Point:
        """Return this point moved by ``vec``."""
        return Point(self.x + vec.x, self.y + vec.y)

    def __str__(self) -> str:
        return f"{self.x};{self.y}"


Vector = Point


@dataclass(frozen=True)
class Box:
    """An inclusive axis-aligned rectangle from ``min`` to ``max``."""

    min: Point
    max: Point

    def is_valid(self) -> bool:
        """True when the box is not empty."""
        return self.min.x <= self.max.x and self.min.y <= self.max.y

    def intersect(self, other: Box) -> Box:
        """Return the overlap of two boxes; it may be invalid."""
        return Box(
            Point(max(self.min.x, other.min.x), max(self.min.y, other.min.y)),
            Point(min(self.max.x, other.max.x), min(self.max.y, other.max.y)),
        )

    def translate(self, vec: Point) -> Box:
        """Return this box moved by ``vec``."""
        return Box(self.min.translate(vec), self.max.translate(vec))

    @property
    def width(self) -> int:
        return self.max.x - self.min.x + 1

    @property
    def height(self) -> int:
        return self.max.y - self.min.y + 1

    def __str__(self) -> str:
        return f"Box{{{self.min} {self.max}}}"


def positive_modulo(i: int, n: int) -> int:
    """Remainder of ``i`` by ``n`` with the sign of ``n``."""
    return i % n


def generate_disk(r: int) -> np.ndarray:
    """Boolean ``(2r+1, 2r+1)`` mask of the pixels within distance ``r`` of the centre."""
    if r < 0:
        raise ValueError("disk radius must be non-negative")
    coords = np.arange(2 * r + 1, dtype=np.float64) - r
    ys, xs = np.meshgrid(coords, coords, indexing="ij")
    return np.sqrt(xs * xs + ys * ys) <= float(r)