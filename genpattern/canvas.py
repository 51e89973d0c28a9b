"""A toroidal bit canvas and simulated-annealing placement on it."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

from .geometry import Box, Point
from .images import BitImage

CoolingSchedule = Callable[[float, float, int], float]

_FAR = sys.maxsize
_EXP_LIMIT = 700.0


@dataclass(frozen=True)
class PlacementArea:
    """One part of an image that lands on the canvas after wrapping.

    ``bounds`` is the covered region in canvas coordinates, ``canvas_start``
    its top-left corner and ``image_start`` the matching pixel of the image.
    """

    bounds: Box
    canvas_start: Point
    image_start: Point


def _accepts(delta: int, t: float, u: float) -> bool:
    """Metropolis test: is ``exp(-delta / t)`` below ``u``?"""
    try:
        x = -(delta / t)
    except ZeroDivisionError:
        return False
    if x > _EXP_LIMIT:
        return False
    return math.exp(x) < u


class Canvas(BitImage):
    """A bit canvas whose right and bottom edges wrap around to the left and top."""

    def __init__(self, width: int, height: int, rng: random.Random) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Canvas: width and height must be positive")
        super().__init__(height, width)
        self._rng = rng
        self._areas = (
            (Box(Point(0, height), Point(width - 1, _FAR)), Point(0, -height)),
            (Box(Point(width, 0), Point(_FAR, height - 1)), Point(-width, 0)),
            (Box(Point(width, height), Point(_FAR, _FAR)), Point(-width, -height)),
            (Box(Point(0, 0), Point(width - 1, height - 1)), Point(0, 0)),
        )
        self._delta_max_initial = (math.ceil(width / 2), math.ceil(height / 2))

    def placement_areas(self, img: BitImage, pos: Point) -> list[PlacementArea]:
        """Split ``img`` placed at ``pos`` into the canvas regions it covers."""
        bounds = Box(pos, Point(pos.x + img.width - 1, pos.y + img.height - 1))
        out = []
        for area, offset in self._areas:
            inter = bounds.intersect(area)
            if inter.is_valid():
                out.append(
                    PlacementArea(
                        inter.translate(offset),
                        inter.min.translate(offset),
                        Point(inter.min.x - bounds.min.x, inter.min.y - bounds.min.y),
                    )
                )
        return out

    def _overlaps(
        self, img: BitImage, pos: Point
    ) -> Iterator[tuple[tuple[slice, slice], tuple[slice, slice]]]:
        for pa in self.placement_areas(img, pos):
            cy, cx = pa.canvas_start.y, pa.canvas_start.x
            iy, ix = pa.image_start.y, pa.image_start.x
            h = min(pa.bounds.height, self.height - cy, img.height - iy)
            w = min(pa.bounds.width, self.width - cx, img.width - ix)
            if h <= 0 or w <= 0:
                continue
            yield (
                (slice(cy, cy + h), slice(cx, cx + w)),
                (slice(iy, iy + h), slice(ix, ix + w)),
            )

    def wrap_position(self, x: int, y: int) -> Point:
        """Bring a point back onto the canvas."""
        return Point(x % self.width, y % self.height)

    def intersection_area(self, img: BitImage, pos: Point) -> int:
        """Number of filled pixels of ``img`` at ``pos`` that hit filled canvas pixels."""
        source = img.pixels
        return sum(
            int((self._pixels[c] & source[i]).sum())
            for c, i in self._overlaps(img, pos)
        )

    def add_image(self, img: BitImage, pos: Point) -> None:
        """Draw the filled pixels of ``img`` onto the canvas at ``pos``."""
        source = img.pixels
        for c, i in self._overlaps(img, pos):
            self._pixels[c] |= source[i]

    def optimize_placement(
        self,
        img: BitImage,
        t_initial: float,
        decrease_t: CoolingSchedule,
        eps: float = 0.0001,
    ) -> Optional[Point]:
        """Search for a position where ``img`` overlaps nothing.

        Returns the position, or ``None`` once the temperature falls to ``eps``.
        """
        rng = self._rng
        t = t_initial
        current = Point(
            rng.randint(0, self.width - 1), rng.randint(0, self.height - 1)
        )
        current_result = self.intersection_area(img, current)
        if current_result == 0:
            return current

        iteration = 0
        while t > eps:
            t = decrease_t(t_initial, t, iteration)
            iteration += 1
            scale = t / t_initial
            dx_max = int(self._delta_max_initial[0] * scale)
            dy_max = int(self._delta_max_initial[1] * scale)
            dx = rng.randint(-dx_max, dx_max)
            dy = rng.randint(-dy_max, dy_max)

            candidate = self.wrap_position(current.x + dx, current.y + dy)
            result = self.intersection_area(img, candidate)
            delta = current_result - result
            if delta > 0 or _accepts(delta, t, rng.random()):
                current, current_result = candidate, result
                if current_result == 0:
                    return current
        return None