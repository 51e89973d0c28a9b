"""Placement of image collections on a shared wrapping canvas."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .canvas import Canvas, CoolingSchedule
from .geometry import Box, Point, generate_disk
from .images import BitImage, ImgAlphaFilledContour, OffsettedBitImage


class PatternGenerator:
    """Places every image of every collection on a tileable canvas.

    Images keep ``offset`` pixels away from images of other collections and
    ``collection_offset`` pixels away from images of their own collection.
    """

    def __init__(
        self,
        width: int,
        height: int,
        collections: Sequence[Sequence[ImgAlphaFilledContour]],
        offset: int,
        collection_offset: int,
        temperature_initial: float,
    ) -> None:
        if width == 0 or height == 0:
            raise ValueError("PatternGenerator: canvas dimensions must be non-zero")
        if width < 0 or height < 0:
            raise ValueError("PatternGenerator: canvas dimensions must be positive")
        if not collections:
            raise ValueError("PatternGenerator: collections must not be empty")
        for collection in collections:
            if not collection:
                raise ValueError(
                    "PatternGenerator: each collection must contain at least one image"
                )
            for img in collection:
                if img.width == 0 or img.height == 0:
                    raise ValueError(
                        "PatternGenerator: all images must have non-zero dimensions"
                    )
                if img.width >= width or img.height >= height:
                    raise ValueError(
                        "Pattern Generator: some of images is larger than the canvas"
                    )

        self.width = width
        self.height = height
        self.temperature_initial = temperature_initial
        self._box = Box(Point(0, 0), Point(width - 1, height - 1))

        r_disk = generate_disk(offset)
        s_disk = generate_disk(collection_offset)
        self._plain = [[BitImage.from_alpha(img) for img in c] for c in collections]
        self._regular = [
            [OffsettedBitImage(img, r_disk, offset) for img in c] for c in collections
        ]
        self._spaced = [
            [OffsettedBitImage(img, s_disk, collection_offset) for img in c]
            for c in collections
        ]

    def placement_points(self, p: Point, img_width: int, img_height: int) -> list[Point]:
        """Copies of ``p`` shifted by the canvas size that still touch the canvas."""
        candidates = (
            p,
            Point(p.x - self.width, p.y),
            Point(p.x, p.y - self.height),
            Point(p.x - self.width, p.y - self.height),
        )
        return [
            point
            for point in candidates
            if Box(point, Point(point.x + img_width, point.y + img_height))
            .intersect(self._box)
            .is_valid()
        ]

    def generate(
        self, seed: int, decrease_t: CoolingSchedule
    ) -> list[list[list[Point]]]:
        """Place all images; result is indexed by collection, image, then copy.

        An image that could not be placed gets an empty list.
        """
        rng = random.Random(seed)
        canvases = [Canvas(self.width, self.height, rng) for _ in self._regular]
        result: list[list[list[Point]]] = [
            [[] for _ in collection] for collection in self._regular
        ]
        indices = [
            (ci, ii)
            for ci, collection in enumerate(self._regular)
            for ii in range(len(collection))
        ]
        rng.shuffle(indices)

        for ci, ii in indices:
            img = self._plain[ci][ii]
            p = canvases[ci].optimize_placement(
                img, self.temperature_initial, decrease_t
            )
            if p is None:
                continue
            result[ci][ii] = self.placement_points(p, img.width, img.height)
            for target, canvas in enumerate(canvases):
                source = self._spaced if target == ci else self._regular
                dilated = source[ci][ii]
                canvas.add_image(dilated, p.translate(dilated.base_offset))
        return result