"""High-level entry point: place collections of alpha images on a tileable canvas."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from .canvas import CoolingSchedule
from .generator import PatternGenerator
from .geometry import Point
from .images import ImgAlphaFilledContour, PixelData
from .schedules import ExponentialSchedule, LinearSchedule

TEMPERATURE_INITIAL = 100.0


class ScheduleType(enum.IntEnum):
    """Kinds of cooling schedule."""

    EXPONENTIAL = 0
    LINEAR = 1


@dataclass(frozen=True)
class Schedule:
    """A cooling schedule choice with its single parameter.

    For ``EXPONENTIAL`` the parameter is ``alpha``, for ``LINEAR`` it is ``k``.
    """

    type: Union[ScheduleType, int]
    parameter: float

    @classmethod
    def exponential(cls, alpha: float) -> Schedule:
        return cls(ScheduleType.EXPONENTIAL, alpha)

    @classmethod
    def linear(cls, k: float) -> Schedule:
        return cls(ScheduleType.LINEAR, k)

    def build(self) -> CoolingSchedule:
        """Return the callable schedule this choice describes."""
        try:
            kind = ScheduleType(self.type)
        except ValueError:
            raise ValueError("Unknown schedule type") from None
        if kind is ScheduleType.EXPONENTIAL:
            return ExponentialSchedule(self.parameter)
        return LinearSchedule(self.parameter)


@dataclass(frozen=True)
class AlphaImage:
    """An 8-bit alpha channel of ``width`` by ``height`` pixels, row by row."""

    width: int
    height: int
    data: PixelData

    def _contour(self, threshold: int) -> ImgAlphaFilledContour:
        return ImgAlphaFilledContour(self.data, self.width, self.height, threshold)


def genpattern(
    collections: Sequence[Sequence[AlphaImage]],
    canvas_width: int,
    canvas_height: int,
    threshold: int,
    offset_radius: int,
    collection_offset_radius: int,
    schedule: Schedule,
    seed: int,
) -> list[list[list[Point]]]:
    """Place every image of every collection on a wrapping canvas.

    Returns, for each collection and each image in it, the positions of the
    image's copies that touch the canvas (at most four, because of wrapping).
    An image that could not be placed gets an empty list.

    Raises ``ValueError`` for invalid images, canvas sizes or schedules.
    """
    contours = [[img._contour(threshold) for img in coll] for coll in collections]
    generator = PatternGenerator(
        canvas_width,
        canvas_height,
        contours,
        offset_radius,
        collection_offset_radius,
        TEMPERATURE_INITIAL,
    )
    return generator.generate(seed, schedule.build())