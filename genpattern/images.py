"""Alpha-channel images and the bit masks derived from them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

import numpy as np

from .geometry import Point

FILL_VALUE = 255

PixelData = Union[bytes, bytearray, memoryview, np.ndarray, Iterable[int]]


def _copy_pixels(data: PixelData | None, width: int, height: int) -> np.ndarray:
    if data is None:
        raise ValueError("ImgAlpha: data pointer is null")
    if width < 0 or height < 0:
        raise ValueError("ImgAlpha: dimensions must be non-negative")
    size = width * height
    if isinstance(data, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(data, dtype=np.uint8)
    else:
        flat = np.asarray(data, dtype=np.uint8).reshape(-1)
    if flat.size < size:
        raise ValueError(
            f"ImgAlpha: expected at least {size} bytes of data, got {flat.size}"
        )
    return flat[:size].copy().reshape(height, width)


def _rows_to_text(mask: np.ndarray) -> str:
    return "".join(
        "".join("1" if value else "0" for value in row) + "\n" for row in mask
    )


class ImgAlpha:
    """An 8-bit alpha channel stored row by row."""

    FILL_VALUE = FILL_VALUE

    def __init__(self, data: PixelData, width: int, height: int) -> None:
        self._alpha = _copy_pixels(data, width, height)

    @property
    def width(self) -> int:
        return self._alpha.shape[1]

    @property
    def height(self) -> int:
        return self._alpha.shape[0]

    @property
    def alpha(self) -> np.ndarray:
        """Read-only view of the alpha values, shape ``(height, width)``."""
        view = self._alpha.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, index: tuple[int, int]) -> int:
        i, j = index
        return int(self._alpha[i, j])

    def __str__(self) -> str:
        return _rows_to_text(self._alpha == FILL_VALUE)


class ImgAlphaFilledContour(ImgAlpha):
    """An alpha image whose enclosed transparent regions are filled.

    Pixels below ``threshold`` that are connected to the image border through
    other such pixels are kept; everything else becomes ``FILL_VALUE``.
    """

    def __init__(
        self, data: PixelData, width: int, height: int, threshold: int
    ) -> None:
        super().__init__(data, width, height)
        if width == 0 or height == 0:
            raise ValueError(
                "ImgAlphaFilledContour: image dimensions must be non-zero"
            )
        if threshold == 0:
            raise ValueError("ImgAlphaFilledContour: threshold must be > 0")
        if not 0 < threshold <= 255:
            raise ValueError("ImgAlphaFilledContour: threshold must be in 1..255")
        self._fill_contour(threshold)

    def _border_indices(self) -> list[int]:
        h, w = self.height, self.width
        rows = set(range(h))
        cols = set(range(w))
        cells = {(i, 0) for i in rows} | {(i, w - 1) for i in rows}
        cells |= {(0, j) for j in cols} | {(h - 1, j) for j in cols}
        return [i * w + j for i, j in sorted(cells)]

    def _fill_contour(self, threshold: int) -> None:
        h, w = self.height, self.width
        passable = (self._alpha < threshold).ravel().tolist()
        stack = [idx for idx in self._border_indices() if passable[idx]]
        if not stack:
            self._alpha.fill(FILL_VALUE)
            return

        reached = bytearray(h * w)
        while stack:
            idx = stack.pop()
            if reached[idx]:
                continue
            reached[idx] = 1
            x = idx % w
            neighbours = []
            if x + 1 < w:
                neighbours.append(idx + 1)
            if x > 0:
                neighbours.append(idx - 1)
            if idx + w < h * w:
                neighbours.append(idx + w)
            if idx >= w:
                neighbours.append(idx - w)
            stack.extend(n for n in neighbours if passable[n] and not reached[n])

        outside = np.frombuffer(bytes(reached), dtype=np.uint8).reshape(h, w)
        self._alpha[outside == 0] = FILL_VALUE


class BitImage:
    """A binary image; ``True`` marks a filled pixel."""

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError("BitImage: dimensions must be non-negative")
        self._pixels = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_alpha(cls, img: ImgAlpha) -> BitImage:
        """Mask of the pixels of ``img`` equal to ``FILL_VALUE``."""
        image = cls.__new__(cls)
        image._pixels = img.alpha == FILL_VALUE
        return image

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        """The underlying boolean array, shape ``(height, width)``."""
        return self._pixels

    def n_pixels(self) -> int:
        """Number of filled pixels."""
        return int(np.count_nonzero(self._pixels))

    def __getitem__(self, index: tuple[int, int]) -> bool:
        i, j = index
        if not (0 <= i < self.height and 0 <= j < self.width):
            raise IndexError(f"pixel ({i}, {j}) is outside the image")
        return bool(self._pixels[i, j])

    def __str__(self) -> str:
        return _rows_to_text(self._pixels)


class OffsettedBitImage(BitImage):
    """The filled pixels of an image dilated by a disk of radius ``r``.

    The result is ``2r`` pixels larger in each dimension; ``base_offset`` is
    where its top-left corner lies relative to the source image.
    """

    def __init__(self, img: ImgAlphaFilledContour, disk: np.ndarray, r: int) -> None:
        if r < 0:
            raise ValueError("OffsettedBitImage: radius must be non-negative")
        super().__init__(img.height + 2 * r, img.width + 2 * r)
        disk = np.asarray(disk, dtype=bool)
        if disk.ndim != 2 or disk.shape[0] > 2 * r + 1 or disk.shape[1] > 2 * r + 1:
            raise ValueError("OffsettedBitImage: disk does not fit the radius")
        self._base_offset = Point(-r, -r)

        filled = img.alpha == FILL_VALUE
        h, w = img.height, img.width
        for di, dj in zip(*np.nonzero(disk)):
            self._pixels[di : di + h, dj : dj + w] |= filled

    @property
    def base_offset(self) -> Point:
        return self._base_offset