import numpy as np
import pytest

from genpattern.geometry import Point, generate_disk
from genpattern.images import (
    FILL_VALUE,
    BitImage,
    ImgAlpha,
    ImgAlphaFilledContour,
    OffsettedBitImage,
)

MULTIPLIER = 20


def _center_pixel_data(w, h):
    data = bytearray(w * h)
    data[(h // 2) * w + (w // 2)] = FILL_VALUE
    return data


def test_offset_adds_pixels():
    w = h = 3 * MULTIPLIER
    img = ImgAlphaFilledContour(_center_pixel_data(w, h), w, h, 64)
    orig = BitImage.from_alpha(img)
    disk = generate_disk(1)
    off = OffsettedBitImage(img, disk, 1)
    assert orig.n_pixels() == 1
    assert off.n_pixels() > orig.n_pixels()
    assert off.n_pixels() == int(disk.sum())


def test_offsetted_geometry():
    w = h = 3 * MULTIPLIER
    img = ImgAlphaFilledContour(_center_pixel_data(w, h), w, h, 64)
    off = OffsettedBitImage(img, generate_disk(2), 2)
    assert off.width == w + 4
    assert off.height == h + 4
    assert off.base_offset == Point(-2, -2)
    # the centre of the dilation lies on the source pixel shifted by r
    assert off[h // 2 + 2, w // 2 + 2]
    assert not off[0, 0]


def test_zero_threshold_rejected():
    w = h = 3 * MULTIPLIER
    with pytest.raises(ValueError):
        ImgAlphaFilledContour(_center_pixel_data(w, h), w, h, 0)


def test_zero_dimensions_rejected():
    with pytest.raises(ValueError):
        ImgAlphaFilledContour(b"", 0, 5, 64)
    with pytest.raises(ValueError):
        ImgAlphaFilledContour(b"", 5, 0, 64)


def test_null_data_rejected():
    with pytest.raises(ValueError):
        ImgAlpha(None, 2, 2)


def test_short_data_rejected():
    with pytest.raises(ValueError):
        ImgAlpha(b"\x00\x00\x00", 2, 2)


def test_img_alpha_copies_data():
    data = bytearray([1, 2, 3, 4, 5, 6])
    img = ImgAlpha(data, 3, 2)
    data[0] = 99
    assert img[0, 0] == 1
    assert img[1, 2] == 6
    assert img.width == 3
    assert img.height == 2


def test_img_alpha_str():
    img = ImgAlpha(bytes([255, 0, 255, 0, 0, 255]), 3, 2)
    assert str(img) == "101\n001\n"


def test_bit_image_from_alpha_and_str():
    img = ImgAlpha(bytes([255, 0, 255, 0, 0, 255]), 3, 2)
    bits = BitImage.from_alpha(img)
    assert str(bits) == "101\n001\n"
    assert bits.n_pixels() == 3
    assert bits[0, 0] and not bits[1, 0]


def test_bit_image_empty_and_bounds():
    bits = BitImage(4, 6)
    assert bits.n_pixels() == 0
    assert bits.height == 4 and bits.width == 6
    with pytest.raises(IndexError):
        bits[4, 0]
    with pytest.raises(IndexError):
        bits[0, 6]


def test_full_image_stays_full():
    w = h = 10 * MULTIPLIER
    img = ImgAlphaFilledContour(bytes([FILL_VALUE]) * (w * h), w, h, 64)
    assert BitImage.from_alpha(img).n_pixels() == w * h


def test_values_above_threshold_become_filled():
    img = ImgAlphaFilledContour(bytes([100]) * 25, 5, 5, 64)
    assert img[0, 0] == FILL_VALUE
    assert img[2, 2] == FILL_VALUE
    assert img[4, 4] == FILL_VALUE
    assert BitImage.from_alpha(img).n_pixels() == 25


def test_enclosed_hole_is_filled():
    size = 7
    alpha = np.zeros((size, size), dtype=np.uint8)
    alpha[1:6, 1:6] = FILL_VALUE
    alpha[2:5, 2:5] = 0
    img = ImgAlphaFilledContour(alpha.tobytes(), size, size, 64)
    expected = np.zeros((size, size), dtype=bool)
    expected[1:6, 1:6] = True
    assert np.array_equal(BitImage.from_alpha(img).pixels, expected)
    assert img[0, 0] == 0


def test_open_hole_is_not_filled():
    size = 7
    alpha = np.zeros((size, size), dtype=np.uint8)
    alpha[1:6, 1:6] = FILL_VALUE
    alpha[2:5, 2:5] = 0
    alpha[3, 5] = 0
    alpha[3, 6] = 0
    img = ImgAlphaFilledContour(alpha.tobytes(), size, size, 64)
    assert img[3, 3] == 0
    assert img[1, 1] == FILL_VALUE


def test_transparent_pixels_keep_their_value():
    alpha = np.full((4, 4), 10, dtype=np.uint8)
    img = ImgAlphaFilledContour(alpha.tobytes(), 4, 4, 64)
    assert np.all(img.alpha == 10)
    assert BitImage.from_alpha(img).n_pixels() == 0