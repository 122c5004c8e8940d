import numpy as np
import pytest

from face_avatar.exceptions import DimensionMismatchError
from face_avatar.pixels import ARGB, TRANSPARENT, PixelBuffer
from tests.test_utils import RED, row_of, solid


def test_new_buffer_is_transparent() -> None:
    buffer = PixelBuffer.new(3, 2)
    assert (buffer.width, buffer.height) == (3, 2)
    assert buffer.pixels() == [TRANSPARENT] * 6


def test_new_buffer_with_fill() -> None:
    buffer = PixelBuffer.new(2, 2, fill=ARGB(alpha=255, red=1, green=2, blue=3))
    assert buffer.pixel(1, 1) == ARGB(255, 1, 2, 3)
    assert tuple(buffer.array[0, 0]) == (1, 2, 3, 255)


def test_from_pixels_is_row_major() -> None:
    pixels = [ARGB(255, i, 0, 0) for i in range(6)]
    buffer = PixelBuffer.from_pixels(3, 2, pixels)
    assert buffer.pixel(2, 0).red == 2
    assert buffer.pixel(0, 1).red == 3
    assert buffer.pixels() == pixels


def test_from_pixels_rejects_wrong_length() -> None:
    with pytest.raises(DimensionMismatchError):
        PixelBuffer.from_pixels(3, 2, [TRANSPARENT] * 5)


def test_from_array_rejects_wrong_shape() -> None:
    with pytest.raises(DimensionMismatchError):
        PixelBuffer.from_array(np.zeros((2, 2, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        PixelBuffer.from_array(np.zeros((4, 4), dtype=np.uint8))


def test_from_array_copies_input() -> None:
    data = np.zeros((1, 1, 4), dtype=np.uint8)
    buffer = PixelBuffer.from_array(data)
    data[0, 0] = RED
    assert buffer.pixel(0, 0) == TRANSPARENT


def test_pixel_out_of_bounds() -> None:
    with pytest.raises(IndexError):
        PixelBuffer.new(2, 2).pixel(2, 0)


def test_copy_is_independent() -> None:
    buffer = solid(2, 2, RED)
    clone = buffer.copy()
    clone.array[0, 0] = (0, 0, 0, 0)
    assert buffer.pixel(0, 0) == ARGB(255, 255, 0, 0)
    assert clone != buffer


def test_equality_is_by_value() -> None:
    assert solid(2, 3, RED) == solid(2, 3, RED)
    assert solid(2, 3, RED) != solid(3, 2, RED)
    assert hash(solid(2, 3, RED)) == hash(solid(2, 3, RED))


def test_image_round_trip_keeps_alpha() -> None:
    buffer = row_of((10, 20, 30, 0), (40, 50, 60, 128), (70, 80, 90, 255))
    image = buffer.to_image()
    assert image.mode == "RGBA"
    assert image.size == (3, 1)
    assert PixelBuffer.from_image(image) == buffer


def test_from_image_converts_mode() -> None:
    image = solid(2, 2, RED).to_image().convert("RGB")
    assert PixelBuffer.from_image(image) == solid(2, 2, RED)


def test_transparent_flag() -> None:
    assert TRANSPARENT.is_transparent
    assert not ARGB(1, 0, 0, 0).is_transparent
