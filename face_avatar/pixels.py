"""Pixel buffers.

A :class:`PixelBuffer` is a fixed-size grid of 8-bit ARGB pixels backed by a
NumPy ``uint8`` array of shape ``(height, width, 4)``. Channels are stored in
RGBA order so the array can be handed to Pillow without reshuffling; the
public pixel view (:class:`ARGB`) keeps alpha as a separate field.

Indexing is row-major with the origin at the top-left corner. The buffer
object itself is frozen, but its array is writable: compositing functions
borrow a destination buffer and write into it in place, while sources are only
read. A buffer must never be used as both source and destination of the same
draw.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import numpy.typing as npt
from PIL import Image

from face_avatar.exceptions import DimensionMismatchError


UInt8Array = npt.NDArray[np.uint8]

CHANNELS = 4


@dataclass(frozen=True)
class ARGB:
    """A single pixel.

    Attributes:
        alpha: Opacity, 0 means fully transparent.
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    alpha: int
    red: int
    green: int
    blue: int

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0


TRANSPARENT = ARGB(0, 0, 0, 0)


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Owned ARGB pixel grid.

    Attributes:
        array: ``(height, width, 4)`` RGBA ``uint8`` data.
    """

    array: UInt8Array

    def __post_init__(self) -> None:
        shape = tuple(self.array.shape)
        if len(shape) != 3 or shape[2] != CHANNELS:
            raise DimensionMismatchError(("height", "width", CHANNELS), shape)
        if self.array.dtype != np.uint8:
            raise TypeError(f"Pixel data must be uint8, got {self.array.dtype}")

    @classmethod
    def new(cls, width: int, height: int, fill: ARGB = TRANSPARENT) -> "PixelBuffer":
        """Allocate a buffer filled with a single color."""
        if width < 0 or height < 0:
            raise ValueError(f"Invalid buffer size {width}x{height}")
        array = np.empty((height, width, CHANNELS), dtype=np.uint8)
        array[...] = (fill.red, fill.green, fill.blue, fill.alpha)
        return cls(array)

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> "PixelBuffer":
        """Wrap a copy of an ``(h, w, 4)`` RGBA array."""
        data = np.array(array, dtype=np.uint8, copy=True)
        return cls(data)

    @classmethod
    def from_pixels(
        cls, width: int, height: int, pixels: Sequence[ARGB]
    ) -> "PixelBuffer":
        """Build a buffer from a flat, row-major pixel sequence.

        Raises:
            DimensionMismatchError: ``len(pixels) != width * height``.
        """
        if len(pixels) != width * height:
            raise DimensionMismatchError((width * height,), (len(pixels),))
        array = np.zeros((height, width, CHANNELS), dtype=np.uint8)
        if pixels:
            flat = np.array(
                [(p.red, p.green, p.blue, p.alpha) for p in pixels], dtype=np.uint8
            )
            array[...] = flat.reshape(height, width, CHANNELS)
        return cls(array)

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        """Decode a Pillow image into a buffer (converted to RGBA)."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(np.array(image, dtype=np.uint8))

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.array))

    @property
    def width(self) -> int:
        return int(self.array.shape[1])

    @property
    def height(self) -> int:
        return int(self.array.shape[0])

    @property
    def alpha(self) -> UInt8Array:
        return self.array[..., 3]

    def pixel(self, x: int, y: int) -> ARGB:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        r, g, b, a = (int(c) for c in self.array[y, x])
        return ARGB(alpha=a, red=r, green=g, blue=b)

    def pixels(self) -> List[ARGB]:
        """Row-major list of every pixel."""
        return [
            ARGB(alpha=int(a), red=int(r), green=int(g), blue=int(b))
            for r, g, b, a in self.array.reshape(-1, CHANNELS)
        ]

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.array.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return bool(np.array_equal(self.array, other.array))

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.array.tobytes()))
