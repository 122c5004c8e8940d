"""Final canvas rotation.

The finished canvas gets a small tilt about its center. Rotation is inverse
mapped: each destination pixel center is rotated back into the source and
the pixel it lands on is copied (nearest-neighbor, alpha included).
Destination pixels that map outside the source become fully transparent.
Positive angles turn the image clockwise as displayed (y axis pointing down).
"""

import math

import numpy as np

from face_avatar.exceptions import DimensionMismatchError
from face_avatar.pixels import PixelBuffer

ROTATE_STEPS = 16
ROTATE_NEUTRAL = 7
ROTATE_STEP_RADIANS = 0.02


def rotation_angle(rotate: int) -> float:
    """Tilt in radians for a rotate field, roughly within +/- 0.16 rad."""
    return ((rotate % ROTATE_STEPS) - ROTATE_NEUTRAL) * ROTATE_STEP_RADIANS


def rotate(dest: PixelBuffer, src: PixelBuffer, angle: float) -> None:
    """Write ``src`` rotated by ``angle`` radians about its center into ``dest``.

    Raises:
        DimensionMismatchError: ``dest`` and ``src`` differ in size.
    """
    if dest.array.shape != src.array.shape:
        raise DimensionMismatchError(tuple(src.array.shape), tuple(dest.array.shape))
    if np.may_share_memory(dest.array, src.array):
        raise ValueError("Source and destination buffers must not overlap")

    height, width = src.height, src.width
    cx, cy = width / 2.0, height / 2.0
    ys, xs = np.mgrid[0:height, 0:width]
    dx = xs + 0.5 - cx
    dy = ys + 0.5 - cy

    cos_a, sin_a = math.cos(angle), math.sin(angle)
    sx = np.floor(cos_a * dx + sin_a * dy + cx).astype(np.intp)
    sy = np.floor(-sin_a * dx + cos_a * dy + cy).astype(np.intp)

    inside = (sx >= 0) & (sx < width) & (sy >= 0) & (sy < height)
    out = np.zeros_like(src.array)
    out[inside] = src.array[sy[inside], sx[inside]]
    dest.array[...] = out
