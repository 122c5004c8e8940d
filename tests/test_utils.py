from typing import Optional, Sequence, Tuple

import numpy as np

from face_avatar.pixels import PixelBuffer
from face_avatar.pool import Asset, AssetPool, AssetPools
from face_avatar.types import LayerCategory

RGBA = Tuple[int, int, int, int]

SIZE = 24

WHITE: RGBA = (255, 255, 255, 255)
RED: RGBA = (255, 0, 0, 255)
GREEN: RGBA = (0, 255, 0, 255)
BLUE: RGBA = (0, 0, 255, 255)
CLEAR: RGBA = (0, 0, 0, 0)


def solid(width: int, height: int, rgba: RGBA) -> PixelBuffer:
    """Buffer filled with a single RGBA color."""
    return PixelBuffer.from_array(np.full((height, width, 4), rgba, dtype=np.uint8))


def block(
    size: int, rows: Tuple[int, int], cols: Tuple[int, int], rgba: RGBA
) -> PixelBuffer:
    """Transparent ``size`` x ``size`` buffer with one opaque rectangle.

    ``rows`` and ``cols`` are half-open ``(start, stop)`` ranges.
    """
    array = np.zeros((size, size, 4), dtype=np.uint8)
    array[rows[0] : rows[1], cols[0] : cols[1]] = rgba
    return PixelBuffer.from_array(array)


def row_of(*colors: RGBA) -> PixelBuffer:
    """1-pixel-high buffer with the given colors left to right."""
    return PixelBuffer.from_array(np.array([colors], dtype=np.uint8))


def make_pool(category: LayerCategory, buffers: Sequence[PixelBuffer]) -> AssetPool:
    return AssetPool.of(
        category,
        [Asset(f"{category}{i:02d}.png", buffer) for i, buffer in enumerate(buffers)],
    )


def default_face() -> PixelBuffer:
    return solid(SIZE, SIZE, WHITE)


def default_eyes() -> PixelBuffer:
    return block(SIZE, (6, 9), (4, 20), RED)


def default_mouth() -> PixelBuffer:
    return block(SIZE, (16, 19), (6, 18), GREEN)


def default_nose() -> PixelBuffer:
    # overlaps the mouth on rows 16..17
    return block(SIZE, (10, 18), (10, 14), BLUE)


def make_pools(
    faces: Optional[Sequence[PixelBuffer]] = None,
    eyes: Optional[Sequence[PixelBuffer]] = None,
    noses: Optional[Sequence[PixelBuffer]] = None,
    mouths: Optional[Sequence[PixelBuffer]] = None,
) -> AssetPools:
    """Single-asset pools of ``SIZE`` x ``SIZE`` layers unless overridden."""
    return AssetPools(
        face=make_pool(LayerCategory.FACE, faces or [default_face()]),
        eyes=make_pool(LayerCategory.EYES, eyes or [default_eyes()]),
        nose=make_pool(LayerCategory.NOSE, noses or [default_nose()]),
        mouth=make_pool(LayerCategory.MOUTH, mouths or [default_mouth()]),
    )


def rgba_at(buffer: PixelBuffer, x: int, y: int) -> RGBA:
    r, g, b, a = (int(c) for c in buffer.array[y, x])
    return (r, g, b, a)
