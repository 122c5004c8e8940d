"""Layer compositing.

Assets are flat-shaded images whose alpha channel is a binary mask: a source
pixel with alpha 0 is skipped and leaves the destination untouched, any other
source pixel replaces the destination pixel outright. No partial blending is
performed.

Resampling is nearest-neighbor. For a footprint ``w`` pixels wide, destination
column ``i`` samples source column ``i * src_w // w`` (mirrored when
flipping); rows work the same way. At 1:1 scale this is an exact copy.
"""

from typing import Tuple

import numpy as np
import numpy.typing as npt

from face_avatar.pixels import PixelBuffer
from face_avatar.types import RGB
from face_avatar.utils.color import hsi_to_rgb

IntArray = npt.NDArray[np.intp]

TINT_SATURATION = 1.0
TINT_INTENSITY = 1.0
HUE_STEPS = 256


def face_tint(color: int) -> RGB:
    """Tint for the face layer: hue ``color / 256`` at full saturation."""
    return hsi_to_rgb(color / HUE_STEPS, TINT_SATURATION, TINT_INTENSITY)


def recolor(src: PixelBuffer, tint: RGB) -> PixelBuffer:
    """
    Return a tinted copy of ``src``: every visible pixel's channels are
    multiplied by the tint channel and divided by 255 (truncating). Alpha
    and fully transparent pixels are left as they are; ``src`` is not
    modified.
    """
    out = src.array.copy()
    visible = out[..., 3] > 0
    rgb = out[..., :3].astype(np.uint16)
    factor = np.array(tint, dtype=np.uint16)
    tinted = ((rgb * factor) // 255).astype(np.uint8)
    out[..., :3][visible] = tinted[visible]
    return PixelBuffer(out)


def _sample_indices(
    start: int, stop: int, origin: int, extent: int, source_extent: int
) -> IntArray:
    local = np.arange(start, stop, dtype=np.intp) - origin
    return (local * source_extent) // extent


def _clip(origin: int, extent: int, limit: int) -> Tuple[int, int]:
    return max(origin, 0), min(origin + extent, limit)


def draw(
    dest: PixelBuffer,
    src: PixelBuffer,
    x: int,
    y: int,
    w: int,
    h: int,
    flip: bool = False,
) -> int:
    """Draw ``src`` scaled into the ``w`` x ``h`` rectangle at ``(x, y)``.

    The rectangle is clipped to ``dest``. Empty rectangles draw nothing.

    Arguments:
        dest: Canvas written in place.
        src: Layer image, only read.
        x: Left edge of the footprint on ``dest`` (may be negative).
        y: Top edge of the footprint on ``dest`` (may be negative).
        w: Footprint width.
        h: Footprint height.
        flip: Mirror the layer horizontally.

    Returns:
        int: Number of destination pixels written.
    """
    if np.may_share_memory(dest.array, src.array):
        raise ValueError("Source and destination buffers must not overlap")
    if w <= 0 or h <= 0 or src.width == 0 or src.height == 0:
        return 0

    x0, x1 = _clip(x, w, dest.width)
    y0, y1 = _clip(y, h, dest.height)
    if x0 >= x1 or y0 >= y1:
        return 0

    cols = _sample_indices(x0, x1, x, w, src.width)
    if flip:
        cols = src.width - 1 - cols
    rows = _sample_indices(y0, y1, y, h, src.height)

    sampled = src.array[rows[:, np.newaxis], cols[np.newaxis, :]]
    mask = sampled[..., 3] > 0
    region = dest.array[y0:y1, x0:x1]
    region[mask] = sampled[mask]
    return int(np.count_nonzero(mask))
