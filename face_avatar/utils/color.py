"""Color conversion helpers."""

import math
from typing import Tuple

from face_avatar.types import RGB


def _hsi_chromaticity(h: float, s: float) -> Tuple[float, float, float]:
    """
    Classic HSI sector formula at unit intensity. Returns r, g, b with
    ``r + g + b == 3``; channels may exceed 1 for saturated hues.
    """
    deg = (h % 1.0) * 360.0
    sector = int(deg // 120.0) % 3
    local = math.radians(deg - sector * 120.0)
    low = 1.0 - s
    high = 1.0 + s * math.cos(local) / math.cos(math.radians(60.0) - local)
    mid = 3.0 - (low + high)
    if sector == 0:
        return high, mid, low
    if sector == 1:
        return low, high, mid
    return mid, low, high


def hsi_to_rgb(h: float, s: float, i: float) -> RGB:
    """
    Convert hue (fraction of a full turn), saturation and intensity, all in
    [0, 1], to an 8-bit RGB triple.

    Triples that fall outside the RGB cube are scaled down so their brightest
    channel equals ``i``, which keeps the hue intact instead of clipping it.
    """
    s = min(max(s, 0.0), 1.0)
    i = min(max(i, 0.0), 1.0)
    r, g, b = _hsi_chromaticity(h, s)
    r, g, b = r * i, g * i, b * i
    peak = max(r, g, b)
    if peak > i and peak > 0.0:
        scale = i / peak
        r, g, b = r * scale, g * scale, b * scale
    return (
        int(round(min(max(r, 0.0), 1.0) * 255)),
        int(round(min(max(g, 0.0), 1.0) * 255)),
        int(round(min(max(b, 0.0), 1.0) * 255)),
    )
