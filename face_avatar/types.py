"""Common type aliases and enumerations.

``LayerCategory`` names the four feature pools an avatar is assembled from;
``Geometry`` names the treatment a layer receives once its raw field value has
been resolved against a pool (see :mod:`face_avatar.variants`).
"""

from enum import StrEnum, auto
from typing import Tuple


Identifier = int
RGB = Tuple[int, int, int]


class LayerCategory(StrEnum):
    """Feature categories, in the order their pools are usually listed."""

    FACE = auto()
    EYES = auto()
    NOSE = auto()
    MOUTH = auto()

    @property
    def directory(self) -> str:
        """Asset subdirectory holding this category's images."""
        return LAYER_DIRECTORIES[self]


LAYER_DIRECTORIES = {
    LayerCategory.FACE: "faces",
    LayerCategory.EYES: "eyes",
    LayerCategory.NOSE: "noses",
    LayerCategory.MOUTH: "mouths",
}

# z-order: later layers occlude earlier ones where opaque
DRAW_ORDER: Tuple[LayerCategory, ...] = (
    LayerCategory.FACE,
    LayerCategory.EYES,
    LayerCategory.MOUTH,
    LayerCategory.NOSE,
)


class Geometry(StrEnum):
    """Geometric treatment applied to a layer when drawing it."""

    NORMAL = auto()
    FLIPPED_FACE = auto()
    FLIPPED_STRETCHED_EYES = auto()
    FLIPPED_LOWERED_MOUTH = auto()
    FLIPPED_SHRUNK_NOSE = auto()
