"""Variant resolution and layer placement.

A raw field value ``v`` is resolved against a pool of ``n`` assets as::

    asset_index = v % n
    bucket      = v // n

Bucket 0 draws the asset normally. Every other bucket draws the category's
alternate geometry: with a 5-bit field and a pool of 16 this splits the
field evenly in two, while a pool of 1 yields 31 alternate buckets that all
look the same.

Placement arithmetic is integer with truncating division, and every layer is
centered on the canvas before its geometry adjusts it.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from face_avatar.exceptions import EmptyAssetPoolError
from face_avatar.types import Geometry, LayerCategory


@dataclass(frozen=True)
class VariantSelection:
    """Resolved pool entry and treatment for one layer.

    Attributes:
        asset_index: Index into the category pool.
        bucket: Raw quotient ``value // pool_size``.
        flipped: True when the layer is mirrored horizontally.
        geometry: Treatment applied when placing the layer.
    """

    asset_index: int
    bucket: int
    flipped: bool
    geometry: Geometry


@dataclass(frozen=True)
class Placement:
    """Destination rectangle of a layer on the canvas."""

    x: int
    y: int
    width: int
    height: int
    flip: bool = False


ALTERNATE_GEOMETRY: Dict[LayerCategory, Geometry] = {
    LayerCategory.FACE: Geometry.FLIPPED_FACE,
    LayerCategory.EYES: Geometry.FLIPPED_STRETCHED_EYES,
    LayerCategory.MOUTH: Geometry.FLIPPED_LOWERED_MOUTH,
    LayerCategory.NOSE: Geometry.FLIPPED_SHRUNK_NOSE,
}


def resolve_variant(
    value: int, pool_size: int, category: LayerCategory
) -> VariantSelection:
    """Map a raw field value onto a pool index and geometry."""
    if pool_size < 1:
        raise EmptyAssetPoolError(category)
    if value < 0:
        raise ValueError(f"Field value must not be negative, got {value}")
    bucket, asset_index = divmod(value, pool_size)
    if bucket == 0:
        return VariantSelection(asset_index, bucket, False, Geometry.NORMAL)
    return VariantSelection(asset_index, bucket, True, ALTERNATE_GEOMETRY[category])


def _centered(width: int, height: int, size: int, flip: bool) -> Placement:
    return Placement((size - width) // 2, (size - height) // 2, width, height, flip)


def _place_normal(w: int, h: int, size: int, small_space: int) -> Placement:
    return _centered(w, h, size, False)


def _place_flipped_face(w: int, h: int, size: int, small_space: int) -> Placement:
    return _centered(w, h, size, True)


def _place_stretched_eyes(w: int, h: int, size: int, small_space: int) -> Placement:
    return _centered(w * 7 // 8, h * 5 // 4, size, True)


def _place_lowered_mouth(w: int, h: int, size: int, small_space: int) -> Placement:
    base = _centered(w, h, size, True)
    return Placement(base.x, base.y + small_space, w, h - small_space, True)


def _place_shrunk_nose(w: int, h: int, size: int, small_space: int) -> Placement:
    return _centered(w * 3 // 4, h * 3 // 4, size, True)


PlaceFn = Callable[[int, int, int, int], Placement]

PLACEMENT_REGISTRY: Dict[Geometry, PlaceFn] = {
    Geometry.NORMAL: _place_normal,
    Geometry.FLIPPED_FACE: _place_flipped_face,
    Geometry.FLIPPED_STRETCHED_EYES: _place_stretched_eyes,
    Geometry.FLIPPED_LOWERED_MOUTH: _place_lowered_mouth,
    Geometry.FLIPPED_SHRUNK_NOSE: _place_shrunk_nose,
}


def place_layer(
    selection: VariantSelection,
    asset_width: int,
    asset_height: int,
    size: int,
    small_space: int,
) -> Placement:
    """Destination rectangle for an asset of the given native size."""
    place = PLACEMENT_REGISTRY[selection.geometry]
    return place(asset_width, asset_height, size, small_space)
