"""Asset pools.

An :class:`AssetPool` is the ordered, read-only list of images for one layer
category. Pools are built once (usually by :func:`load_pools` at startup) and
shared by every render afterwards; nothing in the engine mutates a pooled
buffer, so concurrent renders may read them without locking.

Asset order is the sorted file-name order of the category directory, which
makes the identifier -> image mapping stable across machines.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from PIL import Image
from pyrsistent import pvector
from pyrsistent.typing import PVector

from face_avatar.exceptions import EmptyAssetPoolError
from face_avatar.identity import FIELD_LAYOUT
from face_avatar.pixels import PixelBuffer
from face_avatar.types import LayerCategory

logger = logging.getLogger(__name__)

ASSET_EXTENSIONS = (".png",)
COLOR_COUNT = 1 << dict(FIELD_LAYOUT)["color"]
VARIANTS_PER_ASSET = 2


@dataclass(frozen=True)
class Asset:
    name: str
    buffer: PixelBuffer


@dataclass(frozen=True)
class AssetPool:
    """Immutable list of assets for one category.

    Raises:
        EmptyAssetPoolError: when constructed without assets.
    """

    category: LayerCategory
    assets: PVector[Asset]

    def __post_init__(self) -> None:
        if len(self.assets) == 0:
            raise EmptyAssetPoolError(self.category)

    @classmethod
    def of(cls, category: LayerCategory, assets: Iterable[Asset]) -> "AssetPool":
        return cls(category=category, assets=pvector(assets))

    def __len__(self) -> int:
        return len(self.assets)

    def __getitem__(self, index: int) -> Asset:
        return self.assets[index]

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.assets)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(asset.name for asset in self.assets)


@dataclass(frozen=True)
class AssetPools:
    """The four category pools an avatar is assembled from."""

    face: AssetPool
    eyes: AssetPool
    nose: AssetPool
    mouth: AssetPool

    def __post_init__(self) -> None:
        for category in LayerCategory:
            pool = self[category]
            if pool.category != category:
                raise ValueError(
                    f"Pool for '{category}' holds '{pool.category}' assets"
                )

    def __getitem__(self, category: LayerCategory) -> AssetPool:
        return getattr(self, category.value)

    @property
    def available_combinations(self) -> int:
        """Number of distinct avatars the pools can produce (rotation aside)."""
        total = COLOR_COUNT
        for category in LayerCategory:
            total *= len(self[category]) * VARIANTS_PER_ASSET
        return total


def load_asset(path: str) -> Asset:
    """Decode one image file into an asset named after the file."""
    with Image.open(path) as image:
        buffer = PixelBuffer.from_image(image)
    return Asset(name=os.path.basename(path), buffer=buffer)


def load_pool(directory: str, category: LayerCategory) -> AssetPool:
    """Load every image of ``directory`` into a pool, in file-name order.

    Raises:
        EmptyAssetPoolError: the directory contains no images.
        OSError: the directory or an image cannot be read.
    """
    files = sorted(
        f for f in os.listdir(directory) if f.lower().endswith(ASSET_EXTENSIONS)
    )
    assets = []
    for file in files:
        path = os.path.join(directory, file)
        logger.info("Load %s", path)
        assets.append(load_asset(path))
    if not assets:
        raise EmptyAssetPoolError(category)
    logger.info("Loaded %d %s assets from %s", len(assets), category, directory)
    return AssetPool.of(category, assets)


def load_pools(asset_root: str) -> AssetPools:
    """Load all four category pools from ``<asset_root>/<category dir>``."""
    loaded = {
        category.value: load_pool(os.path.join(asset_root, category.directory), category)
        for category in LayerCategory
    }
    pools = AssetPools(**loaded)
    logger.info(
        "Asset pools ready: %d combinations available", pools.available_combinations
    )
    return pools
