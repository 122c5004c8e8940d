import io
import logging
import random
from typing import Optional

from face_avatar.config import DEFAULT_SIZE, AvatarConfig
from face_avatar.exceptions import EncodingError
from face_avatar.identity import (
    AvatarIdentity,
    decode,
    from_random,
    from_text,
    from_values,
)
from face_avatar.pixels import PixelBuffer
from face_avatar.pool import AssetPools, load_pools
from face_avatar.renderer.compositor import draw, face_tint, recolor
from face_avatar.renderer.transform import rotate, rotation_angle
from face_avatar.types import DRAW_ORDER, Identifier, LayerCategory
from face_avatar.variants import place_layer, resolve_variant

logger = logging.getLogger(__name__)

PNG_FORMAT = "PNG"


def draw_layer(
    canvas: PixelBuffer,
    category: LayerCategory,
    value: int,
    pools: AssetPools,
    size: int,
    small_space: int,
    tint_color: Optional[int] = None,
) -> None:
    """Resolve ``value`` against the category pool and draw it on ``canvas``.

    When ``tint_color`` is given the asset is recolored first; the tint is
    applied to a private copy so the pooled buffer stays untouched.
    """
    pool = pools[category]
    selection = resolve_variant(value, len(pool), category)
    asset = pool[selection.asset_index]
    layer = asset.buffer
    if tint_color is not None:
        layer = recolor(layer, face_tint(tint_color))
    placement = place_layer(selection, layer.width, layer.height, size, small_space)
    written = draw(
        canvas,
        layer,
        placement.x,
        placement.y,
        placement.width,
        placement.height,
        placement.flip,
    )
    logger.debug(
        "Draw %s %s (%d) %s at %d,%d %dx%d flip=%s: %d px",
        category,
        asset.name,
        selection.asset_index,
        selection.geometry,
        placement.x,
        placement.y,
        placement.width,
        placement.height,
        placement.flip,
        written,
    )


def render(
    identity: AvatarIdentity,
    pools: AssetPools,
    size: int = DEFAULT_SIZE,
    small_space: Optional[int] = None,
) -> PixelBuffer:
    """
    Composite the avatar for ``identity`` and return the rotated ``size`` x
    ``size`` buffer. Face (tinted), eyes, mouth and nose are drawn in that
    order onto a transparent canvas, which is then tilted onto a second
    buffer. The result depends only on the arguments.
    """
    config = AvatarConfig(size=size, small_space=small_space)
    space = config.resolved_small_space

    canvas = PixelBuffer.new(size, size)
    for category in DRAW_ORDER:
        value: int = getattr(identity, category.value)
        tint = identity.color if category == LayerCategory.FACE else None
        draw_layer(canvas, category, value, pools, size, space, tint_color=tint)

    angle = rotation_angle(identity.rotate)
    logger.debug("Rotate canvas by %.2f rad", angle)
    result = PixelBuffer.new(size, size)
    rotate(result, canvas, angle)
    return result


def encode_png(buffer: PixelBuffer) -> bytes:
    """Encode a buffer as PNG bytes.

    Raises:
        EncodingError: the image codec failed.
    """
    stream = io.BytesIO()
    try:
        buffer.to_image().save(stream, format=PNG_FORMAT)
    except (OSError, ValueError) as exc:
        raise EncodingError(f"Failed to encode avatar as PNG: {exc}") from exc
    return stream.getvalue()


class AvatarRenderer:
    pools: AssetPools
    config: AvatarConfig
    rng: Optional[random.Random]

    def __init__(
        self,
        pools: AssetPools,
        config: Optional[AvatarConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.pools = pools
        self.config = config or AvatarConfig()
        self.rng = rng

    @classmethod
    def from_directory(
        cls,
        asset_root: str,
        config: Optional[AvatarConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "AvatarRenderer":
        return cls(load_pools(asset_root), config=config, rng=rng)

    @property
    def available_combinations(self) -> int:
        return self.pools.available_combinations

    def render(self, identity: AvatarIdentity) -> PixelBuffer:
        return render(
            identity,
            self.pools,
            size=self.config.size,
            small_space=self.config.resolved_small_space,
        )

    def render_id(self, identifier: Identifier) -> PixelBuffer:
        return self.render(decode(identifier))

    def render_text(self, text: str) -> PixelBuffer:
        return self.render_id(from_text(text))

    def render_random(self) -> PixelBuffer:
        return self.render_id(from_random(self.rng))

    def render_values(
        self,
        color: Optional[int] = None,
        nose: Optional[int] = None,
        eyes: Optional[int] = None,
        mouth: Optional[int] = None,
        face: Optional[int] = None,
        rotate: Optional[int] = None,
    ) -> PixelBuffer:
        """Render explicit fields; unset ones are randomized."""
        identity = from_values(
            color=color,
            nose=nose,
            eyes=eyes,
            mouth=mouth,
            face=face,
            rotate=rotate,
            rng=self.rng,
        )
        return self.render(identity)

    def png(self, identity: AvatarIdentity) -> bytes:
        return encode_png(self.render(identity))
