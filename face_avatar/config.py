"""Render configuration.

``AvatarConfig`` carries the two knobs of a render: the square output size in
pixels and the ``small_space`` offset used by the lowered-mouth variant. When
``small_space`` is left unset it follows the size (one twelfth of it).
"""

from dataclasses import dataclass
from typing import Optional


DEFAULT_SIZE = 600
DEFAULT_ASSET_ROOT = "assets"
SMALL_SPACE_DIVISOR = 12


@dataclass(frozen=True)
class AvatarConfig:
    """Output geometry for a render.

    Attributes:
        size: Width and height of the square canvas in pixels.
        small_space: Vertical shift applied to lowered mouths. ``None`` means
            ``size // 12``.
    """

    size: int = DEFAULT_SIZE
    small_space: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Avatar size must be positive, got {self.size}")
        if self.small_space is not None and self.small_space < 0:
            raise ValueError(f"small_space must not be negative, got {self.small_space}")

    @property
    def resolved_small_space(self) -> int:
        if self.small_space is None:
            return self.size // SMALL_SPACE_DIVISOR
        return self.small_space
