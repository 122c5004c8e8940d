"""Error types raised by the avatar engine.

Every failure surfaces to the caller as a subclass of :class:`AvatarError`;
nothing inside the engine retries or masks an error.
"""


class AvatarError(Exception):
    """Base exception for all avatar engine errors."""


class EmptyAssetPoolError(AvatarError, ValueError):
    """Raised when a layer category has no assets to choose from."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Asset pool '{category}' is empty")


class DimensionMismatchError(AvatarError, ValueError):
    """Raised when pixel data does not match its declared dimensions."""

    def __init__(self, expected: tuple[object, ...], actual: tuple[object, ...]) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Pixel data shape {actual} does not match {expected}")


class EncodingError(AvatarError):
    """Raised when the image encoder fails to produce output bytes."""
