"""Avatar identity and the 32-bit identifier codec.

An identifier packs six fields, low bits first::

    bits  0..7   color   (8)
    bits  8..12  nose    (5)
    bits 13..17  eyes    (5)
    bits 18..22  mouth   (5)
    bits 23..27  face    (5)
    bits 28..31  rotate  (4)

Identifiers are unsigned; anything wider than 32 bits (or negative) is masked
to its low 32 bits before decoding. Text is mapped onto the identifier space
with CRC-32 over its UTF-8 bytes, so distinct texts may collide.

Examples
--------
>>> decode(0)
AvatarIdentity(color=0, nose=0, eyes=0, mouth=0, face=0, rotate=0)
>>> hex(from_text("Test"))
'0x784dd132'
"""

import random
import zlib
from dataclasses import dataclass, fields
from typing import Any, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from face_avatar.types import Identifier

IDENTIFIER_BITS = 32
IDENTIFIER_MASK = (1 << IDENTIFIER_BITS) - 1

# (field name, bit width), low bits first
FIELD_LAYOUT: Tuple[Tuple[str, int], ...] = (
    ("color", 8),
    ("nose", 5),
    ("eyes", 5),
    ("mouth", 5),
    ("face", 5),
    ("rotate", 4),
)


@dataclass(frozen=True)
class AvatarIdentity:
    """The render parameters of one avatar.

    Field values decoded from an identifier are always within their bit
    width. Explicitly supplied values may be larger; they are reduced when
    encoded, resolved against a pool, or turned into a rotation angle.

    Attributes:
        color: Face tint hue (0..255).
        nose: Nose pool selector (0..31).
        eyes: Eyes pool selector (0..31).
        mouth: Mouth pool selector (0..31).
        face: Face pool selector (0..31).
        rotate: Canvas tilt selector (0..15).
    """

    color: int = 0
    nose: int = 0
    eyes: int = 0
    mouth: int = 0
    face: int = 0
    rotate: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"Field '{f.name}' must not be negative")

    @property
    def identifier(self) -> Identifier:
        return encode(self)


def decode(identifier: Identifier) -> AvatarIdentity:
    """Unpack a 32-bit identifier into its six fields."""
    value = identifier & IDENTIFIER_MASK
    values: dict[str, int] = {}
    for name, width in FIELD_LAYOUT:
        values[name] = value & ((1 << width) - 1)
        value >>= width
    return AvatarIdentity(**values)


def encode(identity: AvatarIdentity) -> Identifier:
    """Pack an identity into a 32-bit identifier.

    Each field is reduced modulo its bit width, so ``encode`` is total.
    """
    identifier = 0
    shift = 0
    for name, width in FIELD_LAYOUT:
        identifier |= (getattr(identity, name) & ((1 << width) - 1)) << shift
        shift += width
    return identifier


def from_text(text: str) -> Identifier:
    """CRC-32 of the UTF-8 encoded text, used directly as identifier."""
    return zlib.crc32(text.encode("utf-8")) & IDENTIFIER_MASK


def from_random(rng: Optional[random.Random] = None) -> Identifier:
    """Uniformly random identifier."""
    source = rng if rng is not None else random
    return source.getrandbits(IDENTIFIER_BITS)


def from_values(
    color: Optional[int] = None,
    nose: Optional[int] = None,
    eyes: Optional[int] = None,
    mouth: Optional[int] = None,
    face: Optional[int] = None,
    rotate: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> AvatarIdentity:
    """Build an identity from explicit fields, randomizing the unset ones.

    Random fields are drawn uniformly within their bit width. Explicit
    values are kept as given.
    """
    source = rng if rng is not None else random
    given = {
        "color": color,
        "nose": nose,
        "eyes": eyes,
        "mouth": mouth,
        "face": face,
        "rotate": rotate,
    }
    values = {
        name: given[name] if given[name] is not None else source.getrandbits(width)
        for name, width in FIELD_LAYOUT
    }
    return AvatarIdentity(**values)


def describe(identity: AvatarIdentity) -> PMap[str, Any]:
    """Identifier and per-field values, e.g. for diagnostics pages."""
    description: dict[str, Any] = {"id": encode(identity)}
    for name, _ in FIELD_LAYOUT:
        description[name] = getattr(identity, name)
    return pmap(description)
