import pytest

from face_avatar.renderer.compositor import face_tint
from face_avatar.utils.color import hsi_to_rgb


@pytest.mark.parametrize(
    "hue, expected",
    [
        (0.0, (255, 0, 0)),
        (0.5, (0, 255, 255)),
        (1.0, (255, 0, 0)),
    ],
)
def test_hsi_to_rgb_full_saturation(hue: float, expected: tuple[int, int, int]) -> None:
    assert hsi_to_rgb(hue, 1.0, 1.0) == expected


def test_hsi_to_rgb_unsaturated_is_gray() -> None:
    assert hsi_to_rgb(0.3, 0.0, 1.0) == (255, 255, 255)
    assert hsi_to_rgb(0.3, 0.0, 0.0) == (0, 0, 0)


def test_face_tint_spans_full_channel_range() -> None:
    for color in range(256):
        tint = face_tint(color)
        assert max(tint) == 255
        assert min(tint) == 0


def test_face_tint_matches_hue_fraction() -> None:
    assert face_tint(0) == (255, 0, 0)
    assert face_tint(128) == (0, 255, 255)
    assert face_tint(256) == face_tint(0)
