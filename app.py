import logging
from dataclasses import dataclass
from typing import Optional

import streamlit as st
from pyrsistent import thaw

from face_avatar.config import DEFAULT_ASSET_ROOT, DEFAULT_SIZE, AvatarConfig
from face_avatar.identity import (
    AvatarIdentity,
    decode,
    describe,
    from_random,
    from_text,
    from_values,
)
from face_avatar.renderer.assembler import AvatarRenderer, encode_png

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s")

st.set_page_config(layout="wide", page_title="Face Avatars")


@dataclass(frozen=True)
class PreviewConfig:
    asset_root: str
    size: int


@st.cache_resource
def get_renderer(config: PreviewConfig) -> AvatarRenderer:
    return AvatarRenderer.from_directory(
        config.asset_root, AvatarConfig(size=config.size)
    )


def optional_field(label: str, maximum: int, key: str) -> Optional[int]:
    value = st.number_input(
        label, min_value=0, max_value=maximum, value=None, step=1, key=key
    )
    return None if value is None else int(value)


def get_identity_from_widgets() -> Optional[AvatarIdentity]:
    mode: str = st.radio("Source", ["Text", "Identifier", "Fields", "Random"], key="mode")

    if mode == "Text":
        text: str = st.text_input("Text", value="Test", key="text")
        return decode(from_text(text))
    if mode == "Identifier":
        identifier: int = st.number_input(
            "Identifier", min_value=0, max_value=0xFFFFFFFF, value=0, key="identifier"
        )
        return decode(int(identifier))
    if mode == "Fields":
        st.caption("Unset fields are randomized.")
        return from_values(
            color=optional_field("Color", 255, "color"),
            nose=optional_field("Nose", 31, "nose"),
            eyes=optional_field("Eyes", 31, "eyes"),
            mouth=optional_field("Mouth", 31, "mouth"),
            face=optional_field("Face", 31, "face"),
            rotate=optional_field("Rotate", 15, "rotate"),
        )
    if st.button("New avatar", key="random_btn") or "random_id" not in st.session_state:
        st.session_state["random_id"] = from_random()
    return decode(st.session_state["random_id"])


with st.sidebar:
    st.subheader("Assets")
    asset_root: str = st.text_input("Asset directory", value=DEFAULT_ASSET_ROOT)
    size: int = st.slider("Size", 64, 1200, DEFAULT_SIZE, step=8)
    st.subheader("Avatar")
    identity = get_identity_from_widgets()

renderer = get_renderer(PreviewConfig(asset_root=asset_root, size=size))

image_col, info_col = st.columns([0.6, 0.4])

with image_col:
    if identity is not None:
        buffer = renderer.render(identity)
        st.image(buffer.to_image())
        st.download_button(
            "Download PNG",
            data=encode_png(buffer),
            file_name=f"avatar-{identity.identifier}.png",
            mime="image/png",
        )

with info_col:
    st.info(f"**Combinations:** {renderer.available_combinations:,}")
    if identity is not None:
        st.json(thaw(describe(identity)), expanded=True)
