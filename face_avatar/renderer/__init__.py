"""Rendering subpackage.

Turns an :class:`~face_avatar.identity.AvatarIdentity` plus the preloaded
asset pools into a finished pixel buffer. The renderer focuses on:

* Binary alpha-masked layer drawing with nearest-neighbor scaling and
  horizontal mirroring (:mod:`face_avatar.renderer.compositor`).
* Hue tinting of the face layer on a private copy of the pooled asset.
* A small deterministic tilt of the finished canvas
  (:mod:`face_avatar.renderer.transform`).

See :mod:`face_avatar.renderer.assembler` for the render pipeline and the
PNG encoder hand-off.
"""
