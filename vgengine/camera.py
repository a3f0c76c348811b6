"""The viewing camera."""

from __future__ import annotations

from dataclasses import dataclass, field

from vgengine.quaternion import Quaternion
from vgengine.vector import Vector3

DEFAULT_Z_NEAR = 5.0
DEFAULT_Z_FAR = 500.0
DEFAULT_FOV = 120.0


@dataclass
class Camera:
    """A perspective camera.

    The eye sits at the origin of camera space and looks down negative Z.
    The canvas lies on the near plane with its centre at (0, 0); the field
    of view is the same horizontally and vertically.
    """

    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion.identity)
    z_near: float = DEFAULT_Z_NEAR
    z_far: float = DEFAULT_Z_FAR
    fov: float = DEFAULT_FOV

    @classmethod
    def default(cls) -> Camera:
        """The camera the engine starts with."""
        return cls(
            Vector3(0.0, 0.0, 0.0),
            Quaternion.identity(),
            DEFAULT_Z_NEAR,
            DEFAULT_Z_FAR,
            DEFAULT_FOV,
        )