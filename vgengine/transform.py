"""Position, orientation and scale of an object."""

from __future__ import annotations

from dataclasses import dataclass, field

from vgengine.quaternion import Quaternion
from vgengine.vector import Vector3


@dataclass
class Transform:
    """Placement of an object in the world; defaults to the identity."""

    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion.identity)
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))

    @classmethod
    def identity(cls) -> Transform:
        return cls(Vector3(0.0, 0.0, 0.0), Quaternion.identity(), Vector3(1.0, 1.0, 1.0))