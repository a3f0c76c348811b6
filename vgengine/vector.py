"""Two-, three- and four-component vectors.

The vectors are immutable. Integer components work as well as floats.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from vgengine.basic import float_compare, lerp

_Scalar = (int, float)


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, s: float) -> Vector2:
        if not isinstance(s, _Scalar):
            return NotImplemented
        return Vector2(s * self.x, s * self.y)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance(self, other: Vector2) -> float:
        return (self - other).length()

    def distance_squared(self, other: Vector2) -> float:
        return (self - other).length_squared()

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; a (near) zero vector gives zero."""
        n = self.length()
        if float_compare(n, 0.0):
            return Vector2(0.0, 0.0)
        return Vector2(self.x / n, self.y / n)

    def hadamard(self, other: Vector2) -> Vector2:
        """Component-wise product."""
        return Vector2(self.x * other.x, self.y * other.y)

    def cross(self, other: Vector2) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def lerp(self, other: Vector2, t: float) -> Vector2:
        return Vector2(lerp(self.x, other.x, t), lerp(self.y, other.y, t))

    def with_z(self, z: float) -> Vector3:
        return Vector3(self.x, self.y, z)


@dataclass(frozen=True)
class Vector3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, s: float) -> Vector3:
        if not isinstance(s, _Scalar):
            return NotImplemented
        return Vector3(s * self.x, s * self.y, s * self.z)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def distance(self, other: Vector3) -> float:
        return (self - other).length()

    def distance_squared(self, other: Vector3) -> float:
        return (self - other).length_squared()

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a (near) zero vector gives zero."""
        n = self.length()
        if float_compare(n, 0.0):
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / n, self.y / n, self.z / n)

    def hadamard(self, other: Vector3) -> Vector3:
        """Component-wise product."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def lerp(self, other: Vector3, t: float) -> Vector3:
        return Vector3(
            lerp(self.x, other.x, t),
            lerp(self.y, other.y, t),
            lerp(self.z, other.z, t),
        )

    def with_w(self, w: float) -> Vector4:
        return Vector4(self.x, self.y, self.z, w)

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass(frozen=True)
class Vector4:
    """A 4D (homogeneous) vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __mul__(self, s: float) -> Vector4:
        if not isinstance(s, _Scalar):
            return NotImplemented
        return Vector4(s * self.x, s * self.y, s * self.z, s * self.w)

    __rmul__ = __mul__

    def lerp(self, other: Vector4, t: float) -> Vector4:
        return Vector4(
            lerp(self.x, other.x, t),
            lerp(self.y, other.y, t),
            lerp(self.z, other.z, t),
            lerp(self.w, other.w, t),
        )

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)


def up() -> Vector3:
    return Vector3(0.0, 1.0, 0.0)


def down() -> Vector3:
    return Vector3(0.0, -1.0, 0.0)


def right() -> Vector3:
    return Vector3(1.0, 0.0, 0.0)


def left() -> Vector3:
    return Vector3(-1.0, 0.0, 0.0)


def forward() -> Vector3:
    """The viewing direction: negative Z."""
    return Vector3(0.0, 0.0, -1.0)


def backward() -> Vector3:
    return Vector3(0.0, 0.0, 1.0)