"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from vgengine.basic import float_compare
from vgengine.vector import Vector3


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``x*i + y*j + z*k + w``; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_euler(cls, x: float, y: float, z: float) -> Quaternion:
        """Rotation from Euler angles in radians."""
        cx, sx = math.cos(x * 0.5), math.sin(x * 0.5)
        cy, sy = math.cos(y * 0.5), math.sin(y * 0.5)
        cz, sz = math.cos(z * 0.5), math.sin(z * 0.5)
        return cls(
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
            cx * cy * cz + sx * sy * sz,
        )

    @classmethod
    def from_axis(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about a normalized ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate ``v`` by this (normalized) quaternion."""
        qv = Vector3(self.x, self.y, self.z)
        temp = qv.cross(v) * 2.0
        return v + temp * self.w + qv.cross(temp)

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalized(self) -> Quaternion:
        """Unit quaternion; a (near) zero quaternion gives the identity."""
        n = self.length()
        if float_compare(n, 0.0):
            return Quaternion.identity()
        inv = 1.0 / n
        return Quaternion(self.x * inv, self.y * inv, self.z * inv, self.w * inv)

    def conjugate(self) -> Quaternion:
        """The inverse rotation of a normalized quaternion."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse_angle(self) -> Quaternion:
        """The same quaternion with the scalar part negated."""
        return Quaternion(self.x, self.y, self.z, -self.w)


def chain(q1: Quaternion, q2: Quaternion) -> Quaternion:
    """Rotation that applies ``q1`` first and ``q2`` after it."""
    return Quaternion(
        q2.w * q1.x + q2.x * q1.w + q2.y * q1.z - q2.z * q1.y,
        q2.w * q1.y - q2.x * q1.z + q2.y * q1.w + q2.z * q1.x,
        q2.w * q1.z + q2.x * q1.y - q2.y * q1.x + q2.z * q1.w,
        q2.w * q1.w - q2.x * q1.x - q2.y * q1.y - q2.z * q1.z,
    )