"""Row-major 4x4 matrices for row vectors (``v @ M``)."""

from __future__ import annotations

import functools
import math
import operator
from dataclasses import dataclass
from typing import Iterator

from vgengine.basic import RAD
from vgengine.camera import Camera
from vgengine.quaternion import Quaternion
from vgengine.transform import Transform
from vgengine.vector import Vector3, Vector4

DEFAULT_ASPECT_RATIO = 1280 / 720

_Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Matrix4:
    """Immutable row-major 4x4 matrix; ``e[i][j]`` is row ``i``, column ``j``."""

    e: tuple[_Row, _Row, _Row, _Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(c) for c in row) for row in self.e)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a 4x4 matrix needs four rows of four values")
        object.__setattr__(self, "e", rows)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def from_rows(cls, x: Vector4, y: Vector4, z: Vector4, w: Vector4) -> Matrix4:
        return cls((tuple(x), tuple(y), tuple(z), tuple(w)))

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix4:
        s, c = math.sin(angle), math.cos(angle)
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, c, s, 0.0),
                (0.0, -s, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix4:
        s, c = math.sin(angle), math.cos(angle)
        return cls(
            (
                (c, 0.0, -s, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (s, 0.0, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix4:
        s, c = math.sin(angle), math.cos(angle)
        return cls(
            (
                (c, s, 0.0, 0.0),
                (-s, c, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def scaling(cls, v: Vector3) -> Matrix4:
        return cls.identity().scaled(v)

    @classmethod
    def translation(cls, v: Vector3) -> Matrix4:
        return cls.identity().translated(v)

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> Matrix4:
        """Rotation matrix of a normalized quaternion."""
        xx, yy, zz = q.x * q.x, q.y * q.y, q.z * q.z
        xy, xz, yz = q.x * q.y, q.x * q.z, q.y * q.z
        wx, wy, wz = q.w * q.x, q.w * q.y, q.w * q.z
        return cls(
            (
                (1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0),
                (2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx), 0.0),
                (2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    def __getitem__(self, index: int | tuple[int, int]) -> Vector4 | float:
        """A row as a :class:`Vector4`, or one element for ``(row, column)``."""
        if isinstance(index, tuple):
            i, j = index
            return self.e[i][j]
        return Vector4(*self.e[index])

    def __iter__(self) -> Iterator[Vector4]:
        return (Vector4(*row) for row in self.e)

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other.e))
        return Matrix4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.e
            )
        )

    def mul_vector3(self, v: Vector3) -> Vector3:
        """Transform a point (implicit w of 1)."""
        e = self.e
        return Vector3(
            v.x * e[0][0] + v.y * e[1][0] + v.z * e[2][0] + e[3][0],
            v.x * e[0][1] + v.y * e[1][1] + v.z * e[2][1] + e[3][1],
            v.x * e[0][2] + v.y * e[1][2] + v.z * e[2][2] + e[3][2],
        )

    def mul_vector4(self, v: Vector4) -> Vector4:
        """Transform a homogeneous point; its w is taken to be 1."""
        e = self.e
        return Vector4(
            v.x * e[0][0] + v.y * e[1][0] + v.z * e[2][0] + e[3][0],
            v.x * e[0][1] + v.y * e[1][1] + v.z * e[2][1] + e[3][1],
            v.x * e[0][2] + v.y * e[1][2] + v.z * e[2][2] + e[3][2],
            v.x * e[0][3] + v.y * e[1][3] + v.z * e[2][3] + e[3][3],
        )

    def transposed(self) -> Matrix4:
        return Matrix4(tuple(zip(*self.e)))

    def scaled(self, v: Vector3) -> Matrix4:
        """Multiply the diagonal's first three entries by ``v``."""
        rows = [list(row) for row in self.e]
        rows[0][0] *= v.x
        rows[1][1] *= v.y
        rows[2][2] *= v.z
        return Matrix4(tuple(tuple(row) for row in rows))

    def translated(self, v: Vector3) -> Matrix4:
        """Add ``v`` to the translation row."""
        rows = [list(row) for row in self.e]
        rows[3][0] += v.x
        rows[3][1] += v.y
        rows[3][2] += v.z
        return Matrix4(tuple(tuple(row) for row in rows))


def compose(*args: Matrix4) -> Matrix4:
    """Product of two or more matrices, multiplied left to right."""
    if len(args) < 2:
        raise ValueError("compose needs at least two matrices")
    return functools.reduce(operator.matmul, args)


def model_matrix(transform: Transform) -> Matrix4:
    """Scale, then rotate, then translate."""
    return compose(
        Matrix4.scaling(transform.scale),
        Matrix4.from_quaternion(transform.orientation),
        Matrix4.translation(transform.position),
    )


def view_matrix(camera: Camera) -> Matrix4:
    """World to camera space."""
    rotation = Matrix4.from_quaternion(camera.orientation.conjugate())
    return Matrix4.translation(-camera.position) @ rotation


def perspective_matrix(
    camera: Camera, aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> Matrix4:
    """Camera to clip space, mapping the near plane to z/w = -1 and the far plane to 1."""
    n, f = camera.z_near, camera.z_far
    t = math.tan(camera.fov / 2 * RAD) * n
    r = t * aspect_ratio
    return Matrix4(
        (
            (n / r, 0.0, 0.0, 0.0),
            (0.0, n / t, 0.0, 0.0),
            (0.0, 0.0, -(f + n) / (f - n), -1.0),
            (0.0, 0.0, -(2 * f * n) / (f - n), 0.0),
        )
    )


def mvp_matrix(transform: Transform, view: Matrix4, proj: Matrix4) -> Matrix4:
    """Model, view and projection combined."""
    return compose(model_matrix(transform), view, proj)