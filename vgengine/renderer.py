"""Software triangle rasterizer: clipping, projection to raster space and filling."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from vgengine.basic import decimal, clamp, floori
from vgengine.color import Color
from vgengine.framebuffer import BYTPP, Framebuffer
from vgengine.matrix import Matrix4
from vgengine.rect import Rect
from vgengine.vector import Vector3, Vector4

BACKGROUND_COLOR = (255 << 24) | (125 << 16) | (0 << 8) | 125


@dataclass(frozen=True)
class Triangle:
    """A triangle in raster space."""

    a: Vector3
    b: Vector3
    c: Vector3

    def __iter__(self) -> Iterator[Vector3]:
        yield self.a
        yield self.b
        yield self.c


@dataclass(frozen=True)
class Triangle4:
    """A triangle in homogeneous (clip) coordinates."""

    a: Vector4
    b: Vector4
    c: Vector4

    def __iter__(self) -> Iterator[Vector4]:
        yield self.a
        yield self.b
        yield self.c

    def to_triangle(self) -> Triangle:
        """Drop the w component of every vertex."""
        return Triangle(self.a.xyz(), self.b.xyz(), self.c.xyz())


@dataclass(frozen=True)
class Mesh:
    """Indexed triangle list."""

    vertices: tuple[Vector3, ...]
    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "indices", tuple(self.indices))
        if len(self.indices) % 3:
            raise ValueError("mesh index count must be a multiple of three")
        for index in self.indices:
            if not 0 <= index < len(self.vertices):
                raise IndexError(f"mesh index {index} out of range")


def inside_right(v: Vector4) -> bool:
    return v.x <= v.w


def inside_left(v: Vector4) -> bool:
    return v.x >= -v.w


def inside_top(v: Vector4) -> bool:
    return v.y <= v.w


def inside_bot(v: Vector4) -> bool:
    return v.y >= -v.w


def inside_near(v: Vector4) -> bool:
    return v.z >= -v.w


def inside_far(v: Vector4) -> bool:
    return v.z <= v.w


def intersect_right(a: Vector4, b: Vector4) -> Vector4:
    t = (a.w - a.x) / ((a.w - a.x) - (b.w - b.x))
    return a.lerp(b, t)


def intersect_left(a: Vector4, b: Vector4) -> Vector4:
    t = (a.w + a.x) / ((a.w + a.x) - (b.w + b.x))
    return a.lerp(b, t)


def intersect_top(a: Vector4, b: Vector4) -> Vector4:
    t = (a.w - a.y) / ((a.w - a.y) - (b.w - b.y))
    return a.lerp(b, t)


def intersect_bot(a: Vector4, b: Vector4) -> Vector4:
    t = (a.w + a.y) / ((a.w + a.y) - (b.w + b.y))
    return a.lerp(b, t)


def intersect_near(a: Vector4, b: Vector4) -> Vector4:
    t = (a.w + a.z) / ((a.w + a.z) - (b.w + b.z))
    return a.lerp(b, t)


def intersect_far(a: Vector4, b: Vector4) -> Vector4:
    t = (a.w - a.z) / ((a.w - a.z) - (b.w - b.z))
    return a.lerp(b, t)


_PLANES: tuple[
    tuple[Callable[[Vector4], bool], Callable[[Vector4, Vector4], Vector4]], ...
] = (
    (inside_right, intersect_right),
    (inside_left, intersect_left),
    (inside_top, intersect_top),
    (inside_bot, intersect_bot),
    (inside_near, intersect_near),
    (inside_far, intersect_far),
)


def edge_function(c: Vector3, b: Vector3, a: Vector3) -> float:
    """Signed doubled area of the triangle ``a, b, c`` (2D part only)."""
    return (c.x - a.x) * (b.y - a.y) - (c.y - a.y) * (b.x - a.x)


def triangle_bounding_box(a: Vector3, b: Vector3, c: Vector3) -> Rect:
    return Rect(
        min(a.x, b.x, c.x),
        min(a.y, b.y, c.y),
        max(a.x, b.x, c.x),
        max(a.y, b.y, c.y),
    )


def fill_background(framebuffer: Framebuffer) -> None:
    """Paint every pixel with :data:`BACKGROUND_COLOR`."""
    for y in range(framebuffer.height):
        for x in range(framebuffer.width):
            framebuffer.set_pixel(x, y, BACKGROUND_COLOR)


def triangulate_fan(vertices: Sequence[Vector4]) -> list[Triangle4]:
    """Split a convex polygon into triangles sharing its first vertex."""
    return [
        Triangle4(vertices[0], b, c) for b, c in zip(vertices[1:-1], vertices[2:])
    ]


def _clip_polygon(
    polygon: list[Vector4],
    inside: Callable[[Vector4], bool],
    intersect: Callable[[Vector4, Vector4], Vector4],
) -> list[Vector4]:
    result: list[Vector4] = []
    prev = polygon[-1]
    for curr in polygon:
        curr_inside = inside(curr)
        prev_inside = inside(prev)
        if curr_inside:
            if not prev_inside:
                result.append(intersect(prev, curr))
            result.append(curr)
        elif prev_inside:
            result.append(intersect(prev, curr))
        prev = curr
    return result


def clip_triangle(triangle: Triangle4) -> list[Triangle4]:
    """Clip against the six planes of the view volume (Sutherland-Hodgman)."""
    polygon = list(triangle)
    for inside, intersect in _PLANES:
        polygon = _clip_polygon(polygon, inside, intersect)
        if not polygon:
            return []
    return triangulate_fan(polygon)


def clip_to_raster_space(triangle: Triangle4, width: int, height: int) -> Triangle4:
    """Perspective divide, then map x and y from ``[-1, 1]`` to pixels."""

    def convert(v: Vector4) -> Vector4:
        v = v * (1 / v.w)
        return Vector4((v.x + 1) / 2 * width, (v.y + 1) / 2 * height, v.z, v.w)

    return Triangle4(*(convert(v) for v in triangle))


def rasterize_triangle(
    framebuffer: Framebuffer, triangle: Triangle, color: Color, inv: bool = False
) -> None:
    """Fill ``triangle`` with depth testing.

    With ``inv`` set, pixels are coloured by their barycentric coordinates
    instead of ``color``. Degenerate triangles and pixels outside the
    framebuffer are skipped.
    """
    p0, p1, p2 = triangle
    bbox = triangle_bounding_box(p0, p1, p2)
    area = edge_function(p2, p1, p0)
    if area == 0:
        return
    solid = color.to_u32()

    for j in range(floori(bbox.min_y), floori(bbox.max_y) + 1):
        if not 0 <= j < framebuffer.height:
            continue
        for i in range(floori(bbox.min_x), floori(bbox.max_x) + 1):
            if not 0 <= i < framebuffer.width:
                continue
            p = Vector3(i + 0.5, j + 0.5, 0.0)
            w0 = edge_function(p, p2, p1)
            w1 = edge_function(p, p0, p2)
            w2 = edge_function(p, p1, p0)
            if not (
                (w0 >= 0 and w1 >= 0 and w2 >= 0) or (w0 <= 0 and w1 <= 0 and w2 <= 0)
            ):
                continue
            w0 /= area
            w1 /= area
            w2 /= area
            try:
                z = 1 / (w0 / p0.z + w1 / p1.z + w2 / p2.z)
            except ZeroDivisionError:
                continue
            if z < framebuffer.get_depth(i, j):
                if inv:
                    r = int(w0 * 255) & 0xFF
                    g = int(w1 * 255) & 0xFF
                    b = int(w2 * 255) & 0xFF
                    value = (255 << 24) | (r << 16) | (g << 8) | b
                else:
                    value = solid
                framebuffer.set_pixel(i, j, value)
                framebuffer.set_depth(i, j, z)


def render_mesh(
    framebuffer: Framebuffer, mesh: Mesh, mvp: Matrix4, colors: Sequence[Color]
) -> None:
    """Transform, clip and rasterize every triangle, one colour per triangle."""
    clip_space = [mvp.mul_vector4(v.with_w(1.0)) for v in mesh.vertices]
    indices = mesh.indices
    for c, start in enumerate(range(0, len(indices), 3)):
        unclipped = Triangle4(
            clip_space[indices[start]],
            clip_space[indices[start + 1]],
            clip_space[indices[start + 2]],
        )
        for clipped in clip_triangle(unclipped):
            raster = clip_to_raster_space(
                clipped, framebuffer.width, framebuffer.height
            )
            rasterize_triangle(framebuffer, raster.to_triangle(), colors[c], False)


def _texel(texture: bytes, offset: int) -> Color:
    (value,) = struct.unpack_from("<I", texture, offset)
    return Color.from_u32(value)


def bilinear_sample_premultiplied(
    texture: bytes,
    base: int,
    tex_w: int,
    tex_h: int,
    stride: int,
    u: float,
    v: float,
) -> Color:
    """Bilinearly filtered texel at ``(u, v)`` in unnormalized texel units.

    The texture holds little-endian ``0xAARRGGBB`` texels starting at byte
    ``base``; ``stride`` is the byte distance between rows, so a sub-rectangle
    of a larger texture can be sampled.
    """
    u0 = clamp(floori(u), 0, tex_w - 1)
    v0 = clamp(floori(v), 0, tex_h - 1)
    u1 = clamp(u0 + 1, 0, tex_w - 1)
    v1 = clamp(v0 + 1, 0, tex_h - 1)

    tu = decimal(u)
    tv = decimal(v)

    c00 = _texel(texture, base + v0 * stride + u0 * BYTPP)
    c10 = _texel(texture, base + v0 * stride + u1 * BYTPP)
    c01 = _texel(texture, base + v1 * stride + u0 * BYTPP)
    c11 = _texel(texture, base + v1 * stride + u1 * BYTPP)

    top = c00.lerp(c10, tu)
    bottom = c01.lerp(c11, tu)
    return top.lerp(bottom, tv)