"""RGBA colours with components in ``[0, 1]``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from vgengine.basic import clamp, floori, lerp


@dataclass(frozen=True)
class Color:
    """Straight or premultiplied RGBA colour."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    @classmethod
    def make_premultiplied(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        return cls(r * a, g * a, b * a, a)

    def premultiply(self) -> Color:
        return Color(self.r * self.a, self.g * self.a, self.b * self.a, self.a)

    def unpremultiply(self) -> Color:
        """Divide out alpha; fully transparent gives transparent black."""
        if self.a == 0.0:
            return Color(0.0, 0.0, 0.0, 0.0)
        return Color(self.r / self.a, self.g / self.a, self.b / self.a, self.a)

    def lerp(self, other: Color, t: float) -> Color:
        return Color(
            lerp(self.r, other.r, t),
            lerp(self.g, other.g, t),
            lerp(self.b, other.b, t),
            lerp(self.a, other.a, t),
        )

    def blend(self, dest: Color) -> Color:
        """Straight-alpha "over": this colour on top of ``dest``."""
        keep = dest.a * (1.0 - self.a)
        alpha = self.a + keep
        if alpha == 0.0:
            return Color(0.0, 0.0, 0.0, 0.0)
        return Color(
            (self.r * self.a + dest.r * keep) / alpha,
            (self.g * self.a + dest.g * keep) / alpha,
            (self.b * self.a + dest.b * keep) / alpha,
            alpha,
        )

    def blend_premultiplied(self, dest: Color) -> Color:
        """Premultiplied "over": this colour on top of ``dest``."""
        keep = 1.0 - self.a
        return Color(
            self.r + dest.r * keep,
            self.g + dest.g * keep,
            self.b + dest.b * keep,
            self.a + dest.a * keep,
        )

    def clamped(self) -> Color:
        return Color(*(clamp(c, 0.0, 1.0) for c in self))

    def to_u32(self) -> int:
        """Pack as ``0xAARRGGBB`` after clamping, truncating each channel."""
        r, g, b, a = (floori(c * 255.0) for c in self.clamped())
        return (a << 24) | (r << 16) | (g << 8) | b

    @classmethod
    def from_u32(cls, value: int) -> Color:
        """Unpack a ``0xAARRGGBB`` value."""
        return cls(
            ((value >> 16) & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            (value & 0xFF) / 255.0,
            ((value >> 24) & 0xFF) / 255.0,
        )

    def tint(self, tint: Color) -> Color:
        """Multiply component-wise by ``tint`` and clamp."""
        return Color(
            self.r * tint.r, self.g * tint.g, self.b * tint.b, self.a * tint.a
        ).clamped()

    def tint_lerp(self, tint: Color, t: float) -> Color:
        return self.lerp(self.tint(tint), t)

    def brightness(self, factor: float) -> Color:
        """Scale the colour channels, leaving alpha alone."""
        return Color(self.r * factor, self.g * factor, self.b * factor, self.a)