"""Axis-aligned rectangles with y pointing up."""

from __future__ import annotations

from dataclasses import dataclass

from vgengine.vector import Vector2


@dataclass(frozen=True)
class Rect:
    """Rectangle given by its bottom-left and top-right corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y

    def bot_left(self) -> Vector2:
        return Vector2(self.min_x, self.min_y)

    def top_right(self) -> Vector2:
        return Vector2(self.max_x, self.max_y)

    @classmethod
    def from_bot_left(cls, corner: Vector2, width: float, height: float) -> Rect:
        return cls(corner.x, corner.y, corner.x + width, corner.y + height)

    @classmethod
    def from_bot_right(cls, corner: Vector2, width: float, height: float) -> Rect:
        return cls(corner.x - width, corner.y, corner.x, corner.y + height)

    @classmethod
    def from_top_left(cls, corner: Vector2, width: float, height: float) -> Rect:
        return cls(corner.x, corner.y - height, corner.x + width, corner.y)

    @classmethod
    def from_top_right(cls, corner: Vector2, width: float, height: float) -> Rect:
        return cls(corner.x - width, corner.y - height, corner.x, corner.y)