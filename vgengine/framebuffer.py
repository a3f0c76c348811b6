"""Colour and depth buffers with y pointing up."""

from __future__ import annotations

import sys
from array import array

MAX_FRAMEBUFFER_SIZE = 1920 * 1080
Z_BUFFER_RESET_VALUE = 500.0
BYTPP = 4

_MAX_U32 = 0xFFFFFFFF


class Framebuffer:
    """A ``0xAARRGGBB`` colour buffer and a depth buffer of the same size.

    Pixel ``(0, 0)`` is the bottom-left corner; rows are stored top-down.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("framebuffer dimensions must be positive")
        if width * height > MAX_FRAMEBUFFER_SIZE:
            raise ValueError(
                f"{width}x{height} exceeds {MAX_FRAMEBUFFER_SIZE} pixels"
            )
        self.width = width
        self.height = height
        self._pixels = array("I", [0]) * (width * height)
        self._depth = [Z_BUFFER_RESET_VALUE] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height}")
        return (self.height - 1 - y) * self.width + x

    def pitch(self) -> int:
        """Bytes per row."""
        return self.width * BYTPP

    def bytesize(self) -> int:
        """Bytes in the whole colour buffer."""
        return self.width * self.height * BYTPP

    def get_pixel(self, x: int, y: int) -> int:
        return self._pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, value: int) -> None:
        if not 0 <= value <= _MAX_U32:
            raise ValueError(f"pixel value {value:#x} is not a 32-bit colour")
        self._pixels[self._index(x, y)] = value

    def get_depth(self, x: int, y: int) -> float:
        return self._depth[self._index(x, y)]

    def set_depth(self, x: int, y: int, z: float) -> None:
        self._depth[self._index(x, y)] = z

    def reset_depth(self) -> None:
        """Set every depth value back to :data:`Z_BUFFER_RESET_VALUE`."""
        self._depth = [Z_BUFFER_RESET_VALUE] * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Colour buffer as little-endian pixels, top row first."""
        pixels = array("I", self._pixels)
        if sys.byteorder == "big":
            pixels.byteswap()
        return pixels.tobytes()