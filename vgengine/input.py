"""Keyboard and mouse state for one frame."""

from __future__ import annotations

from enum import IntEnum

from vgengine.bit_array import BitArray
from vgengine.flags import get_flags

NUM_KEYS = 50
NUM_MKEYS = 6


class KeyCode(IntEnum):
    NONE = 0
    LEFT = 1
    UP = 2
    RIGHT = 3
    DOWN = 4
    W = 5
    S = 6
    A = 7
    D = 8
    Q = 9
    E = 10
    I = 11  # noqa: E741
    K = 12
    J = 13
    L = 14
    U = 15
    O = 16  # noqa: E741


class MouseKey(IntEnum):
    """Mouse buttons; each value is used directly as a mask on the button flags."""

    NONE = 0
    M1 = 1
    M2 = 2
    M3 = 3


class InputState:
    """Held, pressed and released keys and mouse buttons, plus the cursor."""

    def __init__(self) -> None:
        self.keys = BitArray(NUM_KEYS)
        self.keys_pressed = BitArray(NUM_KEYS)
        self.keys_released = BitArray(NUM_KEYS)
        self.mkeys = 0
        self.mkeys_pressed = 0
        self.mkeys_released = 0
        self.moved_mouse = False
        self.cursor_x = 0.0
        self.cursor_y = 0.0

    def key_down(self, key: KeyCode) -> bool:
        return self.keys[key]

    def key_changed(self, key: KeyCode) -> bool:
        return self.keys_pressed[key] or self.keys_released[key]

    def key_pressed(self, key: KeyCode) -> bool:
        return self.keys_pressed[key]

    def key_released(self, key: KeyCode) -> bool:
        return self.keys_released[key]

    def mkey_down(self, mkey: MouseKey) -> bool:
        return get_flags(self.mkeys, mkey) != 0

    def mkey_changed(self, mkey: MouseKey) -> bool:
        return (
            get_flags(self.mkeys_pressed, mkey) | get_flags(self.mkeys_released, mkey)
        ) != 0

    def mkey_pressed(self, mkey: MouseKey) -> bool:
        return get_flags(self.mkeys_pressed, mkey) != 0

    def mkey_released(self, mkey: MouseKey) -> bool:
        return get_flags(self.mkeys_released, mkey) != 0