"""Keyboard and controller state with edge detection."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Iterable, Optional

from .vector import Vector2D

KEYCODE_MAX = 256
BUTTON_MAX = 16

_UCHAR_MAX = 255
_SHRT_MAX = 32767
_SHRT_MIN = -32768


class Key(IntEnum):
    """Keyboard scan codes."""

    ESCAPE = 0x01
    P = 0x19
    SPACE = 0x39
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class Button(IntEnum):
    """Controller button indices."""

    DPAD_UP = 0
    DPAD_DOWN = 1
    DPAD_LEFT = 2
    DPAD_RIGHT = 3
    START = 4
    BACK = 5
    LEFT_THUMB = 6
    RIGHT_THUMB = 7
    LEFT_SHOULDER = 8
    RIGHT_SHOULDER = 9
    A = 12
    B = 13
    X = 14
    Y = 15


def normalize_trigger(value: int) -> float:
    """Map a raw trigger value (0..255) to 0.0..1.0."""
    return value / _UCHAR_MAX


def normalize_stick(value: int) -> float:
    """Map a raw stick axis value (-32768..32767) to -1.0..1.0."""
    if value >= 0:
        return value / _SHRT_MAX
    return -(value / _SHRT_MIN)


class InputManager:
    """Holds this frame's and last frame's input; shared through ``get_instance``."""

    _instance: ClassVar[Optional["InputManager"]] = None

    def __init__(self) -> None:
        self._now_keys: frozenset[int] = frozenset()
        self._old_keys: frozenset[int] = frozenset()
        self._now_buttons: frozenset[int] = frozenset()
        self._old_buttons: frozenset[int] = frozenset()
        self._triggers = (0.0, 0.0)
        self._sticks = (Vector2D(), Vector2D())

    @classmethod
    def get_instance(cls) -> "InputManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        cls._instance = None

    def update(
        self,
        keys: Iterable[int] = (),
        buttons: Iterable[int] = (),
        left_trigger: int = 0,
        right_trigger: int = 0,
        left_stick: tuple[int, int] = (0, 0),
        right_stick: tuple[int, int] = (0, 0),
    ) -> None:
        """Advance one frame with the currently pressed keys, buttons and raw axes."""
        self._old_keys = self._now_keys
        self._now_keys = frozenset(k for k in keys if 0 <= k < KEYCODE_MAX)
        self._old_buttons = self._now_buttons
        self._now_buttons = frozenset(b for b in buttons if 0 <= b < BUTTON_MAX)
        self._triggers = (normalize_trigger(left_trigger), normalize_trigger(right_trigger))
        self._sticks = (
            Vector2D(normalize_stick(left_stick[0]), normalize_stick(left_stick[1])),
            Vector2D(normalize_stick(right_stick[0]), normalize_stick(right_stick[1])),
        )

    @staticmethod
    def _key_in_range(key_code: int) -> bool:
        return 0 <= key_code < KEYCODE_MAX

    @staticmethod
    def _button_in_range(button: int) -> bool:
        return 0 <= button < BUTTON_MAX

    def get_key(self, key_code: int) -> bool:
        """True while a key stays held across two frames."""
        return (
            self._key_in_range(key_code)
            and key_code in self._now_keys
            and key_code in self._old_keys
        )

    def get_key_down(self, key_code: int) -> bool:
        return (
            self._key_in_range(key_code)
            and key_code in self._now_keys
            and key_code not in self._old_keys
        )

    def get_key_up(self, key_code: int) -> bool:
        return (
            self._key_in_range(key_code)
            and key_code not in self._now_keys
            and key_code in self._old_keys
        )

    def get_button(self, button: int) -> bool:
        return (
            self._button_in_range(button)
            and button in self._now_buttons
            and button in self._old_buttons
        )

    def get_button_down(self, button: int) -> bool:
        return (
            self._button_in_range(button)
            and button in self._now_buttons
            and button not in self._old_buttons
        )

    def get_button_up(self, button: int) -> bool:
        return (
            self._button_in_range(button)
            and button not in self._now_buttons
            and button in self._old_buttons
        )

    @property
    def left_trigger(self) -> float:
        return self._triggers[0]

    @property
    def right_trigger(self) -> float:
        return self._triggers[1]

    @property
    def left_stick(self) -> Vector2D:
        return self._sticks[0].copy()

    @property
    def right_stick(self) -> Vector2D:
        return self._sticks[1].copy()