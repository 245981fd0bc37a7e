"""The player character."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Optional

from .collision import ObjectType, nearest_point
from .config import WIN_MAX_X
from .input import Button, InputManager, Key
from .objects import OBJECT_SIZE, GameObject, MobilityType, Renderer
from .resources import ResourceManager
from .stage import PanelID, StageData
from .vector import Vector2D

PLAYER_SPEED = 50.0
MOVE_IMAGES = "Resource/Images/pacman.png"
DYING_IMAGES = "Resource/Images/dying.png"

_ANIMATION_NUM = (0, 1, 2, 1)
_DYING_FRAME_TIME = 0.07
_MOVE_FRAME_TIME = 1.0 / 16.0
_IDLE_FRAME = 9


class PlayerState(Enum):
    IDLE = 0
    MOVE = 1
    DIE = 2


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    NONE = 4


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_INPUTS = (
    (Key.UP, Button.DPAD_UP, Direction.UP),
    (Key.DOWN, Button.DPAD_DOWN, Direction.DOWN),
    (Key.LEFT, Button.DPAD_LEFT, Direction.LEFT),
    (Key.RIGHT, Button.DPAD_RIGHT, Direction.RIGHT),
)


def _push(velocity: Vector2D, direction: Direction) -> None:
    """Set the velocity component that ``direction`` moves along."""
    if direction is Direction.UP:
        velocity.y = -1.0
    elif direction is Direction.DOWN:
        velocity.y = 1.0
    elif direction is Direction.LEFT:
        velocity.x = -1.0
    elif direction is Direction.RIGHT:
        velocity.x = 1.0


class Player(GameObject):
    """The character steered by the keyboard or controller."""

    def __init__(self) -> None:
        super().__init__()
        self.stage: Optional[StageData] = None
        self._move_animation: list[Any] = []
        self._dying_animation: list[Any] = []
        self._old_location = Vector2D()
        self._velocity = Vector2D()
        self._state = PlayerState.MOVE
        self._now_direction = Direction.LEFT
        self._next_direction = Direction.LEFT
        self._food_count = 0
        self._animation_time = 0.0
        self._animation_count = 0
        self._old_panel = PanelID.NONE
        self._is_power_up = False
        self._is_destroy = False

    def _stage_data(self) -> StageData:
        return self.stage if self.stage is not None else StageData.get_instance()

    def initialize(self) -> None:
        resources = ResourceManager.get_instance()
        self._move_animation = resources.get_images(MOVE_IMAGES, 12, 12, 1, 32, 32)
        self._dying_animation = resources.get_images(DYING_IMAGES, 11, 11, 1, 32, 32)

        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.PLAYER
        self.collision.hit_object_types.extend(
            (
                ObjectType.ENEMY,
                ObjectType.WALL,
                ObjectType.FOOD,
                ObjectType.POWER_FOOD,
                ObjectType.SPECIAL,
            )
        )
        self.collision.radius = (OBJECT_SIZE - 1.0) / 2.0
        self.z_layer = 5
        self.mobility = MobilityType.MOVABLE

    def update(self, delta_second: float) -> None:
        if self._state is PlayerState.IDLE:
            self.image = self._move_animation[_IDLE_FRAME]
        elif self._state is PlayerState.MOVE:
            self._movement(delta_second)
            self._animation_control(delta_second)
        elif self._state is PlayerState.DIE:
            self._animation_time += delta_second
            if self._animation_time >= _DYING_FRAME_TIME:
                self._animation_time = 0.0
                self._animation_count += 1
                if self._animation_count >= len(self._dying_animation):
                    self._state = PlayerState.IDLE
                    self._animation_count = 0
                    self._is_destroy = True
            self.image = self._dying_animation[self._animation_count]

    def draw(self, renderer: Renderer, screen_offset: Vector2D) -> None:
        super().draw(renderer, screen_offset)

    def finalize(self) -> None:
        self._move_animation.clear()
        self._dying_animation.clear()

    def on_hit_collision(self, hit_object: GameObject) -> None:
        hit_type = hit_object.collision.object_type
        if hit_type is ObjectType.WALL:
            wall = hit_object.collision.translated(hit_object.location)
            near = nearest_point(wall, self.location)
            away = self.location - near
            overlap = (self.collision.radius + wall.radius) - away.length()
            self.location += away.normalize() * overlap
        if hit_type is ObjectType.FOOD:
            self._food_count += 1
        if hit_type is ObjectType.POWER_FOOD:
            self._food_count += 1
            self._is_power_up = True
        if hit_type is ObjectType.ENEMY and not self._is_power_up:
            self._state = PlayerState.DIE

    @property
    def food_count(self) -> int:
        """Number of dots eaten so far."""
        return self._food_count

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def power_up(self) -> bool:
        """True after eating a power dot until powered down."""
        return self._is_power_up

    def set_power_down(self) -> None:
        self._is_power_up = False

    @property
    def destroyed(self) -> bool:
        """True once the dying animation has finished."""
        return self._is_destroy

    def _movement(self, delta_second: float) -> None:
        now = self._now_direction
        if Vector2D.distance(self._old_location, self.location) == 0.0:
            self._velocity = Vector2D()
            self._now_direction = self._next_direction
            self._next_direction = Direction.NONE
        elif now in (Direction.UP, Direction.DOWN):
            diff = self.location.y - self._old_location.y
            if not ((now is Direction.UP and diff < 0.0) or (now is Direction.DOWN and diff > 0.0)):
                self._velocity.y = 0.0
                self._now_direction = self._next_direction
                self._next_direction = Direction.NONE
        elif now in (Direction.LEFT, Direction.RIGHT):
            diff = self.location.x - self._old_location.x
            if not (
                (now is Direction.LEFT and diff < 0.0) or (now is Direction.RIGHT and diff > 0.0)
            ):
                self._velocity.x = 0.0
                self._now_direction = self._next_direction
                self._next_direction = Direction.NONE

        controls = InputManager.get_instance()
        panel = self._stage_data().panel_at(self.location)

        for key, button, wanted in _INPUTS:
            if controls.get_key_down(key) or controls.get_button_down(button):
                current = self._now_direction
                if current is wanted:
                    self._old_panel = PanelID.NONE
                if current in (wanted, _OPPOSITE[wanted], Direction.NONE):
                    self._now_direction = wanted
                else:
                    self._next_direction = wanted
                break

        if self._now_direction is Direction.NONE:
            self._velocity = Vector2D()
            self._now_direction = self._next_direction
            self._next_direction = Direction.NONE
        else:
            _push(self._velocity, self._now_direction)

        if panel is not PanelID.NONE and self._old_panel is not panel:
            _push(self._velocity, self._next_direction)

        self._old_location = self.location.copy()
        self._old_panel = panel
        self.location += self._velocity * PLAYER_SPEED * delta_second

        if self.location.x < 0.0:
            self._old_location.x = float(WIN_MAX_X)
            self.location.x = WIN_MAX_X - self.collision.radius
            self._velocity.y = 0.0
        if WIN_MAX_X < self.location.x:
            self._old_location.x = 0.0
            self.location.x = self.collision.radius
            self._velocity.y = 0.0

    def _animation_control(self, delta_second: float) -> None:
        self._animation_time += delta_second
        if self._animation_time >= _MOVE_FRAME_TIME:
            self._animation_time = 0.0
            self._animation_count = (self._animation_count + 1) % len(_ANIMATION_NUM)
            direction = int(self._now_direction)
            if 0 <= direction < 4:
                frame = direction * 3 + _ANIMATION_NUM[self._animation_count]
                self.image = self._move_animation[frame]