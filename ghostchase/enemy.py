"""Enemy characters and the route choosing they share."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Callable, Optional

from .collision import ObjectType
from .config import WIN_MAX_X, GameError
from .objects import OBJECT_SIZE, GameObject, MobilityType, Renderer
from .resources import ResourceManager
from .stage import AdjacentDirection, PanelID, StageData
from .vector import Vector2D

MONSTER_IMAGES = "Resource/Images/monster.png"
EYE_IMAGES = "Resource/Images/eyes.png"
ENEMY_SPEED = 49.5

_ANIMATION_NUM = (0, 1)
_MOVE_FRAME_TIME = 1.0 / 16.0
_FEAR_FRAME = 17
_GATE_PANEL = (13, 11)
_NEST_PANEL = (13, 15)


class EnemyState(Enum):
    IDLE = 0
    DIE = 1
    TERRITORY = 2
    CHASE = 3
    FEAR = 4


class EnemyType(IntEnum):
    AKABE = 0
    PINKY = 1
    AOSUKE = 2
    GUZUTA = 3


class EnemyDirection(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    NONE = 4


_OPPOSITE = {
    EnemyDirection.UP: EnemyDirection.DOWN,
    EnemyDirection.DOWN: EnemyDirection.UP,
    EnemyDirection.LEFT: EnemyDirection.RIGHT,
    EnemyDirection.RIGHT: EnemyDirection.LEFT,
}

_VELOCITY = {
    EnemyDirection.UP: (0.0, -1.0),
    EnemyDirection.DOWN: (0.0, 1.0),
    EnemyDirection.LEFT: (-1.0, 0.0),
    EnemyDirection.RIGHT: (1.0, 0.0),
}

# Scores are kept in the order up, right, down, left.
_STEPS = (
    (EnemyDirection.UP, AdjacentDirection.UP, 0, -1),
    (EnemyDirection.RIGHT, AdjacentDirection.RIGHT, 1, 0),
    (EnemyDirection.DOWN, AdjacentDirection.DOWN, 0, 1),
    (EnemyDirection.LEFT, AdjacentDirection.LEFT, -1, 0),
)

_RELEASE_FOOD = {
    EnemyType.PINKY: 30,
    EnemyType.AOSUKE: 60,
    EnemyType.GUZUTA: 90,
}

_TYPE_SETUP = {
    1: (EnemyType.PINKY, (Vector2D(6, 1), Vector2D(1, 5))),
    2: (EnemyType.AOSUKE, (Vector2D(26, 29), Vector2D(18, 26))),
    3: (EnemyType.GUZUTA, (Vector2D(1, 29), Vector2D(9, 26))),
}


def _is_open(panel: PanelID) -> bool:
    return panel is PanelID.NONE


def _not_wall(panel: PanelID) -> bool:
    return panel is not PanelID.WALL


def _score(target_col: float, target_row: float, col: int, row: int) -> float:
    dx = target_col - col
    dy = target_row - row
    return (dx + dy) + (dx * dx + dy * dy)


def _choose(scores: list[float]) -> EnemyDirection:
    """Pick the direction with the smallest positive score (zero means blocked)."""
    best = 0.0
    chosen = 0
    for index, value in enumerate(scores):
        if best == 0:
            best = value
            chosen = index
        if best > value > 0:
            best = value
            chosen = index
    return EnemyDirection(chosen)


def _centres(index: int) -> tuple[float, float]:
    base = (index + 1) * OBJECT_SIZE
    return base - OBJECT_SIZE / 2, base + OBJECT_SIZE / 2


class EnemyBase(GameObject):
    """A ghost that wanders its territory, chases the player and flees when powered."""

    def __init__(self) -> None:
        super().__init__()
        self.stage: Optional[StageData] = None
        self.resources: Optional[ResourceManager] = None
        self._player: Optional[Any] = None
        self._speed = ENEMY_SPEED
        self._state = EnemyState.TERRITORY
        self._type = EnemyType.AKABE
        self._velocity = Vector2D()
        self._direction = EnemyDirection.RIGHT
        self._direction_flag = True
        self._territory_panels = [Vector2D(), Vector2D()]
        self._move_animation: list[Any] = []
        self._eye_animation: list[Any] = []
        self._animation_time = 0.0
        self._animation_count = 0
        self._flash_count = 0
        self._flash_flag = False
        self._state_time = 0.0
        self._state_flag = False
        self._nest = Vector2D(*_NEST_PANEL)

    def _stage_data(self) -> StageData:
        return self.stage if self.stage is not None else StageData.get_instance()

    def _require_player(self) -> Any:
        if self._player is None:
            raise GameError(f"{type(self).__name__} has no player to follow")
        return self._player

    def initialize(self) -> None:
        resources = self.resources if self.resources is not None else ResourceManager.get_instance()
        self._move_animation = resources.get_images(MONSTER_IMAGES, 20, 20, 1, 32, 32)
        self._eye_animation = resources.get_images(EYE_IMAGES, 4, 4, 1, 32, 32)

        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.ENEMY
        self.collision.hit_object_types.extend((ObjectType.PLAYER, ObjectType.WALL))
        self.collision.radius = (OBJECT_SIZE - 1.0) / 2.0

        self.mobility = MobilityType.MOVABLE
        self.z_layer = 5
        self._territory_panels = [Vector2D(21, 1), Vector2D(26, 5)]

    def update(self, delta_second: float) -> None:
        self._animation_control(delta_second)
        self._movement(delta_second)
        self._state_change(delta_second)

    def draw(self, renderer: Renderer, screen_offset: Vector2D) -> None:
        if self._state is not EnemyState.DIE:
            super().draw(renderer, screen_offset)
        if self._state is not EnemyState.FEAR and self.eye_image is not None:
            pos = self.location + screen_offset
            renderer.draw_image(self.eye_image, pos.x, pos.y, 1.0, 0.0)

    def finalize(self) -> None:
        self._move_animation.clear()
        self._eye_animation.clear()

    def on_hit_collision(self, hit_object: GameObject) -> None:
        if (
            hit_object.collision.object_type is ObjectType.PLAYER
            and self._state is EnemyState.FEAR
        ):
            self._state = EnemyState.DIE

    @property
    def enemy_state(self) -> EnemyState:
        return self._state

    @property
    def enemy_type(self) -> EnemyType:
        return self._type

    @property
    def speed(self) -> float:
        return self._speed

    def set_player(self, player: Any) -> None:
        self._player = player

    def set_enemy_type(self, type_number: int) -> None:
        """Turn this enemy into Pinky (1), Aosuke (2) or Guzuta (3), waiting in the nest."""
        setup = _TYPE_SETUP.get(type_number)
        if setup is None:
            return
        self._type, panels = setup
        self._state = EnemyState.IDLE
        self._territory_panels = [panel.copy() for panel in panels]

    def _movement(self, delta_second: float) -> None:
        self._velocity = Vector2D(*_VELOCITY.get(self._direction, (0.0, 0.0)))

        if self._state is EnemyState.TERRITORY:
            self._move_territory()
        elif self._state is EnemyState.CHASE:
            self._move_chase(self.location, self._require_player().location)
        elif self._state is EnemyState.FEAR:
            self._move_fear(delta_second)
        elif self._state is EnemyState.IDLE:
            self._move_idle()
        elif self._state is EnemyState.DIE:
            self._move_die(delta_second)

        if self.location.x < 0.0:
            self.location.x = WIN_MAX_X - self.collision.radius
            self._velocity.y = 0.0
        if WIN_MAX_X < self.location.x:
            self.location.x = self.collision.radius
            self._velocity.y = 0.0

        self.location += self._velocity * self._speed * delta_second

    def _route_scores(
        self,
        stage: StageData,
        target_col: float,
        target_row: float,
        passable: Callable[[PanelID], bool],
    ) -> list[float]:
        row, col = stage.to_index(self.location)
        adjacent = stage.adjacent(row, col)
        scores = []
        for direction, side, dx, dy in _STEPS:
            if passable(adjacent[side]) and self._direction is not _OPPOSITE[direction]:
                scores.append(_score(target_col, target_row, col + dx, row + dy))
            else:
                scores.append(0)
        return scores

    def _move_territory(self) -> None:
        stage = self._stage_data()
        row, col = stage.to_index(self.location)
        target = self._territory_panels[0]
        if target.x == col and target.y == row:
            target = self._territory_panels[1]
        if stage.panel_at(self.location) is PanelID.BRANCH:
            self._set_direction(_choose(self._route_scores(stage, target.x, target.y, _is_open)))
        else:
            self._direction_flag = True

    def _move_chase(self, location: Vector2D, p_location: Vector2D) -> None:
        stage = self._stage_data()
        if stage.panel_at(self.location) is PanelID.BRANCH:
            p_row, p_col = stage.to_index(self._require_player().location)
            self._set_direction(_choose(self._route_scores(stage, p_col, p_row, _is_open)))
        else:
            self._direction_flag = True

    def _move_fear(self, delta_second: float) -> None:
        """Frightened enemies keep their heading."""

    def _move_die(self, delta_second: float) -> None:
        row, col = self._stage_data().to_index(self.location)
        self._set_direction(self._start_route(self._nest))
        if self._nest.x == col and self._nest.y == row:
            self._state = EnemyState.IDLE

    def _move_idle(self) -> None:
        stage = self._stage_data()
        row, col = stage.to_index(self.location)
        adjacent = stage.adjacent(row, col)

        if not self._state_flag:
            if adjacent[AdjacentDirection.UP] is not PanelID.NONE:
                self._set_direction(EnemyDirection.DOWN)
            if adjacent[AdjacentDirection.DOWN] is not PanelID.NONE:
                self._set_direction(EnemyDirection.UP)

        threshold = _RELEASE_FOOD.get(self._type)
        if threshold is not None and self._require_player().food_count > threshold:
            self._state_flag = True
            gate_col, gate_row = _GATE_PANEL
            if col == gate_col and row == gate_row:
                self._state = EnemyState.TERRITORY
            if col > gate_col:
                self._set_direction(EnemyDirection.LEFT)
            elif col < gate_col:
                self._set_direction(EnemyDirection.RIGHT)
            if col == gate_col and row != gate_row:
                self._set_direction(EnemyDirection.UP)
            elif col == gate_col and row == gate_row:
                self._direction = self._start_route(self._territory_panels[0])
                self._set_direction(self._start_route(self._territory_panels[0]))

        if stage.panel_at(self.location) is not PanelID.BRANCH:
            self._direction_flag = True

    def _animation_control(self, delta_second: float) -> None:
        self._animation_time += delta_second
        if self._state is not EnemyState.FEAR:
            if self._animation_time >= _MOVE_FRAME_TIME:
                self._animation_time = 0.0
                self._animation_count = (self._animation_count + 1) % len(_ANIMATION_NUM)
                frame = int(self._type) * 2 + _ANIMATION_NUM[self._animation_count]
                self.image = self._move_animation[frame]
                if self._direction is not EnemyDirection.NONE:
                    self.eye_image = self._eye_animation[int(self._direction)]
            return

        if not self._flash_flag:
            self.image = self._move_animation[_FEAR_FRAME]
        elif self._animation_time >= delta_second * 144:
            self._animation_time = 0.0
            self._animation_count += 1
            if self._animation_count >= 2:
                self._animation_count = 0
                self._flash_count += 1
            self.image = self._move_animation[_FEAR_FRAME + _ANIMATION_NUM[self._animation_count]]
        if self._flash_count > 6:
            self._flash_flag = False

    def _state_change(self, delta_second: float) -> None:
        self._state_time += delta_second

        if self._state is EnemyState.TERRITORY:
            if self._state_time >= (delta_second * 60) * 4.5:
                self._state_time = 0.0
                self._state = EnemyState.CHASE
            if self._require_player().power_up:
                self._state_time = 0.0
                self._state = EnemyState.FEAR

        if self._state is EnemyState.CHASE:
            if self._state_time >= (delta_second * 60) * 15:
                self._state_time = 0.0
                self._state = EnemyState.TERRITORY
            if self._require_player().power_up:
                self._state_time = 0.0
                self._state = EnemyState.FEAR

        if self._state is EnemyState.FEAR:
            if self._state_time >= (delta_second * 144) * 20 and self._flash_count < 6:
                self._flash_flag = True
            elif not self._flash_flag and self._flash_count > 6:
                self._flash_count = 0
                self._require_player().set_power_down()
                self._state_time = 0.0
                self._state = EnemyState.TERRITORY

    def _set_direction(self, direction: EnemyDirection) -> None:
        """Turn only when standing on a panel centre line and turning is allowed."""
        if not self._direction_flag or direction is EnemyDirection.NONE:
            return
        row, col = self._stage_data().to_index(self.location)
        if direction in (EnemyDirection.UP, EnemyDirection.DOWN):
            aligned = int(self.location.x) in _centres(col)
        else:
            aligned = int(self.location.y) in _centres(row)
        if aligned:
            self._direction = direction
            self._direction_flag = False

    def _start_route(self, target: Vector2D) -> EnemyDirection:
        """Best first step toward the panel ``target`` (column, row), avoiding walls."""
        stage = self._stage_data()
        return _choose(self._route_scores(stage, target.x, target.y, _not_wall))


class Akabe(EnemyBase):
    """The red enemy: holds still in its territory and chases the player directly."""

    def initialize(self) -> None:
        super().initialize()
        self._state = EnemyState.TERRITORY

    def _move_territory(self) -> None:
        """Akabe does not steer while in its territory."""

    def _move_chase(self, location: Vector2D, p_location: Vector2D) -> None:
        stage = self._stage_data()
        if stage.panel_at(location) is PanelID.BRANCH:
            p_row, p_col = stage.to_index(p_location)
            choice = _choose(self._route_scores(stage, p_col, p_row, _is_open))
            if self._direction_flag:
                self._set_direction(choice)
                self._direction_flag = False
        else:
            self._direction_flag = True


class Aosuke(EnemyBase):
    """The blue enemy: starts in its territory and does not steer when chasing."""

    def initialize(self) -> None:
        super().initialize()
        self._state = EnemyState.TERRITORY

    def _move_chase(self, location: Vector2D, p_location: Vector2D) -> None:
        """Aosuke keeps its heading while chasing."""


class Guzuta(EnemyBase):
    """The orange enemy: starts waiting in the nest and does not steer when chasing."""

    def initialize(self) -> None:
        super().initialize()
        self._state = EnemyState.IDLE

    def _move_chase(self, location: Vector2D, p_location: Vector2D) -> None:
        """Guzuta keeps its heading while chasing."""