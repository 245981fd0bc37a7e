"""Static stage items: walls and the two kinds of food."""

from __future__ import annotations

from .collision import ObjectType
from .objects import OBJECT_SIZE, GameObject, Renderer
from .resources import ResourceManager
from .vector import Vector2D

FOOD_IMAGE = "Resource/Images/dot.png"
POWER_FOOD_IMAGE = "Resource/Images/big_dot.png"
BLINK_INTERVAL = 0.15


class Wall(GameObject):
    """An invisible wall segment that blocks the player and enemies."""

    def initialize(self) -> None:
        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.WALL
        self.collision.hit_object_types.extend((ObjectType.PLAYER, ObjectType.ENEMY))
        self.collision.radius = OBJECT_SIZE / 2.0

    def draw(self, renderer: Renderer, screen_offset: Vector2D) -> None:
        """Walls are part of the background image and draw nothing."""

    def set_wall_data(self, x_size: int, y_size: int) -> None:
        """Stretch the collision segment over ``x_size`` by ``y_size`` panels."""
        self.collision.start = Vector2D()
        self.collision.end = Vector2D()
        if x_size == 1:
            self.collision.end.y = OBJECT_SIZE * (y_size - 1)
        if y_size == 1:
            self.collision.end.x = OBJECT_SIZE * (x_size - 1)


class Food(GameObject):
    """A normal dot, eaten when the player touches it."""

    def initialize(self) -> None:
        self.image = ResourceManager.get_instance().get_images(FOOD_IMAGE)[0]
        self.collision.is_blocking = False
        self.collision.object_type = ObjectType.FOOD
        self.collision.hit_object_types.append(ObjectType.PLAYER)
        self.collision.radius = 1.0
        self.z_layer = 1

    def draw(self, renderer: Renderer, screen_offset: Vector2D) -> None:
        pos = self.location + screen_offset
        renderer.draw_image(self.image, pos.x, pos.y, 0.2, 0.0)

    def on_hit_collision(self, hit_object: GameObject) -> None:
        if hit_object.collision.object_type is ObjectType.PLAYER:
            self.destroy_object(self)


class PowerFood(GameObject):
    """A blinking power dot, eaten when the player touches it."""

    def __init__(self) -> None:
        super().__init__()
        self.is_disp = True
        self.disp_time = 0.0

    def initialize(self) -> None:
        self.image = ResourceManager.get_instance().get_images(POWER_FOOD_IMAGE)[0]
        self.collision.is_blocking = False
        self.collision.object_type = ObjectType.POWER_FOOD
        self.collision.hit_object_types.append(ObjectType.PLAYER)
        self.collision.radius = 1.0
        self.z_layer = 1

    def update(self, delta_second: float) -> None:
        self.disp_time += delta_second
        if self.disp_time >= BLINK_INTERVAL:
            self.disp_time = 0.0
            self.is_disp = not self.is_disp

    def draw(self, renderer: Renderer, screen_offset: Vector2D) -> None:
        if self.is_disp:
            pos = self.location + screen_offset
            renderer.draw_image(self.image, pos.x, pos.y, 0.25, 0.0)

    def on_hit_collision(self, hit_object: GameObject) -> None:
        if hit_object.collision.object_type is ObjectType.PLAYER:
            self.destroy_object(self)