"""Base class for everything that lives in a scene."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Protocol, TypeVar

from .collision import CapsuleCollision
from .config import GameError
from .vector import Vector2D

OBJECT_SIZE = 24.0

T = TypeVar("T", bound="GameObject")


class MobilityType(Enum):
    STATIONARY = 0
    MOVABLE = 1


class Renderer(Protocol):
    """Drawing surface used by game objects and scenes."""

    def draw_image(self, image: Any, x: float, y: float, scale: float, angle: float) -> None:
        """Draw ``image`` centred on (x, y)."""

    def draw_text(
        self, x: float, y: float, text: str, color: tuple[int, int, int], size: int
    ) -> None:
        """Draw ``text`` with its top-left corner at (x, y)."""


class GameObject:
    """An object owned by a scene, with a position and a collision shape."""

    def __init__(self) -> None:
        self.owner_scene: Optional[Any] = None
        self.location = Vector2D()
        self.collision = CapsuleCollision()
        self.image: Any = None
        self.eye_image: Any = None
        self.z_layer = 0
        self.mobility = MobilityType.STATIONARY

    def initialize(self) -> None:
        """Prepare the object after creation; subclasses set up images and collision."""

    def update(self, delta_second: float) -> None:
        """Advance the object by one frame."""

    def draw(self, renderer: Renderer, screen_offset: Vector2D) -> None:
        """Draw the object's image at its location shifted by ``screen_offset``."""
        if self.image is None:
            return
        pos = self.location + screen_offset
        renderer.draw_image(self.image, pos.x, pos.y, 1.0, 0.0)

    def finalize(self) -> None:
        """Release what the object holds before it is removed."""

    def on_hit_collision(self, hit_object: "GameObject") -> None:
        """Called when this object touches ``hit_object``."""

    def _scene(self) -> Any:
        if self.owner_scene is None:
            raise GameError(f"{type(self).__name__} has no owning scene")
        return self.owner_scene

    def create_object(self, cls: type[T], location: Vector2D) -> T:
        """Ask the owning scene to create an object of ``cls`` at ``location``."""
        return self._scene().create_object(cls, location)

    def destroy_object(self, target: "GameObject") -> None:
        """Ask the owning scene to destroy ``target``."""
        self._scene().destroy_object(target)

    @property
    def screen_offset(self) -> Vector2D:
        return self._scene().screen_offset.copy()