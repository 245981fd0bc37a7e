"""Scene base class: owns game objects, updates them and checks collisions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TypeVar

from .collision import capsules_collide
from .config import GameError
from .objects import GameObject, MobilityType, Renderer
from .vector import Vector2D

T = TypeVar("T", bound=GameObject)


class SceneType(Enum):
    TITLE = 0
    IN_GAME = 1
    RE_START = 2
    RESULT = 3
    EXIT = 4


class SceneBase(ABC):
    """Holds the objects of one scene; creation and destruction take effect on update."""

    def __init__(self) -> None:
        self._create_list: list[GameObject] = []
        self._object_list: list[GameObject] = []
        self._destroy_list: list[GameObject] = []
        self.screen_offset = Vector2D()

    def initialize(self) -> None:
        """Set up the scene before its first update: start with no screen offset."""
        self.screen_offset = Vector2D()

    def update(self, delta_second: float) -> SceneType:
        """Advance one frame and return the scene type to continue with."""
        for obj in self._create_list:
            index = next(
                (i for i, placed in enumerate(self._object_list) if obj.z_layer < placed.z_layer),
                len(self._object_list),
            )
            self._object_list.insert(index, obj)
        self._create_list.clear()

        for obj in list(self._object_list):
            obj.update(delta_second)

        snapshot = list(self._object_list)
        for target in snapshot:
            if target.mobility is MobilityType.STATIONARY:
                continue
            for partner in snapshot:
                if partner is not target:
                    self.check_collision(target, partner)

        for obj in self._destroy_list:
            if obj in self._object_list:
                self._object_list.remove(obj)
                obj.finalize()
        self._destroy_list.clear()

        return self.scene_type()

    def draw(self, renderer: Renderer) -> None:
        for obj in self._object_list:
            obj.draw(renderer, self.screen_offset)

    def finalize(self) -> None:
        """Finalize and drop every object of the scene."""
        for obj in self._object_list:
            obj.finalize()
        self._object_list.clear()
        self._create_list.clear()
        self._destroy_list.clear()

    @abstractmethod
    def scene_type(self) -> SceneType:
        """The type of this scene."""

    def check_collision(self, target: Optional[GameObject], partner: Optional[GameObject]) -> None:
        """Notify both objects when their capsules touch and either one targets the other."""
        if target is None or partner is None:
            return
        tc = target.collision
        pc = partner.collision
        if not (tc.is_hit_target(pc.object_type) or pc.is_hit_target(tc.object_type)):
            return
        if capsules_collide(tc.translated(target.location), pc.translated(partner.location)):
            target.on_hit_collision(partner)
            partner.on_hit_collision(target)

    def create_object(self, cls: type[T], location: Vector2D) -> T:
        """Create, initialise and place an object; it joins the scene on the next update."""
        if not (isinstance(cls, type) and issubclass(cls, GameObject)):
            raise GameError("could not create game object")
        instance = cls()
        instance.owner_scene = self
        instance.initialize()
        instance.location = location.copy()
        self._create_list.append(instance)
        return instance

    def destroy_object(self, target: Optional[GameObject]) -> None:
        """Schedule ``target`` for removal on the next update."""
        if target is None:
            return
        if any(obj is target for obj in self._destroy_list):
            return
        self._destroy_list.append(target)

    @property
    def objects(self) -> tuple[GameObject, ...]:
        """Objects currently in the scene, in drawing order."""
        return tuple(self._object_list)