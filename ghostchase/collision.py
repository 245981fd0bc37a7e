"""Collision shapes (circles and capsules) and their overlap tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .vector import Vector2D


class ObjectType(Enum):
    NONE = 0
    PLAYER = 1
    ENEMY = 2
    WALL = 3
    FOOD = 4
    POWER_FOOD = 5
    SPECIAL = 6


@dataclass
class CapsuleCollision:
    """A line segment swept by a circle; ``start`` and ``end`` are relative to the owner."""

    is_blocking: bool = False
    object_type: ObjectType = ObjectType.NONE
    hit_object_types: list[ObjectType] = field(default_factory=list)
    radius: float = 0.0
    start: Vector2D = field(default_factory=Vector2D)
    end: Vector2D = field(default_factory=Vector2D)

    def is_hit_target(self, object_type: ObjectType) -> bool:
        """True if collisions with ``object_type`` apply to this shape."""
        return object_type in self.hit_object_types

    def translated(self, offset: Vector2D) -> "CapsuleCollision":
        """Return a copy whose segment is moved by ``offset``."""
        return replace(
            self,
            hit_object_types=list(self.hit_object_types),
            start=self.start + offset,
            end=self.end + offset,
        )


@dataclass
class CircleCollision:
    point: Vector2D = field(default_factory=Vector2D)
    radius: float = 0.0


def circles_collide(c1: CircleCollision, c2: CircleCollision) -> bool:
    reach = c1.radius + c2.radius
    return (c1.point - c2.point).sqr_length() < reach * reach


def capsule_circle_collide(capsule: CapsuleCollision, circle: CircleCollision) -> bool:
    near = CircleCollision(nearest_point(capsule, circle.point), capsule.radius)
    return circles_collide(near, circle)


def capsules_collide(c1: CapsuleCollision, c2: CapsuleCollision) -> bool:
    """Check each capsule's end caps against the other capsule."""
    return (
        capsule_circle_collide(c1, CircleCollision(c2.start, c2.radius))
        or capsule_circle_collide(c1, CircleCollision(c2.end, c2.radius))
        or capsule_circle_collide(c2, CircleCollision(c1.start, c1.radius))
        or capsule_circle_collide(c2, CircleCollision(c1.end, c1.radius))
    )


def nearest_point(capsule: CapsuleCollision, point: Vector2D) -> Vector2D:
    """Return the point on the capsule's segment closest to ``point``."""
    line = capsule.end - capsule.start
    from_start = point - capsule.start
    from_end = point - capsule.end
    if Vector2D.dot(line, from_start) < 0.0:
        return capsule.start.copy()
    if Vector2D.dot(line, from_end) > 0.0:
        return capsule.end.copy()
    direction = line.normalize()
    return capsule.start + direction * Vector2D.dot(direction, from_start)