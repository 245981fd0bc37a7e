import pytest

from ghostchase.collision import (
    CapsuleCollision,
    CircleCollision,
    ObjectType,
    capsule_circle_collide,
    capsules_collide,
    circles_collide,
    nearest_point,
)
from ghostchase.vector import Vector2D


def horizontal(x0, x1, y, radius):
    return CapsuleCollision(radius=radius, start=Vector2D(x0, y), end=Vector2D(x1, y))


def test_circles_at_same_point_collide():
    a = CircleCollision(Vector2D(1.0, 1.0), 1.0)
    b = CircleCollision(Vector2D(1.0, 1.0), 1.0)
    assert circles_collide(a, b) is True


def test_circles_far_apart_do_not_collide():
    a = CircleCollision(Vector2D(0.0, 0.0), 1.0)
    b = CircleCollision(Vector2D(50.0, 0.0), 1.0)
    assert circles_collide(a, b) is False


def test_touching_circles_do_not_collide():
    a = CircleCollision(Vector2D(0.0, 0.0), 1.0)
    b = CircleCollision(Vector2D(2.0, 0.0), 1.0)
    assert circles_collide(a, b) is False


def test_nearest_point_projects_onto_segment():
    cap = horizontal(0.0, 10.0, 0.0, 1.0)
    near = nearest_point(cap, Vector2D(5.0, 3.0))
    assert near.x == pytest.approx(5.0)
    assert near.y == pytest.approx(0.0)


def test_nearest_point_clamps_to_endpoints():
    cap = horizontal(0.0, 10.0, 0.0, 1.0)
    assert nearest_point(cap, Vector2D(-4.0, 2.0)) == cap.start
    assert nearest_point(cap, Vector2D(14.0, 2.0)) == cap.end


def test_nearest_point_of_degenerate_capsule_is_its_point():
    cap = CapsuleCollision(radius=1.0, start=Vector2D(3.0, 3.0), end=Vector2D(3.0, 3.0))
    assert nearest_point(cap, Vector2D(9.0, -1.0)) == cap.start


def test_capsule_circle_collide():
    cap = horizontal(0.0, 10.0, 0.0, 1.0)
    assert capsule_circle_collide(cap, CircleCollision(Vector2D(5.0, 1.5), 1.0)) is True
    assert capsule_circle_collide(cap, CircleCollision(Vector2D(5.0, 3.0), 0.5)) is False


def test_capsules_collide_when_endpoint_overlaps():
    a = horizontal(0.0, 10.0, 0.0, 1.0)
    b = CapsuleCollision(radius=1.0, start=Vector2D(5.0, 1.0), end=Vector2D(5.0, 20.0))
    assert capsules_collide(a, b) is True
    assert capsules_collide(b, a) is True


def test_parallel_capsules_apart_do_not_collide():
    a = horizontal(0.0, 10.0, 0.0, 1.0)
    b = horizontal(0.0, 10.0, 5.0, 1.0)
    assert capsules_collide(a, b) is False
    assert capsules_collide(b, a) is False


def test_is_hit_target():
    cap = CapsuleCollision(hit_object_types=[ObjectType.PLAYER, ObjectType.WALL])
    assert cap.is_hit_target(ObjectType.WALL) is True
    assert cap.is_hit_target(ObjectType.FOOD) is False


def test_translated_moves_points_and_keeps_original():
    cap = CapsuleCollision(
        is_blocking=True,
        object_type=ObjectType.WALL,
        hit_object_types=[ObjectType.PLAYER],
        radius=12.0,
        start=Vector2D(0.0, 0.0),
        end=Vector2D(0.0, 24.0),
    )
    offset = Vector2D(36.0, 12.0)
    moved = cap.translated(offset)
    assert moved.start == cap.start + offset
    assert moved.end == cap.end + offset
    assert moved.radius == cap.radius
    assert moved.object_type is ObjectType.WALL
    assert moved.is_blocking is True
    assert cap.start == Vector2D(0.0, 0.0)
    moved.hit_object_types.append(ObjectType.ENEMY)
    assert cap.hit_object_types == [ObjectType.PLAYER]