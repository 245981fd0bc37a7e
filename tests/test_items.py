import pygame
import pytest

from ghostchase.collision import ObjectType
from ghostchase.items import FOOD_IMAGE, POWER_FOOD_IMAGE, Food, PowerFood, Wall
from ghostchase.objects import OBJECT_SIZE, GameObject
from ghostchase.resources import ResourceManager
from ghostchase.scene import SceneBase, SceneType
from ghostchase.vector import Vector2D


class Recorder:
    def __init__(self):
        self.images = []

    def draw_image(self, image, x, y, scale, angle):
        self.images.append((image, x, y, scale, angle))

    def draw_text(self, x, y, text, color, size):
        pass


class DummyScene(SceneBase):
    def scene_type(self):
        return SceneType.IN_GAME


@pytest.fixture
def resources(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for path, size in ((FOOD_IMAGE, (8, 8)), (POWER_FOOD_IMAGE, (16, 16))):
        target = tmp_path / path
        target.parent.mkdir(parents=True, exist_ok=True)
        pygame.image.save(pygame.Surface(size), str(target))
    ResourceManager.delete_instance()
    manager = ResourceManager.get_instance()
    yield manager
    ResourceManager.delete_instance()


def _toucher(object_type):
    obj = GameObject()
    obj.collision.object_type = object_type
    return obj


def test_wall_initialize():
    wall = Wall()
    wall.initialize()
    assert wall.collision.object_type is ObjectType.WALL
    assert wall.collision.is_blocking
    assert wall.collision.radius == OBJECT_SIZE / 2.0
    assert wall.collision.is_hit_target(ObjectType.PLAYER)
    assert wall.collision.is_hit_target(ObjectType.ENEMY)
    assert not wall.collision.is_hit_target(ObjectType.FOOD)


def test_wall_vertical_segment():
    wall = Wall()
    wall.set_wall_data(1, 3)
    assert wall.collision.start == Vector2D(0, 0)
    assert wall.collision.end == Vector2D(0, 48.0)


def test_wall_horizontal_segment():
    wall = Wall()
    wall.set_wall_data(4, 1)
    assert wall.collision.end == Vector2D(72.0, 0)


def test_wall_single_panel_has_empty_segment():
    wall = Wall()
    wall.set_wall_data(1, 1)
    assert wall.collision.end == wall.collision.start == Vector2D()


def test_wall_draws_nothing():
    renderer = Recorder()
    wall = Wall()
    wall.image = "x"
    wall.draw(renderer, Vector2D())
    assert renderer.images == []


def test_food_initialize(resources):
    food = Food()
    food.initialize()
    assert food.image is resources.get_images(FOOD_IMAGE)[0]
    assert food.image.get_size() == (8, 8)
    assert food.collision.object_type is ObjectType.FOOD
    assert not food.collision.is_blocking
    assert food.collision.radius == 1.0
    assert food.z_layer == 1


def test_food_draw(resources):
    food = Food()
    food.initialize()
    food.location = Vector2D(10, 20)
    renderer = Recorder()
    food.draw(renderer, Vector2D(0, 5))
    assert renderer.images == [(food.image, 10.0, 25.0, 0.2, 0.0)]


def test_food_eaten_by_player(resources):
    scene = DummyScene()
    food = scene.create_object(Food, Vector2D(1, 1))
    scene.update(0.0)
    food.on_hit_collision(_toucher(ObjectType.WALL))
    scene.update(0.0)
    assert food in scene.objects
    food.on_hit_collision(_toucher(ObjectType.PLAYER))
    scene.update(0.0)
    assert food not in scene.objects


def test_power_food_initialize(resources):
    food = PowerFood()
    food.initialize()
    assert food.image is resources.get_images(POWER_FOOD_IMAGE)[0]
    assert food.image.get_size() == (16, 16)
    assert food.collision.object_type is ObjectType.POWER_FOOD
    assert food.z_layer == 1


def test_power_food_blinks(resources):
    food = PowerFood()
    food.initialize()
    renderer = Recorder()
    food.update(0.1)
    food.draw(renderer, Vector2D())
    assert len(renderer.images) == 1
    food.update(0.1)
    assert food.is_disp is False
    food.draw(renderer, Vector2D())
    assert len(renderer.images) == 1
    food.update(0.2)
    assert food.is_disp is True


def test_power_food_eaten_by_player(resources):
    scene = DummyScene()
    food = scene.create_object(PowerFood, Vector2D())
    other = scene.create_object(Food, Vector2D(2, 2))
    scene.update(0.0)
    food.on_hit_collision(_toucher(ObjectType.PLAYER))
    scene.update(0.0)
    assert food not in scene.objects
    assert scene.objects == (other,)