# ghostchase

Building blocks for a maze-chase arcade game: a player who eats dots in a
maze, four ghosts that patrol their corners, hunt the player and flee after a
power pellet, and the geometry, input, stage and resource handling they rely
on. Drawing and windowing go through pygame.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module                 | Contents |
|------------------------|----------|
| `ghostchase.vector`    | `Vector2D`: mutable 2D vector with component-wise arithmetic; division by a near-zero value gives the zero vector. Also `dot`, `cross`, `lerp`, `distance` (squared), `normalize`, `to_int`. |
| `ghostchase.collision` | `ObjectType`, `CapsuleCollision`, `CircleCollision` and the tests `circles_collide`, `capsule_circle_collide`, `capsules_collide`, `nearest_point`. |
| `ghostchase.config`    | Window size constants, `FrameClock` (frame time capped at one display refresh), `GameError`, `report_error`. |
| `ghostchase.input`     | `Key`, `Button` and `InputManager`, which keeps this frame's and last frame's keys and buttons for held / pressed / released checks, plus normalised triggers and sticks. |
| `ghostchase.resources` | `ResourceManager`, a cache of image and sound handles, and `PygameLoader`, which loads them (and cuts sprite sheets into frames). Missing files raise `ResourceError`. |
| `ghostchase.stage`     | `StageData`, the 31 × 28 panel grid (`PanelID.WALL`, `GATE`, `BRANCH`, `NONE`) read from stage map records. |
| `ghostchase.objects`   | `GameObject`, the base class for anything in a scene, and the `Renderer` protocol. |
| `ghostchase.scene`     | `SceneBase`: holds objects in z-layer order, updates them, checks collisions between movable objects and the rest, and applies deferred creation and destruction. `SceneType` names the scenes. |
| `ghostchase.items`     | `Wall`, `Food` and the blinking `PowerFood`. |
| `ghostchase.player`    | `Player`, steered by the arrow keys or D-pad, with buffered turns, wall push-back, screen wrap and a dying animation. |
| `ghostchase.enemy`     | `EnemyBase` and `Akabe`, `Aosuke`, `Guzuta`: ghosts that wait in the nest, leave after enough dots are eaten, alternate between territory and chase, and turn frightened while the player is powered up. |
| `ghostchase.backend`   | `PygameBackend`: opens the window, reads the keyboard and implements `Renderer`. |

## Examples

Geometry:

```python
from ghostchase.vector import Vector2D
from ghostchase.collision import CircleCollision, circles_collide

a = CircleCollision(Vector2D(0.0, 0.0), 5.0)
b = CircleCollision(Vector2D(8.0, 0.0), 5.0)
print(circles_collide(a, b))  # True
```

Stage map records: `#` (walls) and `G` (gates) take
`size x, size y, start x, start y`, `B` (junctions) takes `x, y`;
coordinates start at 1.

```python
from ghostchase.stage import StageData, PanelID

stage = StageData.from_lines(["#,5,1,2,2", "B,7,2"])
print(stage.panel(1, 1) is PanelID.WALL)    # True
print(stage.panel(1, 6) is PanelID.BRANCH)  # True
```

`StageData.get_instance()` loads `Resource/Map/StageMap.csv` from the
working directory on first use.

Input edges:

```python
from ghostchase.input import InputManager, Key

controls = InputManager()
controls.update(keys=[Key.SPACE])
print(controls.get_key_down(Key.SPACE))  # True
controls.update(keys=[Key.SPACE])
print(controls.get_key(Key.SPACE))       # True
```

A scene is a `SceneBase` subclass that names its type; objects it creates
join it on the next `update`:

```python
from ghostchase.scene import SceneBase, SceneType
from ghostchase.items import Wall
from ghostchase.vector import Vector2D

class Maze(SceneBase):
    def scene_type(self):
        return SceneType.IN_GAME

maze = Maze()
wall = maze.create_object(Wall, Vector2D(12.0, 12.0))
wall.set_wall_data(5, 1)
maze.update(1 / 60)
print(len(maze.objects))  # 1
```

## Resources

`Food`, `PowerFood`, `Player` and the ghosts load their sprites through
`ResourceManager.get_instance()` from `Resource/Images/` under the working
directory (`dot.png`, `big_dot.png`, `pacman.png`, `dying.png`,
`monster.png`, `eyes.png`). A missing file raises `ResourceError`.

## What the package does not do

The package has no command to start the game and no ready-made title,
in-game or result scenes, nor a loop that switches between them. It does not
read the ghost and player start positions or the dot layout from map files,
and it plays no music. To run a game, write `SceneBase` subclasses that place
the objects, and drive them yourself: open a `PygameBackend`, feed
`InputManager.update` from `PygameBackend.pressed_keys()`, call the scene's
`update` with `FrameClock.tick()`, then `clear`, `draw` and `flip`.