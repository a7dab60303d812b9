# robosim

A small two-dimensional simulator of robots moving in a rectangular area
(800 × 600 by default) scattered with square obstacles.

There are two kinds of robot:

- **autonomous** robots (`robosim.autonomous.AutonomousRobot`) drive straight
  ahead. Before each step they sweep a ±30° fan of sensor rays for obstacles
  and other robots, and probe three points at sensor range for the edge of the
  area. When something is found they turn by their avoidance angle, which is
  the orientation they were created with.
- **remote** robots (`robosim.remote.RemoteControlledRobot`) move only while
  commands tell them to. The commands are `start_move_forward`,
  `stop_move_forward`, `start_move_backward`, `stop_move_backward`,
  `start_turn_left`, `stop_turn_left`, `start_turn_right` and
  `stop_turn_right`; any other command is ignored. A turn is by the
  orientation the robot was created with, so a robot created facing 0° does
  not turn.

Neither kind moves along a path that crosses the (enlarged) edge of an
obstacle or the space around another robot, or leaves the area. A blocked move
along one axis is cut short in half-unit steps.

## Installation

```
pip install .
```

No third-party libraries are needed. Tests use pytest (`pip install .[test]`).

## Configuration files

A scene is a plain text file with one object per line, fields separated by
whitespace:

```
Robot autonomous 1 100 100 2.0 45 50
Robot remote 2 400 300 1.5 90 40
Obstacle 3 250 250 40
```

A robot line holds its type (`autonomous` or `remote`), id, x, y, speed,
orientation in degrees and sensor range. An obstacle line holds its id, the x
and y of its centre, and the length of its side.

`Environment.load_configuration(filename)` adds the objects in such a file to
an environment. It skips blank lines, unknown robot types and lines whose
numbers cannot be read, and raises `OSError` if the file cannot be opened.

`robosim.config_file` has two more functions:

- `load_new_configuration(environment, path, fallback_path)` clears the
  environment and loads `path`; on success it records `path` with
  `robosim.settings.set_config_path`. Numbers that cannot be read count as
  zero. A malformed line stops the load, adds the scene in `fallback_path` on
  top of what was read, and raises `ConfigurationError`; so does a file that
  cannot be opened (the environment is then left empty).
- `save_configuration(path, robot_rows, obstacle_rows)` writes rows in the
  format above; a `None` cell is written as `undefined`. It raises
  `ConfigurationError` if the file cannot be written.

## Using the library

```python
from robosim.environment import Environment
from robosim.engine import SimulationEngine

env = Environment()
env.load_configuration("scene.txt")

engine = SimulationEngine(env)
engine.add_obstacle(10, (600.0, 200.0), 30.0)
engine.add_listener(lambda: print("stepped"))

for _ in range(100):
    engine.step()

engine.send_command("start_move_forward")
engine.step()

for robot in engine.robots:
    print(robot.id, robot.position, robot.orientation)
```

`SimulationEngine.step()` moves every robot once, then applies the held
commands of the remote robots, then calls the listeners.
`SimulationEngine.update(now=None)` does the same only while the engine is
running (`start`, `pause`, `resume`, `stop`) and at least one time step
(0.016 s by default) has passed since the last advance; it returns whether it
advanced. The engine also has `add_robot`, `get_robot`, `update_robot`,
`remove_robot`, `get_obstacle`, `update_obstacle` and `remove_obstacle`;
the two `update_*` methods raise `KeyError` for an unknown id.

`robosim.geometry` holds the helpers used for collision tests: `Rect`,
`line_intersects_line`, `line_intersects_rect`, `calculate_distance`,
`degrees_to_radians`, `radians_to_degrees` and `format_time`.

## Command line

```
robosim [configuration-file] [--steps N]
```

This loads a scene (default `examples/example1.txt`), runs `N` steps (default
100) and prints each robot as `Robot <id> <x> <y> <orientation>` and each
obstacle as `Obstacle <id> <x> <y> <size>`. It exits with status 1 if the file
cannot be opened and 2 if `--steps` is negative.

## What it does not do

The package has no graphical display and no keyboard control: remote robots
are driven only through `send_command` or `process_command`. It runs no timer
of its own either; a caller that wants real-time stepping must call
`SimulationEngine.update` from its own loop.