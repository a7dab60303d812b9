"""Reading and writing configuration files that describe a world."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from typing import Any

from robosim.autonomous import AutonomousRobot
from robosim.environment import Environment
from robosim.obstacle import Obstacle
from robosim.remote import RemoteControlledRobot
from robosim.settings import set_config_path

logger = logging.getLogger(__name__)

_ROBOT_WORLD_WIDTH = 800
_ROBOT_WORLD_HEIGHT = 600
_MISSING_CELL = "undefined"


class ConfigurationError(Exception):
    """A configuration file could not be read, parsed or written."""


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _add_robot(environment: Environment, parts: list[str]) -> None:
    robot_type = parts[1]
    robot_id = _to_int(parts[2])
    x, y, speed, direction, sensor_range = (_to_float(p) for p in parts[3:8])
    if robot_type == "autonomous":
        environment.add_robot(
            AutonomousRobot(
                robot_id,
                (x, y),
                speed,
                direction,
                sensor_range,
                _ROBOT_WORLD_WIDTH,
                _ROBOT_WORLD_HEIGHT,
                environment,
            )
        )
    elif robot_type == "remote":
        environment.add_robot(
            RemoteControlledRobot(robot_id, (x, y), speed, direction, sensor_range, environment)
        )


def _add_obstacle(environment: Environment, parts: list[str]) -> None:
    obstacle_id = _to_int(parts[1])
    x, y, size = (_to_float(p) for p in parts[2:5])
    environment.add_obstacle(Obstacle(obstacle_id, (x, y), size))


def load_new_configuration(
    environment: Environment,
    path: str | os.PathLike[str],
    fallback_path: str | os.PathLike[str],
) -> None:
    """Replace the contents of ``environment`` with the world in ``path``.

    The environment is cleared first. Lines with a single word or none are
    ignored; numbers that cannot be read count as zero. On success ``path``
    becomes the current configuration path. A line of any other shape stops
    the load: the world in ``fallback_path`` is then added on top of what
    was read so far and ``ConfigurationError`` is raised. A file that cannot
    be opened leaves the environment empty and raises ``ConfigurationError``.
    """
    environment.clear()
    try:
        with open(path, encoding="utf-8") as handle:
            lines = [line.rstrip("\r\n") for line in handle]
    except OSError as exc:
        raise ConfigurationError(f"Could not open file: {os.fspath(path)}") from exc

    bad_line: str | None = None
    for line in lines:
        parts = line.split()
        if len(parts) <= 1:
            continue
        if parts[0] == "Robot" and len(parts) >= 8:
            _add_robot(environment, parts)
        elif parts[0] == "Obstacle" and len(parts) == 5:
            _add_obstacle(environment, parts)
        else:
            bad_line = line
            break

    if bad_line is None:
        set_config_path(path)
        return

    try:
        environment.load_configuration(fallback_path)
    except OSError:
        logger.error("Unable to open file: %s", os.fspath(fallback_path))
    raise ConfigurationError(f"Incorrect configuration string format: {bad_line}")


def save_configuration(
    path: str | os.PathLike[str],
    robot_rows: Iterable[Sequence[Any]],
    obstacle_rows: Iterable[Sequence[Any]],
) -> None:
    """Write robot and obstacle rows to ``path`` in the configuration format.

    Each robot row holds type, id, x, y, velocity, orientation and sensor
    range; each obstacle row holds id, x, y and size. A cell of ``None`` is
    written as ``undefined``. Raises ``ConfigurationError`` when the file
    cannot be written.
    """

    def render(prefix: str, row: Sequence[Any]) -> str:
        cells = (_MISSING_CELL if cell is None else str(cell) for cell in row)
        return " ".join((prefix, *cells)) + "\n"

    text = "".join(render("Robot", row) for row in robot_rows)
    text += "".join(render("Obstacle", row) for row in obstacle_rows)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise ConfigurationError(f"Could not save file to: {os.fspath(path)}") from exc