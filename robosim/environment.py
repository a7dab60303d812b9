"""The simulated world: the robots and obstacles it holds and its size."""

from __future__ import annotations

import logging
import os

from robosim.autonomous import AutonomousRobot
from robosim.obstacle import Obstacle
from robosim.remote import RemoteControlledRobot
from robosim.robot import Robot

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 600.0


class Environment:
    """A rectangular world of ``width`` by ``height`` holding robots and obstacles."""

    def __init__(self, width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT) -> None:
        self.width = float(width)
        self.height = float(height)
        self.robots: list[Robot] = []
        self.obstacles: list[Obstacle] = []

    def clear(self) -> None:
        """Remove every robot and obstacle."""
        self.robots.clear()
        self.obstacles.clear()

    def add_robot(self, robot: Robot) -> None:
        self.robots.append(robot)

    def remove_robot(self, robot_id: int) -> bool:
        """Remove the first robot with ``robot_id``; tell whether one was found."""
        for index, robot in enumerate(self.robots):
            if robot.id == robot_id:
                del self.robots[index]
                return True
        return False

    def add_obstacle(self, obstacle: Obstacle) -> None:
        self.obstacles.append(obstacle)

    def remove_obstacle(self, obstacle_id: int) -> bool:
        """Remove the first obstacle with ``obstacle_id``; tell whether one was found."""
        for index, obstacle in enumerate(self.obstacles):
            if obstacle.id == obstacle_id:
                del self.obstacles[index]
                return True
        return False

    def find_remote_controlled_robots(self) -> list[RemoteControlledRobot]:
        """Return the remote-controlled robots, in the order they were added."""
        return [robot for robot in self.robots if isinstance(robot, RemoteControlledRobot)]

    def load_configuration(self, filename: str | os.PathLike[str]) -> None:
        """Add the robots and obstacles described in a configuration file.

        Each line is either ``Robot <type> <id> <x> <y> <speed> <direction>
        <sensor_range>`` with type ``autonomous`` or ``remote``, or ``Obstacle
        <id> <x> <y> <size>``. Other lines, unknown robot types and lines
        whose numbers cannot be read are skipped. Raises ``OSError`` when the
        file cannot be opened.
        """
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                self._load_line(line.rstrip("\r\n"))

    def _load_line(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        kind = tokens[0]
        if kind == "Robot":
            self._load_robot(line, tokens[1:])
        elif kind == "Obstacle":
            self._load_obstacle(line, tokens[1:])

    def _load_robot(self, line: str, fields: list[str]) -> None:
        if len(fields) < 7:
            logger.warning("Failed to read Robot data: %s", line)
            return
        robot_type = fields[0]
        try:
            robot_id = int(fields[1])
            x, y, speed, direction, sensor_range = (float(value) for value in fields[2:7])
        except ValueError:
            logger.warning("Failed to read Robot data: %s", line)
            return

        if robot_type == "autonomous":
            self.add_robot(
                AutonomousRobot(
                    robot_id,
                    (x, y),
                    speed,
                    direction,
                    sensor_range,
                    self.width,
                    self.height,
                    self,
                )
            )
        elif robot_type == "remote":
            self.add_robot(
                RemoteControlledRobot(robot_id, (x, y), speed, direction, sensor_range, self)
            )

    def _load_obstacle(self, line: str, fields: list[str]) -> None:
        if len(fields) < 4:
            logger.error("Failed to read Obstacle data: %s", line)
            return
        try:
            obstacle_id = int(fields[0])
            x, y, size = (float(value) for value in fields[1:4])
        except ValueError:
            logger.error("Failed to read Obstacle data: %s", line)
            return
        self.add_obstacle(Obstacle(obstacle_id, (x, y), size))