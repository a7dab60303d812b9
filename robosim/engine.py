"""Stepping a world forward in time and editing it while it runs."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from robosim.autonomous import AutonomousRobot
from robosim.environment import Environment
from robosim.obstacle import Obstacle
from robosim.remote import RemoteControlledRobot
from robosim.robot import Robot

logger = logging.getLogger(__name__)

DEFAULT_TIME_STEP = 0.016
_ROBOT_WORLD_WIDTH = 800.0
_ROBOT_WORLD_HEIGHT = 600.0


class SimulationEngine:
    """Drives the robots of an ``Environment`` one time step at a time.

    ``update`` is meant to be called from a timer or loop; it advances the
    world only while the engine runs and at least one time step has passed
    since the previous advance. Listeners are called after every advance.
    """

    def __init__(self, environment: Environment, time_step: float = DEFAULT_TIME_STEP) -> None:
        self.environment = environment
        self.time_step = float(time_step)
        self.running = False
        self.start_time = time.monotonic()
        self.last_update = self.start_time
        self._listeners: list[Callable[[], None]] = []

    @property
    def robots(self) -> list[Robot]:
        return list(self.environment.robots)

    @property
    def obstacles(self) -> list[Obstacle]:
        return list(self.environment.obstacles)

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` with no arguments after every step."""
        self._listeners.append(callback)

    def start(self) -> None:
        self.running = True

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        """Run again, counting the next time step from now."""
        self.running = True
        self.last_update = time.monotonic()

    def stop(self) -> None:
        self.running = False

    def update(self, now: float | None = None) -> bool:
        """Advance the world if running and a time step has passed.

        ``now`` is a ``time.monotonic()`` reading; the current one is used
        when it is omitted. Tell whether the world was advanced.
        """
        if not self.running:
            return False
        if now is None:
            now = time.monotonic()
        elapsed_ms = int((now - self.last_update) * 1000)
        if elapsed_ms < self.time_step * 1000:
            return False
        self.step()
        self.last_update = now
        return True

    def step(self) -> None:
        """Move every robot once, apply remote commands and notify listeners."""
        width, height = self.environment.width, self.environment.height
        for robot in self.robots:
            robot.move(width, height)
            if isinstance(robot, RemoteControlledRobot):
                robot.update()
        for callback in self._listeners:
            callback()

    def add_robot(
        self,
        kind: str,
        robot_id: int,
        position: tuple[float, float],
        speed: float,
        orientation: float,
        sensor_range: float,
    ) -> Robot:
        """Add an ``autonomous`` robot, or a remote one for any other kind."""
        robot: Robot
        if kind == "autonomous":
            robot = AutonomousRobot(
                robot_id,
                position,
                speed,
                orientation,
                sensor_range,
                _ROBOT_WORLD_WIDTH,
                _ROBOT_WORLD_HEIGHT,
                self.environment,
            )
        else:
            robot = RemoteControlledRobot(
                robot_id, position, speed, orientation, sensor_range, self.environment
            )
        self.environment.add_robot(robot)
        return robot

    def add_obstacle(
        self, obstacle_id: int, position: tuple[float, float], size: float
    ) -> Obstacle:
        obstacle = Obstacle(obstacle_id, position, size)
        self.environment.add_obstacle(obstacle)
        return obstacle

    def get_robot(self, robot_id: int) -> Robot | None:
        """Return the first robot with ``robot_id``, or ``None``."""
        return next((r for r in self.environment.robots if r.id == robot_id), None)

    def get_obstacle(self, obstacle_id: int) -> Obstacle | None:
        """Return the first obstacle with ``obstacle_id``, or ``None``."""
        return next((o for o in self.environment.obstacles if o.id == obstacle_id), None)

    def update_robot(
        self,
        robot_id: int,
        speed: float,
        orientation: float,
        sensor_range: float,
        x: float,
        y: float,
    ) -> None:
        """Change a robot's settings; raise ``KeyError`` if there is no such robot."""
        robot = self.get_robot(robot_id)
        if robot is None:
            raise KeyError(f"No robot found with ID: {robot_id}")
        robot.speed = float(speed)
        robot.orientation = float(orientation)
        robot.sensor_range = float(sensor_range)
        robot.position = (float(x), float(y))
        logger.debug(
            "Updating robot with ID: %s to speed: %s, orientation: %s, sensorSize: %s",
            robot_id,
            speed,
            orientation,
            sensor_range,
        )

    def update_obstacle(self, obstacle_id: int, size: float, x: float, y: float) -> None:
        """Resize and move an obstacle; raise ``KeyError`` if there is no such obstacle."""
        obstacle = self.get_obstacle(obstacle_id)
        if obstacle is None:
            raise KeyError(f"No obstacle found with ID: {obstacle_id}")
        logger.debug("Updating obstacle with ID: %s to size: %s", obstacle_id, size)
        obstacle.size = float(size)
        obstacle.position = (float(x), float(y))

    def remove_robot(self, robot_id: int) -> bool:
        """Remove a robot; tell whether it was found."""
        logger.debug("Available Robot IDs: %s", [r.id for r in self.environment.robots])
        removed = self.environment.remove_robot(robot_id)
        logger.info("Robot removed." if removed else "Robot not found.")
        return removed

    def remove_obstacle(self, obstacle_id: int) -> bool:
        """Remove an obstacle; tell whether it was found."""
        removed = self.environment.remove_obstacle(obstacle_id)
        logger.info("Obstacle removed." if removed else "Obstacle not found.")
        return removed

    def send_command(self, command: str) -> None:
        """Pass a command to every remote-controlled robot."""
        for robot in self.environment.find_remote_controlled_robots():
            robot.process_command(command)