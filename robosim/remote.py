"""Robots driven by start/stop commands, such as those sent from arrow keys."""

from __future__ import annotations

import math
from typing import Any, Callable

from robosim.geometry import Rect, line_intersects_rect
from robosim.robot import Robot

_CLEARANCE = 11
_STEP_LENGTH = 0.5

_COMMANDS: dict[str, tuple[str, bool]] = {
    "start_move_forward": ("moving_forward", True),
    "stop_move_forward": ("moving_forward", False),
    "start_move_backward": ("moving_backward", True),
    "stop_move_backward": ("moving_backward", False),
    "start_turn_left": ("turning_left", True),
    "stop_turn_left": ("turning_left", False),
    "start_turn_right": ("turning_right", True),
    "stop_turn_right": ("turning_right", False),
}


class RemoteControlledRobot(Robot):
    """A robot that moves and turns only while a command tells it to.

    ``environment`` is any object exposing ``robots`` and ``obstacles``
    sequences; the robot consults it on every step.
    """

    def __init__(
        self,
        robot_id: int,
        position: tuple[float, float],
        speed: float,
        orientation: float,
        sensor_range: float,
        environment: Any,
    ) -> None:
        if environment is None:
            raise ValueError("environment must not be None")
        super().__init__(robot_id, position, speed, orientation, sensor_range)
        self.environment = environment
        self.current_speed = self.speed
        self.avoidance_angle = self.orientation
        self.moving_forward = False
        self.moving_backward = False
        self.turning_left = False
        self.turning_right = False

    def process_command(self, command: str) -> None:
        """Apply a ``start_*``/``stop_*`` command; unknown commands are ignored."""
        action = _COMMANDS.get(command)
        if action is not None:
            flag, value = action
            setattr(self, flag, value)

    def update(self) -> None:
        """Set speed and heading from the commands currently held."""
        if self.moving_forward:
            self.move_forward()
        elif self.moving_backward:
            self.move_backward()
        else:
            self.current_speed = 0.0

        if self.turning_left:
            self.turn_left()
        elif self.turning_right:
            self.turn_right()

    def move_forward(self) -> None:
        self.current_speed = self.speed

    def move_backward(self) -> None:
        self.current_speed = -self.speed

    def turn_left(self) -> None:
        self.rotate(-self.avoidance_angle)

    def turn_right(self) -> None:
        self.rotate(self.avoidance_angle)

    def rotate(self, angle: float) -> None:
        """Turn by ``angle`` degrees, wrapping the heading at 360."""
        self.orientation = math.fmod(self.orientation + angle, 360.0)

    def handle_collision(self) -> None:
        """Remote robots stop where they are; there is nothing else to do."""

    def move(self, max_width: float, max_height: float) -> None:
        """Advance at the current speed, stopping short of anything in the way."""
        px, py = self.position
        heading = math.radians(self.orientation)
        proposed_x = px + self.current_speed * math.cos(heading)
        proposed_y = py + self.current_speed * math.sin(heading)

        actual_x = self._advance_axis(
            px,
            proposed_x,
            abs(self.current_speed),
            lambda nx: self.can_move_to(nx, py, max_width, max_height),
        )
        actual_y = self._advance_axis(
            py,
            proposed_y,
            abs(self.speed),
            lambda ny: self.can_move_to(px, ny, max_width, max_height),
        )

        if actual_x != px or actual_y != py:
            self.position = (
                max(0.0, min(actual_x, max_width)),
                max(0.0, min(actual_y, max_height)),
            )

    def can_move_to(self, x: float, y: float, max_width: float, max_height: float) -> bool:
        """Tell whether the straight path to (x, y) stays in the world and hits nothing."""
        if x < 0 or x > max_width or y < 0 or y > max_height:
            return False

        px, py = self.position
        r = _CLEARANCE
        for obstacle in self.environment.obstacles:
            bounds = obstacle.bounds.adjusted(-r, -r, r, r)
            if line_intersects_rect(px, py, x, y, bounds):
                return False

        for other in self.environment.robots:
            if other.id == self.id:
                continue
            ox, oy = other.position
            bounds = Rect(ox - 2 * r, oy - 2 * r, 4 * r, 4 * r)
            if line_intersects_rect(px, py, x, y, bounds):
                return False
        return True

    @staticmethod
    def _advance_axis(
        start: float,
        proposed: float,
        limit: float,
        reachable: Callable[[float], bool],
    ) -> float:
        """Return how far along one axis the robot gets towards ``proposed``."""
        if reachable(proposed):
            return proposed
        actual = start
        step = _STEP_LENGTH if proposed > start else -_STEP_LENGTH
        candidate = start
        while abs(candidate - start) <= limit:
            if not reachable(candidate):
                break
            actual = candidate
            candidate += step
        return actual