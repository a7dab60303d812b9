"""Robots that steer themselves around obstacles, other robots and world edges."""

from __future__ import annotations

import math
from typing import Any

from robosim.geometry import Rect, line_intersects_rect
from robosim.robot import Robot

_SCAN_HALF_ANGLE = 30
_SCAN_STEP = 2
_EDGE_SENSOR_ANGLE = 15.0
_BODY_RADIUS = 10.0
_STEP_LENGTH = 0.5


class AutonomousRobot(Robot):
    """A robot that moves on its own and turns away when something is ahead.

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
        max_width: float,
        max_height: float,
        environment: Any,
    ) -> None:
        if environment is None:
            raise ValueError("environment must not be None")
        super().__init__(robot_id, position, speed, orientation, sensor_range)
        self.environment = environment
        self.max_width = float(max_width)
        self.max_height = float(max_height)
        self.avoidance_angle = float(orientation)
        self.radius = _BODY_RADIUS

    def move(self, max_width: float, max_height: float) -> None:
        """Take one step, turning first if something is in the way."""
        if self.detect_obstacle(max_width, max_height):
            self.handle_collision()
        self._try_move(max_width, max_height)

    def handle_collision(self) -> None:
        """Turn by the avoidance angle."""
        self.rotate(self.avoidance_angle)

    def rotate(self, angle: float) -> None:
        """Turn by ``angle`` degrees, wrapping the heading at 360."""
        self.orientation = math.fmod(self.orientation + angle, 360.0)

    def detect_obstacle(self, max_width: float, max_height: float) -> bool:
        """Tell whether an obstacle, another robot or an edge is within sensor reach."""
        x, y = self.position
        heading = math.radians(self.orientation)
        reach = self.sensor_range + _BODY_RADIUS

        for offset in range(-_SCAN_HALF_ANGLE, _SCAN_HALF_ANGLE + 1, _SCAN_STEP):
            angle = heading + math.radians(offset)
            end_x = x + reach * math.cos(angle)
            end_y = y + reach * math.sin(angle)
            for obstacle in self.environment.obstacles:
                bounds = obstacle.bounds.adjusted(
                    -_BODY_RADIUS, -_BODY_RADIUS, _BODY_RADIUS, _BODY_RADIUS
                )
                if line_intersects_rect(x, y, end_x, end_y, bounds):
                    return True
            for other in self._other_robots():
                ox, oy = other.position
                bounds = Rect(
                    ox - _BODY_RADIUS, oy - _BODY_RADIUS, 2 * _BODY_RADIUS, 2 * _BODY_RADIUS
                )
                if line_intersects_rect(x, y, end_x, end_y, bounds):
                    return True

        return self._is_edge_within_sensor_range(max_width, max_height)

    def can_move_to(self, x: float, y: float, max_width: float, max_height: float) -> bool:
        """Tell whether the straight path to (x, y) stays in the world and hits nothing."""
        if x < 0 or x > max_width or y < 0 or y > max_height:
            return False

        px, py = self.position
        r = self.radius
        for obstacle in self.environment.obstacles:
            bounds = obstacle.bounds.adjusted(-r, -r, r, r)
            if line_intersects_rect(px, py, x, y, bounds):
                return False

        for other in self._other_robots():
            ox, oy = other.position
            bounds = Rect(ox - 2 * r, oy - 2 * r, 4 * r, 4 * r)
            if line_intersects_rect(px, py, x, y, bounds):
                return False
        return True

    def _other_robots(self):
        return (robot for robot in self.environment.robots if robot.id != self.id)

    def _is_edge_within_sensor_range(self, max_width: float, max_height: float) -> bool:
        x, y = self.position
        heading = math.radians(self.orientation)
        spread = math.radians(_EDGE_SENSOR_ANGLE)
        probes = (heading - spread, heading, heading + spread)
        return any(
            self._check_boundary(
                x + self.sensor_range * math.cos(angle),
                y + self.sensor_range * math.sin(angle),
                max_width,
                max_height,
            )
            for angle in probes
        )

    @staticmethod
    def _check_boundary(x: float, y: float, max_width: float, max_height: float) -> bool:
        return x <= 0 or x >= max_width or y <= 0 or y >= max_height

    def _advance_axis(
        self,
        start: float,
        proposed: float,
        reachable,
    ) -> float:
        """Return how far along one axis the robot gets towards ``proposed``."""
        if reachable(proposed):
            return proposed
        actual = start
        step = _STEP_LENGTH if proposed > start else -_STEP_LENGTH
        candidate = start
        while abs(candidate - start) <= abs(self.speed):
            if not reachable(candidate):
                break
            actual = candidate
            candidate += step
        return actual

    def _try_move(self, max_width: float, max_height: float) -> None:
        px, py = self.position
        heading = math.radians(self.orientation)
        proposed_x = px + self.speed * math.cos(heading)
        proposed_y = py + self.speed * math.sin(heading)

        actual_x = self._advance_axis(
            px, proposed_x, lambda nx: self.can_move_to(nx, py, max_width, max_height)
        )
        actual_y = self._advance_axis(
            py, proposed_y, lambda ny: self.can_move_to(px, ny, max_width, max_height)
        )

        if actual_x != px or actual_y != py:
            self._update_position(actual_x, actual_y, max_width, max_height)

    def _update_position(
        self, new_x: float, new_y: float, max_width: float, max_height: float
    ) -> None:
        self.position = (
            max(0.0, min(new_x, max_width)),
            max(0.0, min(new_y, max_height)),
        )